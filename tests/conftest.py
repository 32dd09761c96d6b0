"""Shared pytest fixtures and configuration for all tests."""

import asyncio
import logging
from typing import Any, List, Tuple

import pytest

from zcw.log import LOGGER_NAME
from zcw.runtime import CoreRegistry, Interpreter


class CallRecorder:
    """Records every host call as ``(name, args)`` in order."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, List[Any]]] = []

    def method(self, name: str, result: Any = True):
        def _method(*args: Any) -> Any:
            self.calls.append((name, list(args)))
            return result
        _method.__name__ = name
        return _method

    def async_method(self, name: str, result: Any = True, delay: float = 0.0):
        async def _method(*args: Any) -> Any:
            self.calls.append((name, list(args)))
            if delay:
                await asyncio.sleep(delay)
            return result
        _method.__name__ = name
        return _method

    @property
    def names(self) -> List[str]:
        return [name for name, _ in self.calls]


@pytest.fixture(autouse=True)
def zcw_logger():
    """Give each test an unconfigured ``zcw`` logger that propagates to caplog."""
    zcw_logger = logging.getLogger(LOGGER_NAME)
    saved = (list(zcw_logger.handlers), zcw_logger.level, zcw_logger.propagate)
    zcw_logger.handlers = []
    zcw_logger.setLevel(logging.NOTSET)
    zcw_logger.propagate = True
    yield zcw_logger
    zcw_logger.handlers, level, zcw_logger.propagate = saved
    zcw_logger.setLevel(level)


@pytest.fixture
def recorder() -> CallRecorder:
    return CallRecorder()


@pytest.fixture
def registry(recorder: CallRecorder) -> CoreRegistry:
    """Registry with ``visit``, ``a`` and ``b`` recording their calls."""
    core = CoreRegistry()
    core.add_method("visit", recorder.method("visit", result="visited"))
    core.add_method("a", recorder.method("a"))
    core.add_method("b", recorder.method("b"))
    return core


@pytest.fixture
def interpreter(registry: CoreRegistry) -> Interpreter:
    return Interpreter(registry)
