"""
Core method registry exposed to scripts under the ``core`` namespace.

A ``CoreRegistry`` maps method names to host callables. The embedder builds
one, registers whatever host functions scripts may use, and hands it to an
``Interpreter``. The interpreter only reads from it.

Example:
    registry = CoreRegistry()
    registry.add_method("visit", open_url, description="Open a web page")

    interpreter = Interpreter(registry)
    await interpreter.interpret(parse_source('core.visit("https://example.com");'))

Host methods may be plain functions or coroutine functions; results that are
awaitable are awaited before the call returns.
"""

from __future__ import annotations

import inspect
import logging
import re
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from ..errors import RegistryError, UnknownCoreMethod

logger = logging.getLogger(__name__)

CoreMethod = Callable[..., Any]

_METHOD_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class CoreConfig(BaseModel):
    """Settings shared with host methods.

    The interpreter never enforces ``timeout``; host methods that talk to
    slow backends read it themselves.
    """

    model_config = ConfigDict(extra="forbid")

    debug: bool = Field(default=False, description="Verbose host method output")
    timeout: float = Field(default=5.0, gt=0, description="Host operation timeout in seconds")


class CoreMethodInfo(BaseModel):
    """Introspection record for a registered method."""

    name: str
    description: Optional[str] = None
    is_async: bool = False


async def invoke(method: CoreMethod, args: Sequence[Any] = ()) -> Any:
    """Call a host method with positional args, awaiting awaitable results."""
    result = method(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


def validate_method_name(name: str) -> None:
    if not isinstance(name, str) or not _METHOD_NAME.match(name):
        raise RegistryError(
            message=f"Invalid core method name: {name!r}",
            method_name=name if isinstance(name, str) else None,
        )


class CoreRegistry:
    """
    Registry of host callables reachable as ``core.<name>(...)``.

    Methods:
        add_method(): Register or replace a method
        remove_method(): Remove a method, returns whether it existed
        has_method(): Check if a method exists
        get_method(): Retrieve a callable (None if absent)
        get_available_methods(): Names in registration order
        describe(): Introspection record for a method
        call_method(): Invoke a method, awaiting async results
    """

    def __init__(
        self,
        methods: Optional[Mapping[str, CoreMethod]] = None,
        config: Optional[CoreConfig] = None,
    ) -> None:
        self._methods: Dict[str, CoreMethod] = {}
        self._descriptions: Dict[str, Optional[str]] = {}
        self._config = config or CoreConfig()
        for name, method in (methods or {}).items():
            self.add_method(name, method)

    def add_method(self, name: str, method: CoreMethod, *, description: Optional[str] = None) -> None:
        """
        Register a method, replacing any existing one with the same name.

        Raises:
            RegistryError: If the name is not an identifier or method is not callable
        """
        validate_method_name(name)
        if not callable(method):
            raise RegistryError(
                message=f"Core method '{name}' must be callable, got {type(method).__name__}",
                method_name=name,
            )
        if name in self._methods:
            logger.debug("Replacing core method '%s'", name)
        self._methods[name] = method
        self._descriptions[name] = description or inspect.getdoc(method)

    def remove_method(self, name: str) -> bool:
        if name in self._methods:
            del self._methods[name]
            self._descriptions.pop(name, None)
            return True
        return False

    def has_method(self, name: str) -> bool:
        return name in self._methods

    def get_method(self, name: str) -> Optional[CoreMethod]:
        return self._methods.get(name)

    def get_available_methods(self) -> List[str]:
        return list(self._methods)

    def describe(self, name: str) -> CoreMethodInfo:
        method = self._methods.get(name)
        if method is None:
            raise self._unknown(name)
        return CoreMethodInfo(
            name=name,
            description=self._descriptions.get(name),
            is_async=inspect.iscoroutinefunction(method),
        )

    async def call_method(self, name: str, args: Sequence[Any] = ()) -> Any:
        """
        Invoke a registered method with positional arguments.

        Raises:
            UnknownCoreMethod: If no method with this name is registered
        """
        method = self._methods.get(name)
        if method is None:
            raise self._unknown(name)
        return await invoke(method, args)

    def get_config(self) -> CoreConfig:
        return self._config.model_copy()

    def update_config(self, **changes: Any) -> CoreConfig:
        """Validate and apply configuration changes, returning the new config."""
        self._config = CoreConfig(**{**self._config.model_dump(), **changes})
        return self.get_config()

    def _unknown(self, name: str) -> UnknownCoreMethod:
        return UnknownCoreMethod(
            message=f"Core method not found: {name}",
            method_name=name,
            available=self.get_available_methods(),
        )

    def __contains__(self, name: object) -> bool:
        return name in self._methods

    def __len__(self) -> int:
        return len(self._methods)

    def __repr__(self) -> str:
        return f"CoreRegistry(methods={self.get_available_methods()!r})"


__all__ = [
    "CoreRegistry",
    "CoreConfig",
    "CoreMethodInfo",
    "CoreMethod",
    "validate_method_name",
    "invoke",
]
