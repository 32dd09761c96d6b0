"""Method lookup on values bound in the environment.

``obj.method(...)`` only works for the host-object variants listed here;
arbitrary Python attributes are never looked up.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Mapping, Optional

from .registry import CoreRegistry


class HostObject(ABC):
    """Base class for host objects that scripts may call methods on."""

    @abstractmethod
    def method_names(self) -> List[str]:
        """Names of the methods scripts may call."""

    def get_method(self, name: str) -> Optional[Callable[..., Any]]:
        if name not in self.method_names():
            return None
        method = getattr(self, name, None)
        return method if callable(method) else None

    @staticmethod
    def from_mapping(methods: Mapping[str, Callable[..., Any]]) -> "HostObject":
        return MappingHostObject(methods)


class MappingHostObject(HostObject):
    """Host object backed by an explicit name-to-callable table."""

    def __init__(self, methods: Mapping[str, Callable[..., Any]]) -> None:
        self._methods: Dict[str, Callable[..., Any]] = dict(methods)

    def method_names(self) -> List[str]:
        return list(self._methods)

    def get_method(self, name: str) -> Optional[Callable[..., Any]]:
        method = self._methods.get(name)
        return method if callable(method) else None

    def __repr__(self) -> str:
        return f"MappingHostObject({self.method_names()!r})"


def resolve_method(value: Any, name: str) -> Optional[Callable[..., Any]]:
    """Return the callable ``value`` exposes under ``name``, or None."""
    if isinstance(value, HostObject):
        return value.get_method(name)

    if isinstance(value, CoreRegistry):
        return value.get_method(name)

    if isinstance(value, Mapping):
        candidate = value.get(name)
        return candidate if callable(candidate) else None

    return None


def method_names(value: Any) -> List[str]:
    """List the method names a value exposes."""
    if isinstance(value, HostObject):
        return value.method_names()

    if isinstance(value, CoreRegistry):
        return value.get_available_methods()

    if isinstance(value, Mapping):
        return [key for key, item in value.items() if isinstance(key, str) and callable(item)]

    return []


__all__ = ["HostObject", "MappingHostObject", "resolve_method", "method_names"]
