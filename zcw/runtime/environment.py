"""Variable environment owned by a single interpreter."""

from __future__ import annotations

from typing import Any, Dict, Iterator, List

from .values import UNDEFINED


class Environment:
    """Mutable name-to-value binding table for one execution.

    The grammar has no assignment statement; bindings come only from the
    embedding host.
    """

    def __init__(self) -> None:
        self._bindings: Dict[str, Any] = {}

    def bind(self, name: str, value: Any) -> None:
        self._bindings[name] = value

    def lookup(self, name: str) -> Any:
        """Return the bound value, or ``UNDEFINED`` when absent."""
        return self._bindings.get(name, UNDEFINED)

    def contains(self, name: str) -> bool:
        return name in self._bindings

    def snapshot(self) -> Dict[str, Any]:
        """Return a shallow copy of all bindings."""
        return dict(self._bindings)

    def names(self) -> List[str]:
        return list(self._bindings)

    def clear(self) -> None:
        self._bindings.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._bindings))

    def __len__(self) -> int:
        return len(self._bindings)


__all__ = ["Environment"]
