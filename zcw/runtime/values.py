"""Runtime value helpers.

Values are plain Python objects: ``str``, ``float``/``int``, ``bool``,
``None``, ``list`` of values, or opaque host objects.
"""

from __future__ import annotations

import json
from typing import Any


class UnresolvedIdentifier(str):
    """An identifier expression that had no binding, evaluated to its name.

    ``click(target)`` with ``target`` unbound passes ``"target"``. The
    subclass keeps that fallback visible to hosts and tests while still
    behaving as the plain string.
    """

    @property
    def name(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return f"UnresolvedIdentifier({str.__repr__(self)})"


class _Undefined:
    """Marker returned when reading a variable that is not bound."""

    _instance = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()


def render_value(value: Any) -> str:
    """Stringify a value for trace output, JSON where possible."""
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(value)


__all__ = ["UnresolvedIdentifier", "UNDEFINED", "render_value"]
