"""Unified error handling for the ZCW pipeline.

Every stage fails fast with one of these structured errors:

- Lexing: ``UnexpectedCharacter``
- Parsing: ``UnexpectedToken``
- Interpretation: ``UnknownCoreMethod``, ``UndefinedVariable``,
  ``UnknownMethod``, ``UnsupportedCallTarget``, ``UnknownNodeKind``

Lexer and parser errors carry line and column information.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ZCWError(Exception):
    """Base class for all ZCW errors."""

    message: str
    line: Optional[int] = None
    column: Optional[int] = None
    code: str = "ZCW_ERROR"

    def __str__(self) -> str:
        """Format error message with location."""
        parts = []

        if self.line is not None:
            if self.column is not None:
                parts.append(f"Line {self.line}:{self.column}")
            else:
                parts.append(f"Line {self.line}")

        parts.append(f"[{self.code}] {self.message}")

        return " | ".join(parts) + self._format_details()

    def details(self) -> List[str]:
        return []

    def _format_details(self) -> str:
        details = self.details()
        if details:
            return "\n  " + "\n  ".join(details)
        return ""


@dataclass
class ZCWSyntaxError(ZCWError):
    """Lexing or parsing error with expected/found context."""

    expected: List[str] = field(default_factory=list)
    found: Optional[str] = None
    suggestion: Optional[str] = None
    code: str = "SYNTAX_ERROR"

    def details(self) -> List[str]:
        details = []

        if self.expected:
            if len(self.expected) == 1:
                details.append(f"Expected: {self.expected[0]}")
            else:
                details.append(f"Expected one of: {', '.join(self.expected)}")

        if self.found:
            details.append(f"Found: {self.found}")

        if self.suggestion:
            details.append(f"Suggestion: {self.suggestion}")

        return details


@dataclass
class UnexpectedCharacter(ZCWSyntaxError):
    """The lexer met a character no lexing rule accepts."""

    character: str = ""
    code: str = "UNEXPECTED_CHARACTER"


@dataclass
class UnexpectedToken(ZCWSyntaxError):
    """The parser met a token the grammar does not allow here."""

    code: str = "UNEXPECTED_TOKEN"


@dataclass
class ZCWRuntimeError(ZCWError):
    """Base class for interpretation errors."""

    code: str = "RUNTIME_ERROR"


@dataclass
class UnknownCoreMethod(ZCWRuntimeError):
    """``core.<name>`` was called but the registry has no such method."""

    method_name: str = ""
    available: List[str] = field(default_factory=list)
    code: str = "UNKNOWN_CORE_METHOD"

    def details(self) -> List[str]:
        if self.available:
            return [f"Available core methods: {', '.join(self.available)}"]
        return ["No core methods are registered"]


@dataclass
class UndefinedVariable(ZCWRuntimeError):
    """A call targeted a variable that is not bound."""

    name: str = ""
    available: List[str] = field(default_factory=list)
    code: str = "UNDEFINED_VARIABLE"

    def details(self) -> List[str]:
        if self.available:
            return [f"Bound variables: {', '.join(self.available[:5])}"]
        return []


@dataclass
class UnknownMethod(ZCWRuntimeError):
    """The bound value exposes no invocable method with the requested name."""

    object_name: str = ""
    method_name: str = ""
    available: List[str] = field(default_factory=list)
    code: str = "UNKNOWN_METHOD"

    def details(self) -> List[str]:
        if self.available:
            return [f"Methods on {self.object_name}: {', '.join(self.available)}"]
        return []


@dataclass
class UnsupportedCallTarget(ZCWRuntimeError):
    """The call's first child is neither ``core`` nor an identifier."""

    node_type: str = ""
    code: str = "UNSUPPORTED_CALL_TARGET"


@dataclass
class UnknownNodeKind(ZCWRuntimeError):
    """The interpreter has no evaluation rule for this node type."""

    node_type: str = ""
    code: str = "UNKNOWN_NODE_KIND"


@dataclass
class RegistryError(ZCWError):
    """Invalid core registry mutation (bad name or non-callable)."""

    method_name: Optional[str] = None
    code: str = "REGISTRY_ERROR"


def format_error(error: BaseException) -> str:
    """Render an error as a single user-facing line."""
    if isinstance(error, ZCWError):
        return str(error).splitlines()[0]
    message = str(error) or type(error).__name__
    return f"{type(error).__name__}: {message}"


__all__ = [
    "ZCWError",
    "ZCWSyntaxError",
    "UnexpectedCharacter",
    "UnexpectedToken",
    "ZCWRuntimeError",
    "UnknownCoreMethod",
    "UndefinedVariable",
    "UnknownMethod",
    "UnsupportedCallTarget",
    "UnknownNodeKind",
    "RegistryError",
    "format_error",
]
