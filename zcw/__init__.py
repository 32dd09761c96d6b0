"""
ZCW scripting language core.

A ZCW script is a sequence of method calls::

    // open the start page
    core.visit("https://example.com");
    page.click("New");

The package is organised into:

* ``lang`` – lexer, AST node types and the recursive descent parser.
* ``runtime`` – the tree-walking interpreter, its variable environment,
  the ``core`` method registry and method lookup on host objects.
* ``runner`` – a small embedding helper running source text end to end.
* ``config`` / ``log`` – runtime settings and trace logging setup.

Concrete host methods (browser automation and similar) are supplied by the
embedder through a ``CoreRegistry``.
"""

from importlib import metadata as _metadata

from .errors import (
    RegistryError,
    UndefinedVariable,
    UnexpectedCharacter,
    UnexpectedToken,
    UnknownCoreMethod,
    UnknownMethod,
    UnknownNodeKind,
    UnsupportedCallTarget,
    ZCWError,
    ZCWRuntimeError,
    ZCWSyntaxError,
)
from .lang import parse, parse_source, tokenize
from .runtime import CoreRegistry, HostObject, Interpreter
from .runner import ZCWRuntime, run_code

try:  # pragma: no cover - metadata lookup for installed package
    __version__ = _metadata.version("zcw")
except _metadata.PackageNotFoundError:  # pragma: no cover - source tree
    __version__ = "1.0.0"

__all__ = [
    "__version__",
    "tokenize",
    "parse",
    "parse_source",
    "CoreRegistry",
    "HostObject",
    "Interpreter",
    "ZCWRuntime",
    "run_code",
    "ZCWError",
    "ZCWSyntaxError",
    "ZCWRuntimeError",
    "UnexpectedCharacter",
    "UnexpectedToken",
    "UnknownCoreMethod",
    "UndefinedVariable",
    "UnknownMethod",
    "UnsupportedCallTarget",
    "UnknownNodeKind",
    "RegistryError",
]
