"""ZCW runtime: environment, core registry, host-object dispatch, interpreter."""

from .dispatch import HostObject, MappingHostObject, method_names, resolve_method
from .environment import Environment
from .interpreter import Interpreter
from .registry import CoreConfig, CoreMethodInfo, CoreRegistry
from .values import UNDEFINED, UnresolvedIdentifier, render_value

__all__ = [
    "HostObject",
    "MappingHostObject",
    "method_names",
    "resolve_method",
    "Environment",
    "Interpreter",
    "CoreConfig",
    "CoreMethodInfo",
    "CoreRegistry",
    "UNDEFINED",
    "UnresolvedIdentifier",
    "render_value",
]
