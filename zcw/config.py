"""Runtime configuration for embedding ZCW.

Settings come from, in increasing precedence: defaults, a ``zcw.toml``
(``[runtime]`` table) or ``.zcwrc`` (JSON, ``runtime`` object) file in the
workspace root, then ``ZCW_*`` environment variables.
"""

from __future__ import annotations

import json
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .runtime.registry import CoreConfig

CONFIG_FILE_NAMES = ("zcw.toml", ".zcwrc")

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass
class RuntimeConfig:
    """Resolved runtime settings."""

    debug: bool = False
    timeout: float = 5.0
    log_level: str = "info"
    trace: bool = True
    raw: Dict[str, Any] = field(default_factory=dict)

    def core_config(self) -> CoreConfig:
        return CoreConfig(debug=self.debug, timeout=self.timeout)


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    return json.loads(content)


def _read_toml_config(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _parse_bool(value: Any, *, setting: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUTHY:
        return True
    if text in _FALSY:
        return False
    raise ValueError(f"Invalid boolean for '{setting}': {value!r}")


def _parse_runtime(data: Dict[str, Any]) -> RuntimeConfig:
    section = data.get("runtime") or {}
    if not isinstance(section, dict):
        raise ValueError("The 'runtime' configuration section must be a table")

    return RuntimeConfig(
        debug=_parse_bool(section.get("debug", RuntimeConfig.debug), setting="debug"),
        timeout=float(section.get("timeout", RuntimeConfig.timeout)),
        log_level=str(section.get("log_level") or RuntimeConfig.log_level).lower(),
        trace=_parse_bool(section.get("trace", RuntimeConfig.trace), setting="trace"),
        raw=data,
    )


def apply_env_overrides(config: RuntimeConfig, environ: Mapping[str, str]) -> RuntimeConfig:
    if "ZCW_DEBUG" in environ:
        config.debug = _parse_bool(environ["ZCW_DEBUG"], setting="ZCW_DEBUG")
    if environ.get("ZCW_LOG_LEVEL"):
        config.log_level = environ["ZCW_LOG_LEVEL"].lower()
    if environ.get("ZCW_TIMEOUT"):
        config.timeout = float(environ["ZCW_TIMEOUT"])
    if "ZCW_TRACE" in environ:
        config.trace = _parse_bool(environ["ZCW_TRACE"], setting="ZCW_TRACE")
    return config


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        return explicit if explicit.exists() else None
    for candidate in CONFIG_FILE_NAMES:
        path = root / candidate
        if path.exists():
            return path
    return None


def load_runtime_config(
    root: Optional[Path] = None,
    explicit: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> RuntimeConfig:
    root = (root or Path.cwd()).resolve()
    config_path = locate_config_file(root, explicit)

    if config_path is None:
        config = RuntimeConfig()
    elif config_path.suffix == ".toml":
        config = _parse_runtime(_read_toml_config(config_path))
    else:
        config = _parse_runtime(_read_json_config(config_path))

    config = apply_env_overrides(config, os.environ if environ is None else environ)
    if config.timeout <= 0:
        raise ValueError(f"timeout must be positive, got {config.timeout}")
    return config


__all__ = [
    "RuntimeConfig",
    "CONFIG_FILE_NAMES",
    "apply_env_overrides",
    "locate_config_file",
    "load_runtime_config",
]
