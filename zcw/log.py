"""Logging setup for ZCW trace output."""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Optional

LOGGER_NAME = "zcw"

LEVEL_MAP = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARNING,
    'warning': logging.WARNING,
    'error': logging.ERROR,
}


def resolve_level(level: Optional[str]) -> int:
    name = (level or os.getenv('ZCW_LOG_LEVEL', 'info')).lower()
    return LEVEL_MAP.get(name, logging.INFO)


def configure_logging(level: Optional[str] = None, *, stream: Optional[IO[str]] = None) -> logging.Logger:
    """Configure the ``zcw`` logger used for program and dispatch traces."""
    zcw_logger = logging.getLogger(LOGGER_NAME)
    zcw_logger.setLevel(resolve_level(level))

    # Add console handler if not already present
    if not zcw_logger.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        zcw_logger.addHandler(handler)
        zcw_logger.propagate = False

    return zcw_logger


__all__ = ["configure_logging", "resolve_level", "LOGGER_NAME", "LEVEL_MAP"]
