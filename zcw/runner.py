"""Embedding entry point tying lexer, parser and interpreter together."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from .config import RuntimeConfig
from .errors import format_error
from .lang.ast import format_ast
from .lang.lexer import tokenize
from .lang.parser import parse
from .log import LOGGER_NAME, configure_logging, resolve_level
from .runtime.interpreter import Interpreter
from .runtime.registry import CoreRegistry

logger = logging.getLogger(__name__)


class ZCWRuntime:
    """Run ZCW source text against one interpreter.

    Variables bound on ``runtime.interpreter`` stay bound across
    ``run_code`` calls.
    """

    def __init__(self, core: Optional[CoreRegistry] = None, config: Optional[RuntimeConfig] = None):
        self.config = config or RuntimeConfig()
        self.core = core if core is not None else CoreRegistry(config=self.config.core_config())
        self._interpreter = Interpreter(self.core, trace=self.config.trace)
        configure_logging(self._log_level())

    @property
    def interpreter(self) -> Interpreter:
        return self._interpreter

    async def run_code(self, source: str) -> None:
        """Tokenize, parse and execute ``source``."""
        try:
            tokens = tokenize(source)
            if self.config.debug:
                for token in tokens[:-1]:
                    logger.debug("Token(%s, %r)", token.type.name, token.value)

            program = parse(tokens)
            if self.config.debug:
                logger.debug("AST:\n%s", format_ast(program))

            await self._interpreter.interpret(program)
        except Exception as exc:
            logger.error("Execution error: %s", format_error(exc))
            raise

    def run(self, source: str) -> None:
        """Synchronous wrapper around ``run_code``."""
        asyncio.run(self.run_code(source))

    def set_debug_mode(self, enabled: bool) -> None:
        """Toggle token and AST dumps and the matching log level."""
        self.config.debug = enabled
        logging.getLogger(LOGGER_NAME).setLevel(resolve_level(self._log_level()))

    def _log_level(self) -> str:
        return "debug" if self.config.debug else self.config.log_level


async def run_code(source: str, core: Optional[CoreRegistry] = None, config: Optional[RuntimeConfig] = None) -> Interpreter:
    """Run ``source`` on a fresh runtime and return its interpreter."""
    runtime = ZCWRuntime(core=core, config=config)
    await runtime.run_code(source)
    return runtime.interpreter


__all__ = ["ZCWRuntime", "run_code"]
