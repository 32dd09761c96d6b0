"""Tree-walking interpreter for ZCW programs."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Sequence

from ..errors import (
    UndefinedVariable,
    UnknownCoreMethod,
    UnknownMethod,
    UnknownNodeKind,
    UnsupportedCallTarget,
)
from ..lang.ast import ASTNode, NodeType
from .dispatch import method_names, resolve_method
from .environment import Environment
from .registry import CoreRegistry, invoke
from .values import UnresolvedIdentifier, render_value

__all__ = ["Interpreter"]

logger = logging.getLogger(__name__)

INCOMPLETE_CALL = "INCOMPLETE_CALL"


class Interpreter:
    """Execute a ``PROGRAM`` node against a core registry.

    Statements run strictly in order. Host methods may be coroutine
    functions; each call is awaited before the next statement starts.
    """

    def __init__(self, core: CoreRegistry, *, trace: bool = True):
        """
        Initialize interpreter.

        Args:
            core: Registry serving ``core.<name>(...)`` calls
            trace: Emit a log line before every dispatch
        """
        self._core = core
        self._environment = Environment()
        self.trace = trace

    @property
    def core(self) -> CoreRegistry:
        return self._core

    @property
    def environment(self) -> Environment:
        return self._environment

    async def interpret(self, program: ASTNode) -> None:
        """Run every top-level statement of ``program`` in order."""
        logger.info("Starting program execution...")

        for statement in program.children:
            await self.evaluate(statement)

        logger.info("Program execution finished")

    async def evaluate(self, node: ASTNode) -> Any:
        """Evaluate a node and return its value."""
        if node.type == NodeType.PROGRAM:
            for child in node.children:
                await self.evaluate(child)
            return None

        if node.type == NodeType.CALL:
            return await self._eval_call(node)

        if node.type in (NodeType.STRING, NodeType.NUMBER):
            return node.value

        if node.type == NodeType.IDENTIFIER:
            return self._eval_identifier(node)

        raise UnknownNodeKind(
            message=f"Unknown node type: {node.type.name}",
            node_type=node.type.name,
        )

    def _eval_identifier(self, node: ASTNode) -> Any:
        name = str(node.value)
        if self._environment.contains(name):
            return self._environment.lookup(name)
        # Unbound identifiers stand for their own name
        return UnresolvedIdentifier(name)

    async def _eval_call(self, node: ASTNode) -> Any:
        if len(node.children) < 2:
            first = node.children[0] if node.children else None
            # click(); parses to a lone METHOD child
            if first is not None and first.type == NodeType.METHOD:
                raise self._unsupported_target(first)
            raise UnsupportedCallTarget(
                message="Call node has no method to invoke",
                node_type=INCOMPLETE_CALL,
            )

        object_node, method_node, *arg_nodes = node.children

        args: List[Any] = []
        for arg in arg_nodes:
            args.append(await self.evaluate(arg))

        method_name = str(method_node.value)

        if object_node.type == NodeType.CORE:
            return await self._call_core(method_name, args)

        if object_node.type == NodeType.IDENTIFIER:
            return await self._call_object(str(object_node.value), method_name, args)

        raise self._unsupported_target(object_node)

    async def _call_core(self, method_name: str, args: Sequence[Any]) -> Any:
        method = self._core.get_method(method_name)
        if method is None:
            raise UnknownCoreMethod(
                message=f"Core method not found: {method_name}",
                method_name=method_name,
                available=self._core.get_available_methods(),
            )

        return await self._dispatch(f"core.{method_name}", method, args)

    async def _call_object(self, object_name: str, method_name: str, args: Sequence[Any]) -> Any:
        if not self._environment.contains(object_name):
            raise UndefinedVariable(
                message=f"Undefined variable: {object_name}",
                name=object_name,
                available=self._environment.names(),
            )

        target = self._environment.lookup(object_name)
        method = resolve_method(target, method_name)
        if method is None:
            raise UnknownMethod(
                message=f"Object {object_name} has no method {method_name}",
                object_name=object_name,
                method_name=method_name,
                available=method_names(target),
            )

        return await self._dispatch(f"{object_name}.{method_name}", method, args)

    async def _dispatch(self, label: str, method: Callable[..., Any], args: Sequence[Any]) -> Any:
        if self.trace:
            logger.info("Calling %s(%s)", label, ", ".join(render_value(arg) for arg in args))

        try:
            return await invoke(method, args)
        except Exception as exc:
            logger.error("Error while executing %s: %s", label, exc)
            raise

    def _unsupported_target(self, object_node: ASTNode) -> UnsupportedCallTarget:
        node_type = object_node.type.name
        return UnsupportedCallTarget(
            message=f"Cannot call a method on node type: {node_type}",
            node_type=node_type,
        )

    # ====================================================================
    # Embedding API
    # ====================================================================

    def set_variable(self, name: str, value: Any) -> None:
        self._environment.bind(name, value)

    def get_variable(self, name: str) -> Any:
        """Return the bound value, or ``UNDEFINED`` when absent."""
        return self._environment.lookup(name)

    def get_variables(self) -> Dict[str, Any]:
        return self._environment.snapshot()

    def clear_variables(self) -> None:
        self._environment.clear()

    def has_variable(self, name: str) -> bool:
        return self._environment.contains(name)
