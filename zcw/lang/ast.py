"""AST node types produced by the parser and consumed by the interpreter."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
import json
from typing import List, Optional, Tuple, Union


class NodeType(Enum):
    PROGRAM = auto()
    CALL = auto()
    CORE = auto()
    METHOD = auto()
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()
    ARRAY = auto()


NodeValue = Union[str, float, None]


@dataclass(frozen=True)
class ASTNode:
    """A single AST node.

    ``value`` holds the payload of ``CORE``, ``METHOD``, ``IDENTIFIER``,
    ``STRING`` and ``NUMBER`` nodes. ``children`` depends on the type:

    - ``PROGRAM``: top-level ``CALL`` statements
    - ``CALL``: object node, ``METHOD`` node, then argument expressions.
      Direct calls (``click("x");``) have no object node, so the
      ``METHOD`` node comes first.
    - ``ARRAY``: element expressions
    """

    type: NodeType
    value: NodeValue = None
    children: Tuple["ASTNode", ...] = ()

    def __repr__(self) -> str:
        if self.value is None:
            return f"ASTNode({self.type.name}, children={len(self.children)})"
        return f"ASTNode({self.type.name}, {self.value!r}, children={len(self.children)})"


def make_node(node_type: NodeType, value: NodeValue = None, children: Optional[List[ASTNode]] = None) -> ASTNode:
    return ASTNode(type=node_type, value=value, children=tuple(children or ()))


def format_ast(node: ASTNode, depth: int = 0) -> str:
    """Render an indented tree, one node per line, for debug output."""
    lines: List[str] = []
    _format_into(node, depth, lines)
    return "\n".join(lines)


def _format_into(node: ASTNode, depth: int, lines: List[str]) -> None:
    indent = "  " * depth
    if node.value is None:
        lines.append(f"{indent}{node.type.name}")
    else:
        lines.append(f"{indent}{node.type.name}({json.dumps(node.value, ensure_ascii=False)})")
    for child in node.children:
        _format_into(child, depth + 1, lines)


__all__ = ["ASTNode", "NodeType", "make_node", "format_ast"]
