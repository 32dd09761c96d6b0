"""ZCW language front-end: lexer, AST and parser.

Public API:
    tokenize(source) -> List[Token]
    parse(tokens) -> ASTNode
    parse_source(source) -> ASTNode
"""

from .ast import ASTNode, NodeType, format_ast
from .lexer import Lexer, Token, TokenType, tokenize
from .parser import Parser, parse, parse_source

__all__ = [
    "ASTNode",
    "NodeType",
    "format_ast",
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    "Parser",
    "parse",
    "parse_source",
]
