"""Recursive descent parser for the ZCW language.

Grammar::

    Program    = { Statement } , EOF ;
    Statement  = ";"
               | "core" , "." , Identifier , "(" , Arguments , ")" , ";"
               | Identifier , "(" , Arguments , ")" , ";"
               | Identifier , "." , Identifier , "(" , Arguments , ")" , ";" ;
    Arguments  = [ Expression , { "," , Expression } ] ;
    Expression = String | Number | Identifier | Array ;
    Array      = "[" , [ Expression , { "," , Expression } ] , "]" ;

One token of lookahead, no backtracking, no error recovery.
"""

from __future__ import annotations
from typing import List, Optional, Sequence

from ..errors import UnexpectedToken
from .ast import ASTNode, NodeType, make_node
from .lexer import Token, TokenType, tokenize


class Parser:
    """Parser turning a token list into a ``PROGRAM`` node."""

    def __init__(self, tokens: Sequence[Token]):
        self.tokens = list(tokens)
        self.pos = 0

    # ====================================================================
    # Token Management
    # ====================================================================

    def peek(self, offset: int = 0) -> Optional[Token]:
        """Peek at token without consuming."""
        pos = self.pos + offset
        if pos < len(self.tokens):
            return self.tokens[pos]
        return None

    def current(self) -> Optional[Token]:
        return self.peek(0)

    def advance(self) -> Token:
        """Consume and return current token."""
        token = self.current()
        if token is None:
            raise self.error("Unexpected end of input", expected=[])
        self.pos += 1
        return token

    def check(self, token_type: TokenType) -> bool:
        token = self.current()
        return token is not None and token.type == token_type

    def match(self, token_type: TokenType) -> Optional[Token]:
        """Consume and return the current token if it has the given type."""
        if self.check(token_type):
            return self.advance()
        return None

    def expect(self, token_type: TokenType) -> Token:
        """Expect the given token type and consume it."""
        token = self.match(token_type)
        if token is None:
            raise self.error(
                f"Expected {token_type.name} but found {self._found_label()}",
                expected=[token_type.name],
                suggestion=self._suggest_token_fix(token_type),
            )
        return token

    def error(
        self,
        message: str,
        *,
        expected: List[str],
        suggestion: Optional[str] = None,
    ) -> UnexpectedToken:
        """Create a syntax error at the current position."""
        token = self.current()
        return UnexpectedToken(
            message=message,
            line=token.line if token else None,
            column=token.column if token else None,
            expected=expected,
            found=self._found_label(),
            suggestion=suggestion,
        )

    def _found_label(self) -> str:
        token = self.current()
        return token.type.name if token else TokenType.EOF.name

    def _suggest_token_fix(self, expected: TokenType) -> Optional[str]:
        token = self.current()
        if token is None:
            return None
        if expected == TokenType.SEMICOLON:
            return "Terminate each call with ';'"
        if expected == TokenType.LPAREN and token.type == TokenType.DOT:
            return "Chained member access is not supported; call a method directly"
        return None

    # ====================================================================
    # Statements
    # ====================================================================

    def parse(self) -> ASTNode:
        """Parse the whole token stream into a ``PROGRAM`` node."""
        statements: List[ASTNode] = []

        while not self.check(TokenType.EOF):
            statement = self.parse_statement()
            if statement is not None:
                statements.append(statement)

        return make_node(NodeType.PROGRAM, children=statements)

    def parse_statement(self) -> Optional[ASTNode]:
        # Empty statement
        if self.match(TokenType.SEMICOLON):
            return None

        if self.check(TokenType.CORE):
            return self.parse_core_call()

        if self.check(TokenType.IDENTIFIER):
            identifier = self.advance()

            # click("New");
            if self.check(TokenType.LPAREN):
                return self.parse_direct_call(identifier)

            return self.parse_identifier_call(identifier)

        raise self.error(
            f"Cannot parse statement starting with {self._found_label()}",
            expected=[TokenType.CORE.name, TokenType.IDENTIFIER.name, TokenType.SEMICOLON.name],
        )

    def parse_core_call(self) -> ASTNode:
        core_token = self.expect(TokenType.CORE)
        core_node = make_node(NodeType.CORE, core_token.value)

        self.expect(TokenType.DOT)
        method_token = self.expect(TokenType.IDENTIFIER)
        method_node = make_node(NodeType.METHOD, method_token.value)

        args = self.parse_call_tail()
        return make_node(NodeType.CALL, children=[core_node, method_node, *args])

    def parse_identifier_call(self, identifier: Token) -> ASTNode:
        object_node = make_node(NodeType.IDENTIFIER, identifier.value)

        if not self.match(TokenType.DOT):
            raise self.error(
                f"Expected method call on '{identifier.value}'",
                expected=[TokenType.DOT.name],
            )

        method_token = self.expect(TokenType.IDENTIFIER)
        method_node = make_node(NodeType.METHOD, method_token.value)

        args = self.parse_call_tail()
        return make_node(NodeType.CALL, children=[object_node, method_node, *args])

    def parse_direct_call(self, identifier: Token) -> ASTNode:
        """Parse ``name(args);``.

        The resulting ``CALL`` node has no object child; its first child is
        the ``METHOD`` node.
        """
        method_node = make_node(NodeType.METHOD, identifier.value)
        args = self.parse_call_tail()
        return make_node(NodeType.CALL, children=[method_node, *args])

    def parse_call_tail(self) -> List[ASTNode]:
        """Parse ``( Arguments ) ;`` and return the argument nodes."""
        self.expect(TokenType.LPAREN)
        args = self.parse_arguments()
        self.expect(TokenType.RPAREN)
        self.expect(TokenType.SEMICOLON)
        return args

    # ====================================================================
    # Expressions
    # ====================================================================

    def parse_arguments(self) -> List[ASTNode]:
        args: List[ASTNode] = []

        if self.check(TokenType.RPAREN):
            return args

        args.append(self.parse_expression())
        while self.match(TokenType.COMMA):
            args.append(self.parse_expression())

        return args

    def parse_expression(self) -> ASTNode:
        token = self.current()

        if token is None:
            raise self.error("Unexpected end of input", expected=_EXPRESSION_STARTS)

        if token.type == TokenType.STRING:
            self.advance()
            return make_node(NodeType.STRING, token.value)

        if token.type == TokenType.NUMBER:
            self.advance()
            return make_node(NodeType.NUMBER, token.value)

        if token.type == TokenType.LBRACKET:
            return self.parse_array()

        if token.type == TokenType.IDENTIFIER:
            self.advance()
            return make_node(NodeType.IDENTIFIER, token.value)

        raise self.error(
            f"Cannot parse expression starting with {token.type.name}",
            expected=_EXPRESSION_STARTS,
        )

    def parse_array(self) -> ASTNode:
        self.expect(TokenType.LBRACKET)
        elements: List[ASTNode] = []

        if not self.match(TokenType.RBRACKET):
            elements.append(self.parse_expression())
            while self.match(TokenType.COMMA):
                elements.append(self.parse_expression())
            self.expect(TokenType.RBRACKET)

        return make_node(NodeType.ARRAY, children=elements)


_EXPRESSION_STARTS = [
    TokenType.STRING.name,
    TokenType.NUMBER.name,
    TokenType.IDENTIFIER.name,
    TokenType.LBRACKET.name,
]


def parse(tokens: Sequence[Token]) -> ASTNode:
    """Parse a token list into a ``PROGRAM`` node."""
    return Parser(tokens).parse()


def parse_source(source: str) -> ASTNode:
    """Tokenize and parse ZCW source code."""
    return parse(tokenize(source))


__all__ = ["Parser", "parse", "parse_source"]
