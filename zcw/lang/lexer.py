"""Lexical analyzer (tokenizer) for the ZCW language.

Converts source text into a stream of tokens for parsing.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Union
import re

from ..errors import UnexpectedCharacter


class TokenType(Enum):
    """Token types for the ZCW language."""

    # Keywords and identifiers
    CORE = auto()
    IDENTIFIER = auto()

    # Literals
    STRING = auto()
    NUMBER = auto()

    # Punctuation
    DOT = auto()
    LPAREN = auto()
    RPAREN = auto()
    SEMICOLON = auto()

    # Part of the grammar, never produced by the lexer
    COMMA = auto()
    LBRACKET = auto()
    RBRACKET = auto()

    # Special
    EOF = auto()


TokenValue = Union[str, float, None]


@dataclass(frozen=True)
class Token:
    """A single token with the position of its first character."""

    type: TokenType
    value: TokenValue
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


KEYWORDS = {
    "core": TokenType.CORE,
}

PUNCTUATION = {
    '.': TokenType.DOT,
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    ';': TokenType.SEMICOLON,
}

_IDENT_START = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
_IDENT_CHARS = _IDENT_START | frozenset("0123456789")
_DIGITS = frozenset("0123456789")

# Longest prefix a real-number parser accepts, e.g. "1.2" out of "1.2.3"
_NUMBER_PREFIX = re.compile(r"\d+(?:\.\d*)?")


def parse_number(text: str) -> float:
    """Parse a numeric run the way a lenient real-number parser does.

    Only the leading ``digits[.digits]`` part counts; trailing dots and
    digits after a second dot are ignored.
    """
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        raise ValueError(f"Not a numeric literal: {text!r}")
    return float(match.group(0))


class Lexer:
    """Tokenizer for ZCW source code."""

    def __init__(self, source: str):
        """Initialize lexer with source code."""
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

    def reset(self) -> None:
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []

    def error(self, char: str, line: int, column: int) -> UnexpectedCharacter:
        """Create a lexer error for an unsupported character."""
        return UnexpectedCharacter(
            message=f"Unexpected character: {char!r}",
            line=line,
            column=column,
            character=char,
            found=repr(char),
        )

    def peek(self, offset: int = 0) -> Optional[str]:
        """Peek at character without consuming."""
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return None

    def advance(self) -> Optional[str]:
        """Consume and return current character."""
        if self.pos >= len(self.source):
            return None

        char = self.source[self.pos]
        self.pos += 1

        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def skip_whitespace(self) -> None:
        while self.peek() is not None and self.peek().isspace():
            self.advance()

    def skip_comment(self) -> None:
        """Skip a ``//`` comment up to (not including) the newline."""
        while self.peek() is not None and self.peek() != '\n':
            self.advance()

    def read_identifier(self) -> str:
        chars = []
        while self.peek() is not None and self.peek() in _IDENT_CHARS:
            chars.append(self.advance())
        return ''.join(chars)

    def read_string(self) -> str:
        """Read a string literal.

        A backslash copies the next character verbatim. Reaching the end of
        input before the closing quote ends the literal there.
        """
        self.advance()  # opening quote
        chars = []

        while self.peek() is not None and self.peek() != '"':
            if self.peek() == '\\':
                self.advance()
                if self.peek() is not None:
                    chars.append(self.advance())
            else:
                chars.append(self.advance())

        if self.peek() == '"':
            self.advance()

        return ''.join(chars)

    def read_number(self) -> float:
        chars = []
        while self.peek() is not None and (self.peek() in _DIGITS or self.peek() == '.'):
            chars.append(self.advance())
        return parse_number(''.join(chars))

    def add_token(self, token_type: TokenType, value: TokenValue, line: int, column: int) -> None:
        self.tokens.append(Token(type=token_type, value=value, line=line, column=column))

    def tokenize(self) -> List[Token]:
        """Tokenize the entire source."""
        self.reset()

        while self.pos < len(self.source):
            self.skip_whitespace()

            if self.pos >= len(self.source):
                break

            char = self.peek()
            line, column = self.line, self.column

            # Comments
            if char == '/' and self.peek(1) == '/':
                self.skip_comment()
                continue

            # Identifiers and keywords
            if char in _IDENT_START:
                value = self.read_identifier()
                self.add_token(KEYWORDS.get(value, TokenType.IDENTIFIER), value, line, column)
                continue

            # String literals
            if char == '"':
                self.add_token(TokenType.STRING, self.read_string(), line, column)
                continue

            # Numbers
            if char in _DIGITS:
                self.add_token(TokenType.NUMBER, self.read_number(), line, column)
                continue

            if char in PUNCTUATION:
                self.add_token(PUNCTUATION[char], None, line, column)
                self.advance()
                continue

            raise self.error(char, line, column)

        self.add_token(TokenType.EOF, None, self.line, self.column)

        return list(self.tokens)


def tokenize(source: str) -> List[Token]:
    """Tokenize ZCW source code."""
    lexer = Lexer(source)
    return lexer.tokenize()


__all__ = ["Token", "TokenType", "Lexer", "tokenize", "parse_number", "KEYWORDS"]
