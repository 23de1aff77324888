"""Token definitions for the lexer.

This module defines the `TokenType` enum for the token kinds produced when
scanning the letter notation and a small `Token` dataclass that holds a token
type and, for number literals, the literal value. Tokens are the atomic units
produced by the lexer and consumed by the parser.
"""

from __future__ import annotations
from enum import Enum
from dataclasses import dataclass
from typing import Optional

# Number literals are unsigned 64-bit integers.
U64_MAX = 2**64 - 1


class TokenType(Enum):
    # Literals
    NUMBER = "Number"

    # Arithmetic operators
    PLUS = "Plus"
    MINUS = "Minus"
    STAR = "Star"
    SLASH = "Slash"

    # Parentheses
    LPAREN = "LeftParen"
    RPAREN = "RightParen"

    # Special
    END = "End"

    def __str__(self) -> str:
        return self.value


BINARY_TOKENS = frozenset(
    {TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH}
)


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[int] = None

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    def __str__(self) -> str:
        if self.type == TokenType.NUMBER:
            return f"{self.type}({self.value})"
        return str(self.type)

    def is_binary(self) -> bool:
        """True for the four operator tokens."""
        return self.type in BINARY_TOKENS
