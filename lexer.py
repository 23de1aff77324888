"""
Lexer for the letter arithmetic notation.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input string into a list of `Token` objects defined in
    `tokens.py`.
- Operators and parentheses are spelled with single lowercase letters:

        a = '+'    b = '-'    c = '*'
        d = '/'    e = '('    f = ')'

- Runs of ASCII digits are unsigned 64-bit integer literals.

Examples:
    Input:  "3ae4c66f"
    Tokens: [Number(3), Plus, LeftParen, Number(4), Star, Number(66),
             RightParen, End]

Implementation notes:
- Leading and trailing whitespace is trimmed before scanning; whitespace
    anywhere else is an unrecognized character.
- The scanner keeps `self.pos` and `self.current_char`. A digit run stops on
    the first non-digit without consuming it, so that character is the next
    one examined by `get_next_token()`.
- The first bad character aborts the scan; no partial token list is returned.
"""

from __future__ import annotations
from typing import List
from tokens import Token, TokenType, U64_MAX
from errors import ExpressionSyntaxError, tokenizer_error

DIGITS = "0123456789"


class Lexer:
    def __init__(self, text: str):
        self.text = text.strip()
        self.pos = 0
        self.current_char = self.text[self.pos] if self.text else None

        self.letters = {
            "a": TokenType.PLUS,
            "b": TokenType.MINUS,
            "c": TokenType.STAR,
            "d": TokenType.SLASH,
            "e": TokenType.LPAREN,
            "f": TokenType.RPAREN,
        }

    def error(self, message: str) -> ExpressionSyntaxError:
        return tokenizer_error(message)

    def advance(self) -> None:
        """Advance to next character."""
        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def number(self) -> int:
        """Parse a maximal run of ASCII digits."""
        result = []

        while self.current_char is not None and self.current_char in DIGITS:
            result.append(self.current_char)
            self.advance()

        digits = "".join(result)
        value = int(digits)
        if value > U64_MAX:
            raise self.error(f"Number too large: {digits}")
        return value

    def get_next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        if self.current_char is None:
            return Token(TokenType.END)

        token_type = self.letters.get(self.current_char)
        if token_type is not None:
            self.advance()
            return Token(token_type)

        # `str.isdigit()` also accepts non-ASCII digits, so test membership.
        if self.current_char in DIGITS:
            return Token(TokenType.NUMBER, self.number())

        raise self.error(f"Unrecognized character: {self.current_char}")

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string, terminated by `End`."""
        tokens = []
        while True:
            token = self.get_next_token()
            tokens.append(token)
            if token.type == TokenType.END:
                break
        return tokens


def tokenize(text: str) -> List[Token]:
    """Tokenize input string."""
    return Lexer(text).tokenize()
