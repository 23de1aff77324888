"""
Parser for the letter arithmetic notation.

Overview and approach:
- This parser is a small hand-written precedence-climbing parser. Operator
    ranks come from a precedence table (`ast_nodes.PRECEDENCE` unless one is
    passed in), so a future grammar can rank `*` and `/` above `+` and `-`
    without touching the climbing loop.

Grammar:

    expression(min) := primary { operator primary }   (operator rank >= min)
    primary         := Number | '(' expression(0) ')'

Key points:
- `parse_expression()` implements the climbing loop: while the next token is
    an operator whose rank is at least the current minimum, consume it, parse
    the right-hand side at `rank + 1` and fold it into the left-hand tree.
    With every rank equal, the right-hand side is always a single primary and
    operators group strictly left to right: `3a2c4` is `(3 + 2) * 4`.
- `parse()` requires the `End` token after the top-level expression, so
    trailing tokens are rejected.
- The first error stops the parse; there is no recovery.
- Each level of parentheses costs a few interpreter frames, so nesting is
    capped at `max_depth` levels (`MAX_NESTING_DEPTH` by default). Deeper input
    is rejected with `Expression nested too deeply`, as is any input that still
    exhausts the interpreter stack (for example under a custom precedence
    table with many ranks).

Error messages:
- `Unexpected token found {token}` for a token that cannot start a primary.
- `Unexpected end of input` when the token list runs out.
- `Expected {expected} got {actual}` when a required token is the wrong kind.
- `Expression nested too deeply` past the nesting limit.
"""

from __future__ import annotations
from typing import List, Optional, Dict
from tokens import Token, TokenType
from ast_nodes import ASTNode, BinaryOpNode, NumberNode, Operator, PRECEDENCE
from errors import parse_error

# Three frames per level in the worst case (`1ae1ae...`) keeps this well
# inside the default interpreter recursion limit of 1000.
MAX_NESTING_DEPTH = 200


class Parser:
    def __init__(
        self,
        tokens: List[Token],
        precedence: Optional[Dict[Operator, int]] = None,
        max_depth: int = MAX_NESTING_DEPTH,
    ):
        self.tokens = tokens
        self.pos = 0
        self.depth = 0
        self.max_depth = max_depth
        self.precedence: Dict[Operator, int] = dict(
            precedence if precedence is not None else PRECEDENCE
        )

    def peek(self) -> Optional[Token]:
        """Return next token without consuming it, or None when exhausted."""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Optional[Token]:
        """Consume and return the next token."""
        token = self.peek()
        if token is not None:
            self.pos += 1
        return token

    def expect(self, expected_type: TokenType) -> Token:
        """Expect and consume token of given type."""
        token = self.advance()
        if token is None:
            raise parse_error("Unexpected end of input")
        if token.type != expected_type:
            raise parse_error(f"Expected {expected_type} got {token}")
        return token

    def get_precedence(self, operator: Operator) -> int:
        """Get precedence for an operator."""
        return self.precedence[operator]

    def parse_primary(self) -> ASTNode:
        """Parse a number literal or a parenthesized expression."""
        token = self.advance()
        if token is None:
            raise parse_error("Unexpected end of input")

        match token.type:
            case TokenType.NUMBER:
                return NumberNode(value=token.value)

            case TokenType.LPAREN:
                self.depth += 1
                if self.depth > self.max_depth:
                    raise parse_error("Expression nested too deeply")
                expr = self.parse_expression(0)
                self.expect(TokenType.RPAREN)
                self.depth -= 1
                return expr

            case _:
                raise parse_error(f"Unexpected token found {token}")

    def parse_expression(self, min_precedence: int = 0) -> ASTNode:
        """Parse a run of binary operations using precedence climbing."""
        left = self.parse_primary()

        while True:
            token = self.peek()
            if token is None or not token.is_binary():
                break

            operator = Operator.from_token(token)
            prec = self.get_precedence(operator)
            if prec < min_precedence:
                break

            self.advance()
            right = self.parse_expression(prec + 1)
            left = BinaryOpNode(left=left, operator=operator, right=right)

        return left

    def parse(self) -> ASTNode:
        """Parse the whole token list into a single expression tree."""
        try:
            ast = self.parse_expression(0)
        except RecursionError:
            raise parse_error("Expression nested too deeply") from None
        self.expect(TokenType.END)
        return ast


def parse(
    tokens: List[Token], precedence: Optional[Dict[Operator, int]] = None
) -> ASTNode:
    """Parse tokens into AST."""
    return Parser(tokens, precedence).parse()
