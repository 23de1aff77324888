"""AST node definitions for the letter arithmetic notation.

This module defines the `Operator` enum, the operator precedence table and
the two expression node dataclasses produced by the parser. The `NodeType`
enum identifies node kinds and is used by the pretty-printer and the JSON
exporter.

Conventions:
- All AST node dataclasses inherit from `ASTNode` which records the node
    kind (`NodeType`).
- Nodes are frozen: a tree is built bottom-up by the parser and never
    changed afterwards. A `BinaryOpNode` owns its two children; subtrees are
    never shared, and both children plus the operator must be given.
- A flat chain such as `1a1a1a...` folds into a left-deep tree as tall as
    the chain is long, so tree walks go through `fold()`, which keeps its own
    stack instead of recursing.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, List, Tuple, TypeVar
from tokens import Token, TokenType


class NodeType(Enum):
    NUMBER = auto()
    BINARY_OP = auto()

    def __str__(self) -> str:
        return self.name


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def precedence(self) -> int:
        return PRECEDENCE[self]

    @classmethod
    def from_token(cls, token: Token) -> Operator:
        """Map an operator token to its operator; other tokens are rejected."""
        try:
            return TOKEN_OPERATORS[token.type]
        except KeyError:
            raise ValueError(f"Not an operator token: {token}") from None


TOKEN_OPERATORS: Dict[TokenType, Operator] = {
    TokenType.PLUS: Operator.ADD,
    TokenType.MINUS: Operator.SUBTRACT,
    TokenType.STAR: Operator.MULTIPLY,
    TokenType.SLASH: Operator.DIVIDE,
}

# Operator precedence table (higher = tighter binding). Every operator shares
# one rank, so expressions group strictly left to right and only parentheses
# change grouping.
PRECEDENCE: Dict[Operator, int] = {
    Operator.ADD: 3,
    Operator.SUBTRACT: 3,
    Operator.MULTIPLY: 3,
    Operator.DIVIDE: 3,
}


# Base AST Node
@dataclass(frozen=True)
class ASTNode:
    type: NodeType


# Expression Nodes
@dataclass(frozen=True, kw_only=True)
class NumberNode(ASTNode):
    type: NodeType = NodeType.NUMBER
    value: int


@dataclass(frozen=True, kw_only=True)
class BinaryOpNode(ASTNode):
    type: NodeType = NodeType.BINARY_OP
    left: ASTNode
    operator: Operator
    right: ASTNode


T = TypeVar("T")


def fold(
    node: ASTNode,
    on_number: Callable[[NumberNode], T],
    on_binary: Callable[[BinaryOpNode, T, T], T],
) -> T:
    """Combine a tree bottom-up, visiting the left subtree before the right.

    `on_number` maps a leaf to a result; `on_binary` receives a node together
    with the results already computed for its left and right children.
    """
    results: List[T] = []
    # Each entry is a node and whether its children have been pushed yet.
    stack: List[Tuple[ASTNode, bool]] = [(node, False)]

    while stack:
        current, expanded = stack.pop()
        match current:
            case NumberNode():
                results.append(on_number(current))
            case BinaryOpNode(left=l, right=r):
                if expanded:
                    rv = results.pop()
                    lv = results.pop()
                    results.append(on_binary(current, lv, rv))
                else:
                    stack.append((current, True))
                    stack.append((r, False))
                    stack.append((l, False))
            case _:
                raise RuntimeError(f"Unhandled expression node type: {current}")

    return results.pop()
