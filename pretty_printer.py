"""Pretty-printer for expression trees.

Provides three renderings of an AST:

- `PrettyPrinter.print_ast(node, indent, prefix)` renders the tree into a
    readable multi-line string for debugging and tests.
- `PrettyPrinter.print_surface(node)` renders a fully parenthesized infix
    string using the usual operator symbols, e.g. `((3 + 2) * 4)`.
- `PrettyPrinter.print_letters(node)` writes the tree back in the letter
    notation. Parentheses are only emitted where left-to-right grouping
    would otherwise change the tree, so reparsing the output gives an equal
    tree.

None of them recurse, so trees built from long operator chains print fine.

Examples:
    PrettyPrinter.print_ast(parse(tokenize("3a2c4")))
"""

from __future__ import annotations
from typing import Dict, List, Tuple
from ast_nodes import ASTNode, BinaryOpNode, NumberNode, Operator, fold

OPERATOR_LETTERS: Dict[Operator, str] = {
    Operator.ADD: "a",
    Operator.SUBTRACT: "b",
    Operator.MULTIPLY: "c",
    Operator.DIVIDE: "d",
}


class PrettyPrinter:
    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        # Pre-order walk; the right child is pushed first so the left prints first.
        stack: List[Tuple[ASTNode, int, str]] = [(node, indent, prefix)]

        while stack:
            current, ind, pre = stack.pop()
            indent_str = " " * ind

            match current:
                case NumberNode(value=v):
                    lines.append(f"{indent_str}{pre}Number({v})")

                case BinaryOpNode(left=left, operator=op, right=right):
                    lines.append(f"{indent_str}{pre}BinaryOp({op})")
                    stack.append((right, ind + 2, "right: "))
                    stack.append((left, ind + 2, "left: "))

                case _:
                    lines.append(f"{indent_str}{pre}Unknown node type: {type(current)}")

        return "\n".join(lines)

    @staticmethod
    def print_surface(node: ASTNode) -> str:
        """Return a one-line infix representation with explicit grouping."""
        return fold(
            node,
            lambda leaf: str(leaf.value),
            lambda binary, left_s, right_s: f"({left_s} {binary.operator} {right_s})",
        )

    @staticmethod
    def print_letters(node: ASTNode) -> str:
        """Return the expression written in the letter notation."""

        def _binary(binary: BinaryOpNode, left_s: str, right_s: str) -> str:
            # Operators fold to the left, so only a compound right-hand side
            # needs to be wrapped in `e ... f`.
            if isinstance(binary.right, BinaryOpNode):
                right_s = f"e{right_s}f"
            return f"{left_s}{OPERATOR_LETTERS[binary.operator]}{right_s}"

        return fold(node, lambda leaf: str(leaf.value), _binary)
