"""Evaluator for expression trees.

Folds a tree built by the parser into a single unsigned 64-bit integer.
Children are evaluated left before right through `ast_nodes.fold`, so long
operator chains do not hit the interpreter recursion limit. Results that
would leave the unsigned 64-bit range raise an `EvaluationError` subclass
instead of wrapping: subtracting a larger value from a smaller one,
dividing by zero, and sums or products above `U64_MAX`.
"""

from ast_nodes import ASTNode, Operator, fold
from errors import DivisionByZeroError, ResultOverflowError, UnderflowError
from tokens import U64_MAX


def _apply(op: Operator, lv: int, rv: int) -> int:
    match op:
        case Operator.ADD:
            result = lv + rv
        case Operator.SUBTRACT:
            if rv > lv:
                raise UnderflowError(f"{lv} - {rv} is below zero")
            return lv - rv
        case Operator.MULTIPLY:
            result = lv * rv
        case Operator.DIVIDE:
            if rv == 0:
                raise DivisionByZeroError(f"{lv} / 0 divides by zero")
            return lv // rv
        case _:
            raise RuntimeError(f"Unsupported binary operator: {op}")

    if result > U64_MAX:
        raise ResultOverflowError(f"{lv} {op} {rv} does not fit in 64 bits")
    return result


def evaluate(node: ASTNode) -> int:
    """Evaluate an expression tree and return its value."""
    return fold(
        node,
        lambda leaf: leaf.value,
        lambda binary, lv, rv: _apply(binary.operator, lv, rv),
    )
