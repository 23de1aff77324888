"""Error types shared by the pipeline stages.

`ExpressionSyntaxError` is raised by both the lexer and the parser. It is a
subclass of the builtin `SyntaxError` so callers that already catch
`SyntaxError` keep working, and it carries a `stage` tag saying which stage
rejected the input. Two errors compare equal when their stage and message
match, which keeps test assertions short:

    with pytest.raises(ExpressionSyntaxError) as exc:
        tokenize("k22")
    assert exc.value == tokenizer_error("Unrecognized character: k")

Arithmetic faults found while evaluating a tree (division by zero, unsigned
subtraction underflow, results that do not fit in 64 bits) are reported as
`EvaluationError`, a subclass of the builtin `ArithmeticError`.
"""

from __future__ import annotations
from enum import Enum


class ErrorStage(Enum):
    TOKENIZER = "Tokenizer"
    PARSER = "Parser"

    def __str__(self) -> str:
        return self.value


class ExpressionSyntaxError(SyntaxError):
    def __init__(self, stage: ErrorStage, message: str):
        super().__init__(message)
        self.stage = stage
        self.message = message

    def __str__(self) -> str:
        return f"{self.stage} Error {self.message}"

    def __repr__(self) -> str:
        return f"ExpressionSyntaxError({self.stage}, {self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExpressionSyntaxError):
            return NotImplemented
        return (self.stage, self.message) == (other.stage, other.message)

    def __hash__(self) -> int:
        return hash((self.stage, self.message))


def tokenizer_error(message: str) -> ExpressionSyntaxError:
    """Error raised while turning characters into tokens."""
    return ExpressionSyntaxError(ErrorStage.TOKENIZER, message)


def parse_error(message: str) -> ExpressionSyntaxError:
    """Error raised while building the tree from tokens."""
    return ExpressionSyntaxError(ErrorStage.PARSER, message)


class EvaluationError(ArithmeticError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Arithmetic Error {self.message}"


class DivisionByZeroError(EvaluationError):
    pass


class UnderflowError(EvaluationError):
    pass


class ResultOverflowError(EvaluationError):
    pass
