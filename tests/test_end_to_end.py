import pytest

from errors import ExpressionSyntaxError, parse_error, tokenizer_error
from main import run
from parser import MAX_NESTING_DEPTH
from tests.utils import chain, nested


def test_run_evaluates_expressions(known_results):
    for src, expected in known_results.items():
        assert run(src) == expected


def test_run_trims_whitespace():
    assert run("  12  ") == 12


def test_run_surfaces_tokenizer_error():
    with pytest.raises(ExpressionSyntaxError) as exc:
        run("k22")
    assert exc.value == tokenizer_error("Unrecognized character: k")


def test_run_surfaces_parser_error():
    with pytest.raises(ExpressionSyntaxError) as exc:
        run("")
    assert exc.value == parse_error("Unexpected token found End")


def test_syntax_errors_are_builtin_syntax_errors():
    with pytest.raises(SyntaxError):
        run("1ce3a1")


def test_run_long_chain():
    assert run(chain(5000)) == 5001


def test_run_nested_parentheses_up_to_limit():
    assert run(nested(MAX_NESTING_DEPTH)) == MAX_NESTING_DEPTH + 1
    assert run("e" * MAX_NESTING_DEPTH + "7" + "f" * MAX_NESTING_DEPTH) == 7


@pytest.mark.parametrize(
    "src",
    [
        "e" * 600 + "1" + "f" * 600,
        nested(MAX_NESTING_DEPTH + 1),
    ],
)
def test_run_rejects_nesting_past_limit(src):
    with pytest.raises(ExpressionSyntaxError) as exc:
        run(src)
    assert exc.value == parse_error("Expression nested too deeply")
