from lexer import Lexer
from parser import Parser
from evaluator import evaluate
from tokens import Token, TokenType


def lex(text: str):
    """Return a list of tokens for the given expression text."""
    return Lexer(text).tokenize()


def parse_text(text: str):
    """Convenience: lex+parse an expression text into an AST."""
    return Parser(Lexer(text).tokenize()).parse()


def eval_text(text: str) -> int:
    """Lex, parse and evaluate an expression text."""
    return evaluate(parse_text(text))


def num(value: int) -> Token:
    return Token(TokenType.NUMBER, value)


def tok(token_type: TokenType) -> Token:
    return Token(token_type)


def chain(operators: int, letter: str = "a") -> str:
    """`1a1a...1` with the given number of operators; folds into a left-deep tree."""
    return "1" + f"{letter}1" * operators


def nested(levels: int) -> str:
    """`1ae1ae...1f...f`: each level wraps the rest in one pair of parentheses."""
    return "1ae" * levels + "1" + "f" * levels
