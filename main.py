from __future__ import annotations
import json
from typing import List, Optional
from lexer import Lexer
from tokens import Token
from ast_nodes import ASTNode
from parser import Parser
from evaluator import evaluate
from errors import EvaluationError
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json
from ast_viz import write_and_render


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_tokens(tokens: List[Token]) -> ASTNode:
    """Parse tokens into AST."""
    parser = Parser(tokens)
    return parser.parse()


def run(text: str) -> int:
    """Tokenize, parse and evaluate one expression.

    Raises `ExpressionSyntaxError` when the text is rejected and
    `EvaluationError` when the arithmetic leaves the unsigned 64-bit range.
    """
    return evaluate(parse_tokens(lex(text)))


def process_expression(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = False,
    print_surface: bool = False,
    print_json: bool = False,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> int:
    """Process a single expression: lex, parse, evaluate and optionally print stages.

    Returns a process exit status: 0 on success, 1 when the expression is
    rejected or cannot be evaluated.
    """
    try:
        tokens = lex(text)
        if print_tokens:
            print(f"Tokens ({len(tokens)}):")
            for i, token in enumerate(tokens[:50]):
                print(f"  {i:3}: {token}")
            if len(tokens) > 50:
                print(f"  ... and {len(tokens) - 50} more")

        ast = parse_tokens(tokens)
        if print_ast:
            print("\nAST:")
            print(PrettyPrinter.print_ast(ast))
        if print_surface:
            print(f"\nGrouping: {PrettyPrinter.print_surface(ast)}")
        if print_json:
            try:
                print(json.dumps(ast_to_json(ast), indent=2))
            except RecursionError:
                # `json` recurses once per nesting level of the output.
                print("Failed to print AST as JSON: tree is too deep")

        # Optionally render visualization via Graphviz
        if viz_path:
            try:
                write_and_render(ast, viz_path, fmt=viz_format, title=text.strip())
                print(f"Wrote AST visualization to {viz_path}.{viz_format}")
            except Exception as e:
                print(f"Failed to render AST visualization to {viz_path}: {e}")

        result = evaluate(ast)
        print(f"Result: {result}")
        return 0

    except SyntaxError as e:
        print(e)
    except EvaluationError as e:
        print(e)
    except Exception as e:
        print(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
    return 1


def interactive_mode(
    print_tokens: bool = False,
    print_ast: bool = False,
    print_surface: bool = False,
) -> None:
    """Run interactive calculator REPL reading expressions from stdin."""
    print("\nInteractive Calculator Mode (type 'quit' to exit)")
    print("  a = +   b = -   c = *   d = /   e = (   f = )")
    print("=" * 80)

    while True:
        try:
            text = input("\nEnter expression: ").strip()
            if text.lower() in ("quit", "exit", "q"):
                print("Goodbye!")
                break

            if not text:
                continue

            process_expression(
                text,
                print_tokens=print_tokens,
                print_ast=print_ast,
                print_surface=print_surface,
            )

        except (KeyboardInterrupt, EOFError):
            print("\n\nExiting...")
            break


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description=(
            "Evaluate an expression in letter notation "
            "(a=+ b=- c=* d=/ e=( f=)), e.g. 3ae4c66fb32"
        )
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument("expression", nargs="?", help="Expression to evaluate")
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--print-ast", dest="print_ast", action="store_true", help="Print the AST"
    )
    parser.add_argument(
        "--print-grouping",
        dest="print_surface",
        action="store_true",
        help="Print the expression fully parenthesized in infix form",
    )
    parser.add_argument(
        "--json", dest="print_json", action="store_true", help="Print the AST as JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )

    args = parser.parse_args(argv)

    if args.interactive:
        interactive_mode(
            print_tokens=args.print_tokens,
            print_ast=args.print_ast,
            print_surface=args.print_surface,
        )
        return 0

    if args.expression is None:
        parser.error("expected exactly one expression argument")

    return process_expression(
        args.expression,
        print_tokens=args.print_tokens,
        print_ast=args.print_ast,
        print_surface=args.print_surface,
        print_json=args.print_json,
        viz_path=args.viz_ast,
        viz_format=args.viz_format,
    )


if __name__ == "__main__":
    import sys

    sys.exit(main())
