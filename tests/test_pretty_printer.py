from pretty_printer import PrettyPrinter
from tests.utils import chain, parse_text


def test_print_ast_indents_children():
    out = PrettyPrinter.print_ast(parse_text("3a2c4"))
    assert out.splitlines() == [
        "BinaryOp(*)",
        "  left: BinaryOp(+)",
        "    left: Number(3)",
        "    right: Number(2)",
        "  right: Number(4)",
    ]


def test_print_surface_shows_grouping():
    assert PrettyPrinter.print_surface(parse_text("3a2c4")) == "((3 + 2) * 4)"
    assert (
        PrettyPrinter.print_surface(parse_text("3ae4c66fb32"))
        == "((3 + (4 * 66)) - 32)"
    )


def test_print_letters_drops_redundant_parentheses():
    assert PrettyPrinter.print_letters(parse_text("ee3a2fc4f")) == "3a2c4"
    assert PrettyPrinter.print_letters(parse_text("3ae4c66fb32")) == "3ae4c66fb32"


def test_printers_handle_long_chains():
    src = chain(5000)
    ast = parse_text(src)
    assert PrettyPrinter.print_letters(ast) == src
    surface = PrettyPrinter.print_surface(ast)
    assert surface.startswith("(" * 5000 + "1 + 1)")
    assert surface.endswith(" + 1)")


def test_print_ast_long_chain():
    lines = PrettyPrinter.print_ast(parse_text(chain(2000))).splitlines()
    assert len(lines) == 2 * 2000 + 1
    assert lines[0] == "BinaryOp(+)"
    assert lines[-1] == "  right: Number(1)"
