"""Graphviz visualization helpers for expression trees.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered). `write_and_render` writes the file to disk.

Layout: each AST node becomes one graph node, drawn top-down from the root.
Number leaves are boxes, operators are circles, and edges to children are
labelled `left` and `right`.
"""

from typing import List, Optional, Tuple
from ast_nodes import ASTNode, BinaryOpNode, NumberNode
from graphviz import Digraph


def render_ast_dot(node: ASTNode, title: Optional[str] = None) -> Digraph:
    """Return a graphviz.Digraph for the given expression tree.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    if title:
        dot.attr(label=title, labelloc="t")

    # Pre-order walk with an explicit stack; each entry carries the id of the
    # parent node and the label of the edge leading to it.
    stack: List[Tuple[ASTNode, Optional[str], str]] = [(node, None, "")]
    counter = 0

    while stack:
        current, parent_id, edge_label = stack.pop()
        node_id = f"n{counter}"
        counter += 1

        match current:
            case NumberNode(value=v):
                dot.node(node_id, label=str(v), shape="box")
            case BinaryOpNode(left=l, operator=op, right=r):
                dot.node(node_id, label=str(op), shape="circle")
                stack.append((r, node_id, "right"))
                stack.append((l, node_id, "left"))
            case _:
                dot.node(node_id, label=str(current.type), shape="diamond")

        if parent_id is not None:
            dot.edge(parent_id, node_id, label=edge_label)

    return dot


def write_and_render(
    node: ASTNode, out_path: str, fmt: str = "svg", title: Optional[str] = None
) -> str:
    """Write and render the tree to the given path (without extension).

    Example: write_and_render(ast, 'out/ast', fmt='png') will create out/ast.png
    """
    dot = render_ast_dot(node, title=title)
    dot.format = fmt
    # Note: render will append extension automatically
    return dot.render(out_path, cleanup=True)
