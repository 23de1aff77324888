"""Convert expression trees to and from JSON-serializable structures.

`ast_to_json(node)` returns nested dicts describing the tree:

    {"node_type": "Number", "value": 3}
    {"node_type": "BinaryOp", "operator": "+", "left": {...}, "right": {...}}

`ast_from_json(data)` rebuilds the tree from that structure. Both directions
raise `ValueError` for anything they do not recognize and walk the tree with
an explicit stack, so long operator chains convert without recursion.
"""

from typing import Any, Dict, List, Tuple
from ast_nodes import ASTNode, BinaryOpNode, NumberNode, Operator, fold
from tokens import U64_MAX


def ast_to_json(node: ASTNode) -> Dict[str, Any]:
    if not isinstance(node, (NumberNode, BinaryOpNode)):
        raise ValueError(f"Unknown node type: {node!r}")

    return fold(
        node,
        lambda leaf: {"node_type": "Number", "value": leaf.value},
        lambda binary, left, right: {
            "node_type": "BinaryOp",
            "operator": binary.operator.symbol,
            "left": left,
            "right": right,
        },
    )


def _number_from_json(data: Dict[str, Any]) -> NumberNode:
    value = data.get("value")
    if (
        not isinstance(value, int)
        or isinstance(value, bool)
        or not 0 <= value <= U64_MAX
    ):
        raise ValueError(f"Invalid number literal: {value!r}")
    return NumberNode(value=value)


def _operator_from_json(data: Dict[str, Any]) -> Operator:
    try:
        return Operator(data.get("operator"))
    except ValueError:
        raise ValueError(f"Unknown operator: {data.get('operator')!r}") from None


def ast_from_json(data: Dict[str, Any]) -> ASTNode:
    results: List[ASTNode] = []
    # Post-order: an object is revisited once both children are rebuilt.
    stack: List[Tuple[Any, bool]] = [(data, False)]

    while stack:
        current, expanded = stack.pop()
        if not isinstance(current, dict):
            raise ValueError(
                f"Expected a JSON object, got {type(current).__name__}"
            )

        kind = current.get("node_type")
        if kind == "Number":
            results.append(_number_from_json(current))
        elif kind == "BinaryOp":
            if expanded:
                right = results.pop()
                left = results.pop()
                results.append(
                    BinaryOpNode(
                        left=left, operator=_operator_from_json(current), right=right
                    )
                )
            else:
                stack.append((current, True))
                stack.append((current.get("right"), False))
                stack.append((current.get("left"), False))
        else:
            raise ValueError(f"Unknown node type: {kind!r}")

    return results.pop()
