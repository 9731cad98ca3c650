# exprtree/ast_utils.py
import json
from typing import Any, Dict
from . import parser as pt
from . import lowering as ast
from .traversal import fold

_LEAVES = (pt.Number, ast.Literal)
_BINARY = (pt.BinaryExpression, ast.BinaryExpression)
_CALLS = (pt.FunctionCall, ast.FunctionCall)


def _leaf_type(node) -> str:
    return "Number" if isinstance(node, pt.Number) else "Literal"

def _children(node):
    if isinstance(node, _BINARY):
        return (node.left, node.right)
    if isinstance(node, _CALLS):
        return node.arguments
    return ()

def _to_dict(node, args) -> Dict[str, Any]:
    if isinstance(node, _LEAVES):
        return {"type": _leaf_type(node), "value": node.value}
    if isinstance(node, _BINARY):
        return {"type": "BinaryExpression", "operator": node.operator, "left": args[0], "right": args[1]}
    if isinstance(node, _CALLS):
        return {"type": "FunctionCall", "name": node.name, "arguments": list(args)}
    return {"type": "Unknown", "repr": repr(node)}

def tree_to_dict(node) -> Dict[str, Any]:
    """Serialize a parse tree or an AST to plain JSON-ready dicts."""
    return fold(node, _children, _to_dict)


class _Text(str):
    """Literal JSON text queued between nodes."""

def tree_to_json(node) -> str:
    """Same shape as :func:`tree_to_dict`, written straight to JSON text.

    ``json.dumps`` recurses once per nesting level, which long operator
    chains exceed.
    """
    out = []
    stack = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, _Text):
            out.append(item)
        elif isinstance(item, _LEAVES):
            out.append(json.dumps({"type": _leaf_type(item), "value": item.value}))
        elif isinstance(item, _BINARY):
            out.append('{"type": "BinaryExpression", "operator": %s, "left": ' % json.dumps(item.operator))
            stack.extend([_Text("}"), item.right, _Text(', "right": '), item.left])
        elif isinstance(item, _CALLS):
            out.append('{"type": "FunctionCall", "name": %s, "arguments": [' % json.dumps(item.name))
            parts = []
            for i, a in enumerate(item.arguments):
                if i:
                    parts.append(_Text(", "))
                parts.append(a)
            parts.append(_Text("]}"))
            stack.extend(reversed(parts))
        else:
            out.append(json.dumps({"type": "Unknown", "repr": repr(item)}))
    return "".join(out)


def tree_to_pretty(node, indent: str = "  ") -> str:
    lines = []
    stack = [(node, 0, None)]
    while stack:
        n, depth, label = stack.pop()
        pad = indent * depth
        pre = f"{label}: " if label else ""
        if isinstance(n, _LEAVES):
            lines.append(f"{pad}{pre}{_leaf_type(n)}({n.value})")
        elif isinstance(n, _BINARY):
            lines.append(f"{pad}{pre}BinaryExpression({n.operator})")
            stack.append((n.right, depth+1, "right"))
            stack.append((n.left, depth+1, "left"))
        elif isinstance(n, _CALLS):
            lines.append(f"{pad}{pre}FunctionCall({n.name})")
            for i in reversed(range(len(n.arguments))):
                stack.append((n.arguments[i], depth+1, f"arg[{i}]"))
        else:
            lines.append(f"{pad}{pre}{type(n).__name__}")
    return "\n".join(lines)

def _to_infix(node, args) -> str:
    if isinstance(node, _LEAVES):
        return node.value
    if isinstance(node, _BINARY):
        return f"({args[0]} {node.operator} {args[1]})"
    if isinstance(node, _CALLS):
        return f"{node.name}({', '.join(args)})"
    return repr(node)

def tree_to_infix(node) -> str:
    """Fully parenthesized rendering, e.g. ``((1 - 2) - 3)``."""
    return fold(node, _children, _to_infix)
