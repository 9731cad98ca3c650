"""Parse tree -> AST.

The AST classes mirror the parse-tree ones but are separate types, so the
parser's output can stay fixed while the AST grows (numeric literals, new
node kinds).
"""
from dataclasses import dataclass
from typing import Tuple

from . import parser as pt
from .parser import parse_expression_text
from .traversal import fold


class AstNode: ...

@dataclass(frozen=True)
class Literal(AstNode):
    value: str

@dataclass(frozen=True)
class BinaryExpression(AstNode):
    operator: str
    left: AstNode
    right: AstNode

@dataclass(frozen=True)
class FunctionCall(AstNode):
    name: str
    arguments: Tuple[AstNode, ...] = ()


def _children(node):
    if isinstance(node, pt.BinaryExpression):
        return (node.left, node.right)
    if isinstance(node, pt.FunctionCall):
        return node.arguments
    return ()

def _lower_node(node, args):
    if isinstance(node, pt.Number):
        return Literal(node.value)
    if isinstance(node, pt.BinaryExpression):
        return BinaryExpression(node.operator, args[0], args[1])
    if isinstance(node, pt.FunctionCall):
        return FunctionCall(node.name, tuple(args))
    return node

def lower(node):
    return fold(node, _children, _lower_node)


def build_trees(text: str, allow_trailing: bool = False):
    """Run tokenize -> parse -> lower and return ``(parse_tree, ast)``."""
    tree = parse_expression_text(text, allow_trailing=allow_trailing)
    return tree, lower(tree)
