import re
import pytest
from hypothesis import given
from exprtree import lowering as ast
from exprtree import parser as pt
from exprtree.lexer import tokenize
from exprtree.analyzer import analyze
from exprtree.ast_utils import tree_to_infix
from exprtree.lowering import build_trees, lower

from strategies import expressions

def literals(node):
    if isinstance(node, ast.Literal):
        return [node.value]
    if isinstance(node, ast.BinaryExpression):
        return literals(node.left) + literals(node.right)
    if isinstance(node, ast.FunctionCall):
        return [v for a in node.arguments for v in literals(a)]
    return []

def test_number_becomes_literal():
    assert lower(pt.Number("007")) == ast.Literal("007")

def test_binary_expression_is_lowered_recursively():
    tree = pt.parse(tokenize("1+2*3"))
    assert lower(tree) == ast.BinaryExpression(
        "+", ast.Literal("1"), ast.BinaryExpression("*", ast.Literal("2"), ast.Literal("3")))

def test_function_call_keeps_argument_order():
    tree = pt.parse(tokenize("max(3, min(2, 1))"))
    assert lower(tree) == ast.FunctionCall("max", (
        ast.Literal("3"),
        ast.FunctionCall("min", (ast.Literal("2"), ast.Literal("1"))),
    ))

def test_zero_argument_call():
    assert lower(pt.FunctionCall("now")) == ast.FunctionCall("now", ())

def test_ast_types_are_distinct():
    lowered = lower(pt.BinaryExpression("+", pt.Number("1"), pt.Number("2")))
    assert not isinstance(lowered, pt.BinaryExpression)
    assert not isinstance(lowered.left, pt.Number)

def test_unknown_node_passes_through():
    marker = object()
    assert lower(marker) is marker

@pytest.mark.parametrize("src", [
    "1",
    "1 + 22 * 333",
    "(10 - 2) / 4 - 6",
    "max(1, 2, min(3, 4 * 5)) + 6",
    "f() * 7",
])
def test_literals_match_digit_runs(src):
    _, tree = build_trees(src)
    assert literals(tree) == re.findall(r"[0-9]+", src)

def test_build_trees_returns_both():
    tree, lowered = build_trees("2*3")
    assert tree == pt.BinaryExpression("*", pt.Number("2"), pt.Number("3"))
    assert lowered == lower(tree)

@given(expressions)
def test_literals_match_digit_runs_for_any_expression(src):
    _, tree = build_trees(src)
    assert literals(tree) == re.findall(r"[0-9]+", src)

def test_long_chain_lowers():
    n = 5000
    src = "+".join(str(i) for i in range(n))
    _, tree = build_trees(src)
    assert isinstance(tree, ast.BinaryExpression)
    assert analyze(tree).literals == [str(i) for i in range(n)]
    assert tree_to_infix(tree).startswith("(" * (n - 1) + "0 + 1)")

def test_long_call_argument_list_lowers():
    _, tree = build_trees("max(" + ",".join(["2*3"] * 3000) + ")")
    assert len(tree.arguments) == 3000
    assert tree.arguments[-1] == ast.BinaryExpression("*", ast.Literal("2"), ast.Literal("3"))
