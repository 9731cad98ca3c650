from dataclasses import dataclass, field
from typing import List, Set
from .lowering import Literal, BinaryExpression, FunctionCall

@dataclass
class Analysis:
    literals: List[str] = field(default_factory=list)
    functions: Set[str] = field(default_factory=set)
    operators: Set[str] = field(default_factory=set)
    depth: int = 0

def analyze(node) -> Analysis:
    an = Analysis()

    # children pushed right-to-left so literals come out in source order
    stack = [(node, 1)]
    while stack:
        n, level = stack.pop()
        an.depth = max(an.depth, level)

        if isinstance(n, Literal):
            an.literals.append(n.value)

        elif isinstance(n, BinaryExpression):
            an.operators.add(n.operator)
            stack.append((n.right, level + 1))
            stack.append((n.left, level + 1))

        elif isinstance(n, FunctionCall):
            an.functions.add(n.name)
            stack.extend((a, level + 1) for a in reversed(n.arguments))

    return an
