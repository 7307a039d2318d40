"""
Expression tree: a closed set of node types and the evaluator over them.
"""

from dataclasses import dataclass
from typing import Mapping, Union


def _equivalence(left, right):
    return (left and right) or (not left and not right)


# Binary connectives by symbol
OPERATORS = {
    '&': lambda left, right: left and right,
    '|': lambda left, right: left or right,
    '>': lambda left, right: not left or right,
    '-': _equivalence,
    '+': lambda left, right: not _equivalence(left, right),
}


@dataclass(frozen=True)
class Var:
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Negation:
    inner: "Executor"

    def __str__(self):
        return f"!{self.inner}"


@dataclass(frozen=True)
class BinaryExpr:
    left: "Executor"
    operator: str
    right: "Executor"

    def __post_init__(self):
        if self.operator not in OPERATORS:
            raise ValueError(f"unknown operator {self.operator}")

    def __str__(self):
        return f"({self.left} {self.operator} {self.right})"


Executor = Union[Var, Negation, BinaryExpr]


def execute(node: Executor, assignment: Mapping[str, bool]) -> bool:
    """Evaluate a tree. Variables missing from the assignment count as False."""
    if isinstance(node, Var):
        return bool(assignment.get(node.name, False))
    if isinstance(node, Negation):
        return not execute(node.inner, assignment)
    if isinstance(node, BinaryExpr):
        left = execute(node.left, assignment)
        right = execute(node.right, assignment)
        return OPERATORS[node.operator](left, right)
    raise TypeError(f"not an expression node: {node!r}")
