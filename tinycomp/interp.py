"""Evaluation of expression trees."""

from __future__ import annotations

from typing import Callable, Optional

from .tree import ASTNode, NodeOp


class InterpretError(Exception):
    """Raised when a tree cannot be evaluated."""


_SYMBOLS = {
    NodeOp.ADD: "+",
    NodeOp.SUBTRACT: "-",
    NodeOp.MULTIPLY: "*",
    NodeOp.DIVIDE: "/",
}


def _divide(left: int, right: int) -> int:
    if right == 0:
        raise InterpretError("division by zero")
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


_OPERATIONS: dict[NodeOp, Callable[[int, int], int]] = {
    NodeOp.ADD: lambda a, b: a + b,
    NodeOp.SUBTRACT: lambda a, b: a - b,
    NodeOp.MULTIPLY: lambda a, b: a * b,
    NodeOp.DIVIDE: _divide,
}


def interpret(
    node: ASTNode, trace: Optional[Callable[[str], None]] = None
) -> int:
    """Evaluate ``node`` and return its integer value.

    If ``trace`` is given it receives one line per node, in evaluation
    order: ``"int N"`` for literals and ``"L op R"`` for operators.
    Division truncates toward zero.
    """
    if node.op is NodeOp.INTLIT:
        if trace is not None:
            trace(f"int {node.intvalue}")
        return node.intvalue

    operation = _OPERATIONS.get(node.op)
    if operation is None:
        raise InterpretError(f"Unknown AST operator {int(node.op)}")
    if node.left is None or node.right is None:
        raise InterpretError(
            f"operator {_SYMBOLS[node.op]} needs two operands"
        )

    leftval = interpret(node.left, trace)
    rightval = interpret(node.right, trace)
    if trace is not None:
        trace(f"{leftval} {_SYMBOLS[node.op]} {rightval}")
    return operation(leftval, rightval)