"""Abstract syntax tree nodes and constructors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class NodeOp(IntEnum):
    """Operations an AST node can represent."""

    ADD = 0
    SUBTRACT = 1
    MULTIPLY = 2
    DIVIDE = 3
    INTLIT = 4


@dataclass
class ASTNode:
    """A node in the expression tree."""

    op: NodeOp
    left: Optional["ASTNode"] = None
    right: Optional["ASTNode"] = None
    intvalue: int = 0


def make_node(
    op: NodeOp,
    left: Optional[ASTNode],
    right: Optional[ASTNode],
    intvalue: int = 0,
) -> ASTNode:
    """Build a generic node with up to two children."""
    return ASTNode(NodeOp(op), left, right, intvalue)


def make_leaf(op: NodeOp, intvalue: int) -> ASTNode:
    """Build a node with no children."""
    return make_node(op, None, None, intvalue)


def make_unary(op: NodeOp, left: Optional[ASTNode], intvalue: int = 0) -> ASTNode:
    """Build a node with only a left child."""
    return make_node(op, left, None, intvalue)