import pytest

from tinycomp.tree import ASTNode, NodeOp, make_leaf, make_node, make_unary


def test_make_leaf_has_no_children():
    leaf = make_leaf(NodeOp.INTLIT, 5)
    assert leaf == ASTNode(NodeOp.INTLIT, None, None, 5)


def test_make_node_keeps_children_in_place():
    a = make_leaf(NodeOp.INTLIT, 1)
    b = make_leaf(NodeOp.INTLIT, 2)
    node = make_node(NodeOp.ADD, a, b, 0)
    assert node.left is a
    assert node.right is b
    assert node.op is NodeOp.ADD
    assert node.intvalue == 0


def test_make_unary_has_only_left_child():
    a = make_leaf(NodeOp.INTLIT, 3)
    node = make_unary(NodeOp.SUBTRACT, a, 0)
    assert node.left is a
    assert node.right is None


def test_make_node_accepts_integer_op():
    node = make_node(2, None, None, 0)
    assert node.op is NodeOp.MULTIPLY


def test_make_node_rejects_unknown_op():
    with pytest.raises(ValueError):
        make_node(17, None, None, 0)


@pytest.mark.parametrize(
    "number, expected",
    [
        (0, NodeOp.ADD),
        (1, NodeOp.SUBTRACT),
        (2, NodeOp.MULTIPLY),
        (3, NodeOp.DIVIDE),
        (4, NodeOp.INTLIT),
    ],
)
def test_node_op_order_matches_operator_table(number, expected):
    assert make_leaf(number, 0).op is expected