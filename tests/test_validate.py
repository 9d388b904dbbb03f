import pytest

from redblack import InvariantViolation, RedBlackTree
from redblack import rbtree as rb
from redblack import validate


def link(parent: rb.Node, direction: rb.Direction, child: rb.Node) -> rb.Node:
    parent.set_child(direction, child)
    child.parent = parent
    return child


def black(value) -> rb.Node:
    node = rb.Node(value)
    node.colour = rb.Colour.BLACK
    return node


def test_empty_tree_is_valid(tree: RedBlackTree):
    assert validate.root_is_black(tree)
    assert validate.check(tree) == 0
    assert validate.is_valid(tree)


def test_black_height_counts_absent_positions():
    tree = RedBlackTree([2, 1, 3, 4])

    # 2 is black over two black children, 4 is red below 3
    assert validate.black_height(tree.root) == 2
    assert validate.black_height(tree.root.right) == 1
    assert validate.black_height(tree.root.right.right) == 1
    assert validate.black_height(None) == 0


def test_red_root(tree: RedBlackTree):
    tree.root = rb.Node(1)

    assert not validate.root_is_black(tree)
    with pytest.raises(InvariantViolation) as exc:
        validate.check(tree)
    assert exc.value.rule == "black-root"
    assert exc.value.node is tree.root


def test_red_red(tree: RedBlackTree):
    tree.root = black(5)
    red = link(tree.root, rb.Direction.LEFT, rb.Node(3))
    link(red, rb.Direction.LEFT, rb.Node(1))
    link(tree.root, rb.Direction.RIGHT, black(8))

    assert not validate.no_red_red(tree.root)
    with pytest.raises(InvariantViolation, match="red-red") as exc:
        validate.check(tree)
    assert exc.value.node is red


def test_uneven_black_height(tree: RedBlackTree):
    tree.root = black(5)
    left = link(tree.root, rb.Direction.LEFT, black(3))
    link(left, rb.Direction.LEFT, black(1))
    link(tree.root, rb.Direction.RIGHT, black(8))

    with pytest.raises(InvariantViolation) as exc:
        validate.check(tree)
    # the first node with mismatched paths is the left child
    assert exc.value.rule == "black-height"
    assert exc.value.node is left
    assert not validate.is_valid(tree)


def test_disorder(tree: RedBlackTree):
    tree.root = black(5)
    link(tree.root, rb.Direction.LEFT, rb.Node(7))
    link(tree.root, rb.Direction.RIGHT, rb.Node(9))

    assert not validate.is_ordered(tree.root)
    with pytest.raises(InvariantViolation) as exc:
        validate.check(tree)
    assert exc.value.rule == "order"
    assert exc.value.node is tree.root


def test_violation_is_an_assertion():
    error = InvariantViolation("red-red", None, "broken")

    assert isinstance(error, AssertionError)
    assert str(error) == "red-red: broken"
