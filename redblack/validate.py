"""
Red-black invariant checks.

The tree never checks itself while inserting; these functions walk the
structure from the outside through ``tree.root`` so tests and inspection
tools can verify every rule:

1. In-order values never decrease.
2. Absent positions are black.
3. The root is black.
4. A red node has no red child.
5. From every node, all paths to an absent position cross the same number
   of black nodes.
"""
from typing import TYPE_CHECKING, Optional

from . import traversal
from .exceptions import InvariantViolation
from .rbtree import Colour, is_red

if TYPE_CHECKING:
    from .rbtree import Node, RedBlackTree


def root_is_black(tree: "RedBlackTree") -> bool:
    return not is_red(tree.root)


def no_red_red(node: Optional["Node"]) -> bool:
    return _find_red_red(node) is None


def is_ordered(node: Optional["Node"]) -> bool:
    return _find_disorder(node) is None


def black_height(node: Optional["Node"]) -> int:
    """Black nodes between node and any absent position below it.

    The starting node is not counted and the absent position is. Raises
    InvariantViolation if the count differs between paths from any node in
    the subtree.
    """
    if node is None:
        return 0
    left = _black_count(node.left)
    if left != _black_count(node.right):
        _raise_black_height(node)
    return left


def _black_count(node: Optional["Node"]) -> int:
    # counts the node itself and the absent position at the bottom
    if node is None:
        return 1
    left = _black_count(node.left)
    right = _black_count(node.right)
    if left != right:
        _raise_black_height(node)
    return left + (1 if node.colour == Colour.BLACK else 0)


def _raise_black_height(node: "Node"):
    raise InvariantViolation(
        "black-height", node,
        f"paths below {node.value!r} cross different numbers of black nodes"
    )


def _find_red_red(node: Optional["Node"]) -> Optional["Node"]:
    for current in traversal.pre_order(node):
        if is_red(current) and (is_red(current.left) or is_red(current.right)):
            return current
    return None


def _find_disorder(node: Optional["Node"]) -> Optional["Node"]:
    previous = None
    for current in traversal.in_order(node):
        if previous is not None and current.value < previous.value:
            return current
        previous = current
    return None


def check(tree: "RedBlackTree") -> int:
    """Raises InvariantViolation for the first broken rule.

    Returns the black-height of the root, 0 for an empty tree.
    """
    disorder = _find_disorder(tree.root)
    if disorder is not None:
        raise InvariantViolation("order", disorder, f"{disorder.value!r} follows a larger value")

    if not root_is_black(tree):
        raise InvariantViolation("black-root", tree.root, f"root {tree.root.value!r} is red")

    red_red = _find_red_red(tree.root)
    if red_red is not None:
        raise InvariantViolation("red-red", red_red, f"red node {red_red.value!r} has a red child")

    return black_height(tree.root)


def is_valid(tree: "RedBlackTree") -> bool:
    try:
        check(tree)
    except InvariantViolation:
        return False
    return True
