"""Child-pointer walks over a tree of nodes.

None of these depend on node colour: they work on any binary tree whose
nodes expose ``left``, ``right`` and ``value``.
"""
from typing import TYPE_CHECKING, Any, Iterator, Optional

from .exceptions import EmptyTreeError

if TYPE_CHECKING:
    from .rbtree import Node


def in_order(node: Optional["Node"]) -> Iterator["Node"]:
    # stack based like pre_order; the recursive walks below are bounded by
    # tree height
    stack = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def pre_order(node: Optional["Node"]) -> Iterator["Node"]:
    stack = [node] if node is not None else []
    while stack:
        node = stack.pop()
        yield node
        # right goes on first so the left subtree is visited first
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def post_order(node: Optional["Node"]) -> Iterator["Node"]:
    if node is None:
        return
    yield from post_order(node.left)
    yield from post_order(node.right)
    yield node


def count_nodes(node: Optional["Node"]) -> int:
    if node is None:
        return 0
    return 1 + count_nodes(node.left) + count_nodes(node.right)


def minimum(node: Optional["Node"]) -> Any:
    """Returns the leftmost value below node"""
    if node is None:
        raise EmptyTreeError("minimum of an empty tree")
    while node.left is not None:
        node = node.left
    return node.value


def minimum_recursive(node: Optional["Node"]) -> Any:
    if node is None:
        raise EmptyTreeError("minimum of an empty tree")
    if node.left is None:
        return node.value
    return minimum_recursive(node.left)


def height(node: Optional["Node"]) -> int:
    if node is None:
        return -1
    return 1 + max(height(node.left), height(node.right))
