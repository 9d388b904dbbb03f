from .exceptions import EmptyTreeError, InvariantViolation
from .rbtree import Colour, Direction, Node, RedBlackTree, Shape

__all__ = [
    "Colour",
    "Direction",
    "EmptyTreeError",
    "InvariantViolation",
    "Node",
    "RedBlackTree",
    "Shape",
]
