import enum
import logging
from typing import Any, Iterator, List, Optional

from . import traversal

logger = logging.getLogger(__name__)


class Direction(enum.IntEnum):
    ROOT = -1
    LEFT = 0
    RIGHT = 1

    def opposite(self) -> "Direction":
        return Direction(1 - self)


class Colour(enum.Enum):
    BLACK = 0
    RED = 1


class Shape(enum.Enum):
    """Position of a red node relative to its red parent and the grandparent"""
    LEFT_LEFT = (Direction.LEFT, Direction.LEFT)
    LEFT_RIGHT = (Direction.LEFT, Direction.RIGHT)
    RIGHT_LEFT = (Direction.RIGHT, Direction.LEFT)
    RIGHT_RIGHT = (Direction.RIGHT, Direction.RIGHT)

    @classmethod
    def of(cls, parent_side: Direction, node_side: Direction) -> "Shape":
        return cls((parent_side, node_side))


class Node:

    def __init__(self, value: Any):
        self.parent: Optional[Node] = None
        self.right: Optional[Node] = None
        self.left: Optional[Node] = None
        self.colour = Colour.RED
        self.value = value

    def __repr__(self):
        return f"Node(value={self.value!r}, colour={self.colour.name})"

    def get_child(self, direction: Direction) -> Optional["Node"]:
        if direction == Direction.LEFT:
            return self.left
        return self.right

    def set_child(self, direction: Direction, node: Optional["Node"]):
        if direction == Direction.LEFT:
            self.left = node
        else:
            self.right = node

    def get_direction(self) -> Direction:
        if self.parent is None:
            return Direction.ROOT
        return Direction.LEFT if self is self.parent.left else Direction.RIGHT

    def is_red(self) -> bool:
        return self.colour == Colour.RED


def is_red(node: Optional[Node]) -> bool:
    # absent positions are black
    return node is not None and node.is_red()


class RedBlackTree:

    def __init__(self, values=()):
        self.root: Optional[Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def __len__(self):
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in traversal.in_order(self.root))

    def __contains__(self, value) -> bool:
        return self.search(value) is not None

    def is_empty(self):
        return not self.root

    def clear(self):
        self.root = None
        self._size = 0

    def insert(self, value: Any):
        node = Node(value)

        # an empty tree takes the node as a black root and needs no repair
        if self.root is None:
            node.colour = Colour.BLACK
            self.root = node
            self._size += 1
            return

        self._attach(node)
        self._size += 1
        self._fix_insert(node)

    def _attach(self, node: Node):
        """Plain binary search tree placement, equal values go right"""
        parent = self.root
        while True:
            direction = Direction.LEFT if node.value < parent.value else Direction.RIGHT
            child = parent.get_child(direction)
            if child is None:
                break
            parent = child

        parent.set_child(direction, node)
        node.parent = parent

    def _fix_insert(self, node: Node):
        # walk up the tree until the red-red violation is gone. only the
        # recolour case continues the loop, and always two levels higher
        while True:
            if node is self.root:
                node.colour = Colour.BLACK
                return

            parent = node.parent
            # a red node under a black parent is legal
            if parent.colour == Colour.BLACK:
                logger.debug("no violation at %r", node.value)
                return

            # a red parent is never the root, so the grandparent exists
            grandparent = parent.parent
            parent_side = parent.get_direction()
            uncle = grandparent.get_child(parent_side.opposite())

            if is_red(uncle):
                logger.debug("recolour case at %r", grandparent.value)
                grandparent.colour = Colour.RED
                parent.colour = Colour.BLACK
                uncle.colour = Colour.BLACK
                node = grandparent
                continue

            shape = Shape.of(parent_side, node.get_direction())
            logger.debug("%s case at %r", shape.name.lower().replace("_", "-"), node.value)
            self._rebalance(shape, grandparent, parent)
            return

    def _rebalance(self, shape: Shape, grandparent: Node, parent: Node) -> Node:
        if shape == Shape.LEFT_LEFT:
            return self._left_left(grandparent)
        if shape == Shape.LEFT_RIGHT:
            return self._left_right(grandparent, parent)
        if shape == Shape.RIGHT_LEFT:
            return self._right_left(grandparent, parent)
        return self._right_right(grandparent)

    def _left_left(self, grandparent: Node) -> Node:
        new_root = self.rotate_right(grandparent)
        new_root.colour = Colour.BLACK
        new_root.right.colour = Colour.RED
        return new_root

    def _right_right(self, grandparent: Node) -> Node:
        new_root = self.rotate_left(grandparent)
        new_root.colour = Colour.BLACK
        new_root.left.colour = Colour.RED
        return new_root

    def _left_right(self, grandparent: Node, parent: Node) -> Node:
        # turn the zig-zag into a straight left-left line first
        self.rotate_left(parent)
        return self._left_left(grandparent)

    def _right_left(self, grandparent: Node, parent: Node) -> Node:
        self.rotate_right(parent)
        return self._right_right(grandparent)

    def rotate_left(self, sub_root: Node) -> Node:
        """Promotes the right child of sub_root and returns it"""
        return self._rotate_subtree(sub_root, Direction.LEFT)

    def rotate_right(self, sub_root: Node) -> Node:
        """Promotes the left child of sub_root and returns it"""
        return self._rotate_subtree(sub_root, Direction.RIGHT)

    def _rotate_subtree(self, sub: Node, direction: Direction) -> Node:
        sub_parent = sub.parent
        side = sub.get_direction()
        new_root = sub.get_child(direction.opposite())
        new_child = new_root.get_child(direction)

        sub.set_child(direction.opposite(), new_child)

        if new_child is not None:
            new_child.parent = sub

        new_root.set_child(direction, sub)

        new_root.parent = sub_parent
        sub.parent = new_root
        if sub_parent is not None:
            sub_parent.set_child(side, new_root)
        else:
            self.root = new_root

        return new_root

    def search(self, value: Any) -> Optional[Node]:
        """Returns the node holding a value equal to value"""
        node = self.root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def find(self, value: Any) -> Optional[Any]:
        node = self.search(value)
        return None if node is None else node.value

    def find_minimum(self) -> Any:
        return traversal.minimum(self.root)

    def count_nodes(self) -> int:
        return traversal.count_nodes(self.root)

    def in_order_traversal(self) -> List[Any]:
        return [node.value for node in traversal.in_order(self.root)]

    def pre_order_traversal(self) -> List[Any]:
        return [node.value for node in traversal.pre_order(self.root)]

    def post_order_traversal(self) -> List[Any]:
        return [node.value for node in traversal.post_order(self.root)]

    def height(self) -> int:
        return traversal.height(self.root)

    def pprint(self) -> str:
        return self._pprint(self.root, 0)

    def _pprint(self, node: Optional[Node], depth: int) -> str:
        if node is None:
            return "\t" * depth + "|_ null\n"
        # recursively draw a tree
        direction = node.get_direction()
        return ("\t" * depth + f"|_ {direction.name} | {node.value}: {node.colour.name}\n"
                + self._pprint(node.left, depth + 1)
                + self._pprint(node.right, depth + 1))
