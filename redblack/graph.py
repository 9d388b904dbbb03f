# export of the node structure to networkx for structural inspection
from typing import TYPE_CHECKING

import networkx as nx

from . import traversal
from .rbtree import Direction

if TYPE_CHECKING:
    from .rbtree import RedBlackTree


def to_digraph(tree: "RedBlackTree") -> nx.DiGraph:
    """Builds a parent -> child DiGraph keyed by node identity

    Graph nodes carry the stored ``value`` and ``colour``; edges carry the
    ``side`` (LEFT or RIGHT) the child occupies under its parent.
    """
    G = nx.DiGraph()
    for node in traversal.pre_order(tree.root):
        G.add_node(id(node), value=node.value, colour=node.colour)
        for direction in (Direction.LEFT, Direction.RIGHT):
            child = node.get_child(direction)
            if child is not None:
                G.add_edge(id(node), id(child), side=direction)
    return G


def parent_links_consistent(tree: "RedBlackTree") -> bool:
    """Checks every parent back-reference against the child links"""
    if tree.root is not None and tree.root.parent is not None:
        return False

    G = to_digraph(tree)
    if G.number_of_nodes() and not nx.is_arborescence(G):
        return False

    for node in traversal.pre_order(tree.root):
        if node.parent is None:
            continue
        if not G.has_edge(id(node.parent), id(node)):
            return False
    return True
