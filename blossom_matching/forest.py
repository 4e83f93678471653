"""An alternating forest, stored as parent links. This is specifically designed
for Edmond's Blossom algorithm for finding maximum matchings in graphs,
and may not be suitable for other uses.

Unlike a general union-find structure, nodes are always attached beneath the
node that discovered them and no path compression is done, so the chain from
a node to its root is the tree path itself, and its length gives the parity
of the node.
"""

import logging


class InvalidEdgeException(Exception):
    pass


LOGGER = logging.getLogger(__name__)


class Forest(object):
    """A set of rooted trees."""
    def __init__(self):
        self._parent = {}

    def add_node(self, node):
        """Add a node to the forest, as the root of a new tree."""
        self._parent[node] = None

    def attach(self, child, parent):
        """Make parent the parent of child, unless they are already in the
        same tree. The parent must already be in the forest; the child is added
        if it is not.
        """
        if parent not in self._parent:
            raise InvalidEdgeException(
                "Cannot attach {} beneath {}, which is not in the forest".format(
                    child, parent))
        if child not in self._parent:
            self.add_node(child)
        if self.root(child) != self.root(parent):
            self._parent[child] = parent

    def root(self, node):
        """Return the root of the given node."""
        parent = self._parent[node]
        the_root = node
        while parent is not None:
            the_root = parent
            parent = self._parent[parent]
        return the_root

    def path(self, node):
        """Return the path from this node to its root, as a list of nodes
        starting with node itself."""
        path = [node]
        parent = self._parent[node]
        while parent is not None:
            path.append(parent)
            parent = self._parent[parent]
        return path

    def distance(self, node):
        """The number of edges between the node and its root."""
        height = 0
        parent = self._parent[node]
        while parent is not None:
            height += 1
            parent = self._parent[parent]
        return height

    def is_even(self, node):
        return self.distance(node) % 2 == 0

    def find(self, node_one, node_two):
        """Are the two nodes in the same tree?"""
        return self.root(node_one) == self.root(node_two)

    def has_node(self, node):
        """Does a node exist in this forest?"""
        return node in self._parent

    def __contains__(self, node):
        return node in self._parent

    def __len__(self):
        return len(self._parent)
