"""An undirected Graph class, and the Matching class used to hold a set of
independent edges of such a graph. Contracted copies of both (with a blossom
replaced by a single node) are built here too.
"""

import logging

LOGGER = logging.getLogger(__name__)

STEM_LABEL = "blossomStemEdge"


class InvalidEdge(Exception):
    """Raised on a self-loop, or when removing an edge which doesn't exist."""
    pass


class InvalidNode(Exception):
    """Raised when None is used as a node, as None stands for "no node"
    (an exposed vertex, or the parent of a root)."""
    pass


class InvalidMatching(Exception):
    """Raised when a set of edges is not a matching (of a given graph)."""
    pass


def _check_edge(edge):
    if not isinstance(edge, tuple) or len(edge) != 2:
        raise TypeError("Edges must be pairs of nodes, got {!r}".format(edge))
    if edge[0] is None or edge[1] is None:
        raise InvalidNode("None cannot be a node, in edge {}".format(edge))
    if edge[0] == edge[1]:
        raise InvalidEdge("Self-loop on {} not permitted".format(edge[0]))


class Graph(object):
    """An undirected graph without self-loops or parallel edges.

    Nodes can be any hashable objects except None. Nodes, edges and
    adjacency lists keep their insertion order, so anything iterating over
    the graph does so deterministically.
    """

    def __init__(self, nodes=(), edges=()):
        # List of adjacent vertices.
        self._nodes = {}
        # Maps frozenset({a, b}) to the edge (a, b) as first added.
        self._edges = {}
        self._labels = {}
        for node in nodes:
            self.add_node(node)
        for edge in edges:
            self.add_edge(edge)

    def add_node(self, node):
        """Add a node."""
        if node is None:
            raise InvalidNode("None cannot be a node")
        if node not in self._nodes:
            self._nodes[node] = []

    def add_edge(self, edge, label=None):
        """Add an edge, adding its end points if they are new. Adding an edge
        which is already in the graph (in either orientation) does nothing.
        """
        _check_edge(edge)
        key = frozenset(edge)
        if key in self._edges:
            LOGGER.debug("Ignoring duplicate edge %s", edge)
            return
        one, two = edge
        self.add_node(one)
        self.add_node(two)
        self._edges[key] = edge
        if label is not None:
            self._labels[key] = label
        self._nodes[one].append(two)
        self._nodes[two].append(one)

    def remove_edge(self, edge):
        """Remove an edge."""
        key = frozenset(edge)
        if key not in self._edges:
            raise InvalidEdge("No edge {} in the graph".format(edge))
        one, two = self._edges.pop(key)
        self._labels.pop(key, None)
        self._nodes[one].remove(two)
        self._nodes[two].remove(one)

    def nodes(self):
        """The list of nodes."""
        return list(self._nodes)

    def edges(self):
        """The list of edges, each oriented as when it was added."""
        return list(self._edges.values())

    def neighbours(self, node):
        """The nodes adjacent to node."""
        return list(self._nodes[node])

    def has_node(self, node):
        return node in self._nodes

    def has_edge(self, one, two):
        """Returns true if and only if the edge {one, two} exists."""
        return frozenset((one, two)) in self._edges

    def edge(self, one, two):
        """The edge {one, two}, oriented as when it was added."""
        return self._edges[frozenset((one, two))]

    def label(self, one, two):
        """The label of the edge {one, two}, or None."""
        key = frozenset((one, two))
        if key not in self._edges:
            raise InvalidEdge("No edge ({}, {}) in the graph".format(one, two))
        return self._labels.get(key)

    def degree(self, node):
        """Return the degree of a node."""
        return len(self._nodes[node])

    def num_nodes(self):
        return len(self._nodes)

    def num_edges(self):
        return len(self._edges)

    def __contains__(self, node):
        return node in self._nodes

    def __len__(self):
        return len(self._nodes)

    def copy(self):
        """A structural copy, which can be changed without affecting this
        graph."""
        new = Graph()
        for node in self._nodes:
            new.add_node(node)
        for key, edge in self._edges.items():
            new.add_edge(edge, self._labels.get(key))
        return new

    def contract(self, blossom):
        """Return a copy of this graph with every node of the blossom replaced
        by the blossom itself.

        Edges inside the blossom are dropped, and edges from a blossom node
        to the rest of the graph become (stem) edges of the new node.
        """
        contracted = Graph()
        for node in self._nodes:
            if node not in blossom:
                contracted.add_node(node)
        contracted.add_node(blossom)
        for key, edge in self._edges.items():
            one, two = edge
            if one in blossom and two in blossom:
                continue
            if one in blossom:
                contracted.add_edge((blossom, two), STEM_LABEL)
            elif two in blossom:
                contracted.add_edge((one, blossom), STEM_LABEL)
            else:
                contracted.add_edge(edge, self._labels.get(key))
        return contracted

    def __str__(self):
        s = "V: " + " ".join(str(x) for x in self._nodes)
        s += "\n"
        s += "E: " + " ".join(str(x) for x in self._edges.values())
        return s


class Matching(object):
    """A set of edges, no two of which share an end point."""

    def __init__(self, edges=()):
        self._mate = {}
        for edge in edges:
            self.add_edge(edge)

    def add_edge(self, edge):
        """Add an edge. Both end points must be exposed (or already matched
        to each other)."""
        _check_edge(edge)
        one, two = edge
        if self._mate.get(one, two) != two or self._mate.get(two, one) != one:
            raise InvalidMatching("Edge {} conflicts with the matching".format(edge))
        self._mate[one] = two
        self._mate[two] = one

    def remove_edge(self, edge):
        """Remove an edge."""
        one, two = edge
        if not self.has_edge(one, two):
            raise InvalidEdge("No edge {} in the matching".format(edge))
        del self._mate[one]
        del self._mate[two]

    def mate(self, node):
        """The node matched to node, or None if node is exposed."""
        return self._mate.get(node)

    def is_exposed(self, node):
        return node not in self._mate

    def has_edge(self, one, two):
        return one in self._mate and self._mate[one] == two

    def edges(self):
        """The list of matched edges."""
        seen = set()
        edges = []
        for node, mate in self._mate.items():
            if node in seen:
                continue
            seen.add(mate)
            edges.append((node, mate))
        return edges

    def copy(self):
        new = Matching()
        new._mate = dict(self._mate)
        return new

    def augment(self, path):
        """Return a new matching, which is this one with the membership of
        every edge on the given path toggled.

        :param path: a list of edges
        """
        augmented = self.copy()
        added = []
        for edge in path:
            if augmented.has_edge(*edge):
                augmented.remove_edge(edge)
            else:
                added.append(edge)
        for edge in added:
            augmented.add_edge(edge)
        return augmented

    def contract(self, blossom):
        """Return a copy of this matching for the graph in which blossom has
        been contracted. Only the base of a blossom can be matched to a node
        outside it, and that edge is kept as an edge of the blossom.
        """
        contracted = Matching()
        for one, two in self.edges():
            if one in blossom and two in blossom:
                continue
            if one in blossom:
                contracted.add_edge((blossom, two))
            elif two in blossom:
                contracted.add_edge((one, blossom))
            else:
                contracted.add_edge((one, two))
        return contracted

    def __len__(self):
        return len(self._mate) // 2

    def __iter__(self):
        return iter(self.edges())

    def __contains__(self, edge):
        return self.has_edge(*edge)

    def __eq__(self, other):
        if not isinstance(other, Matching):
            return NotImplemented
        return self._mate == other._mate

    __hash__ = None

    def __repr__(self):
        return "Matching({})".format(self.edges())
