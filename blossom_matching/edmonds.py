"""Edmond's Blossom algorithm, for maximum cardinality matchings in general
graphs.
"""

from collections import deque
import logging

from blossom_matching.forest import Forest
from blossom_matching.graph import InvalidMatching, Matching
from blossom_matching.matching_utils import is_augmenting_path

LOGGER = logging.getLogger(__name__)


class Blossom(object):
    """An odd length cycle found while growing an alternating tree.

    Once contracted, the Blossom object itself is the node which replaces the
    cycle.

    Data members:
        cycle: the vertices of the cycle, in order, starting at the base. The
            last vertex is adjacent to the first.
        base: the only vertex of the cycle which is not matched to another
            vertex of the cycle.
        stem: the tree path from the base to the root of its tree.
    """

    def __init__(self, cycle, stem=None):
        assert len(cycle) % 2 == 1 and len(cycle) >= 3, \
            "Blossom {} is not an odd cycle".format(cycle)
        self.cycle = list(cycle)
        self.base = self.cycle[0]
        self.stem = list(stem) if stem is not None else [self.base]
        self._nodes = frozenset(self.cycle)

    @classmethod
    def from_forest(cls, forest, one, two):
        """The blossom closed by the edge (one, two) between two even vertices
        of the same tree."""
        path_one = forest.path(one)
        path_two = forest.path(two)
        on_path_two = set(path_two)
        # The first common vertex is the base; everything above it is shared
        # by both paths and is not part of the cycle.
        index_one = next(index for index, node in enumerate(path_one)
                         if node in on_path_two)
        base = path_one[index_one]
        index_two = path_two.index(base)
        cycle = list(reversed(path_one[:index_one + 1])) + path_two[:index_two]
        return cls(cycle, path_one[index_one:])

    def __contains__(self, node):
        return node in self._nodes

    def __len__(self):
        return len(self.cycle)

    def __repr__(self):
        return "Blossom({})".format(", ".join(str(x) for x in self.cycle))


def get_blossom_path(blossom, entry, leave):
    """Given a blossom (odd length cycle) and an entry and leave point, find
    the even length route around the cycle.

    :param blossom: the Blossom
    :param entry, leave: the entry and leave points around the cycle

    :return: the even length path from entry to leave around the cycle, as a
        list of vertices
    """
    cycle = blossom.cycle
    size = len(cycle)
    start = cycle.index(entry)
    end = cycle.index(leave)
    forwards = (end - start) % size
    if forwards % 2 == 0:
        return [cycle[(start + step) % size] for step in range(forwards + 1)]
    backwards = (start - end) % size
    assert backwards % 2 == 0
    return [cycle[(start - step) % size] for step in range(backwards + 1)]


def find_attachment(graph, blossom, node):
    """Find a vertex of the blossom adjacent to node in graph."""
    for neighbour in graph.neighbours(node):
        if neighbour in blossom:
            return neighbour
    raise AssertionError("{} is not adjacent to {}".format(node, blossom))


def lift_path(path, blossom, graph, matching):
    """Expand an augmenting path found after contracting blossom into an
    augmenting path of graph, with respect to matching.

    :param path: the augmenting path in the contracted graph, as a list of
        vertices
    :param graph, matching: the graph and matching before contraction
    :return: the augmenting path as a list of vertices of graph
    """
    if blossom not in path:
        return path
    index = path.index(blossom)
    base = blossom.base

    def attachment(node):
        # The matched edge into the blossom can only end at the base
        if matching.mate(base) == node:
            return base
        return find_attachment(graph, blossom, node)

    if 0 < index < len(path) - 1:
        entry = attachment(path[index - 1])
        leave = attachment(path[index + 1])
        assert base in (entry, leave), \
            "Path {} doesn't enter {} through its base".format(path, blossom)
    else:
        # The path ends in the blossom, so it must end at the exposed base.
        assert matching.is_exposed(base)
        if index == 0:
            entry, leave = base, attachment(path[1])
        else:
            entry, leave = attachment(path[index - 1]), base
    arc = get_blossom_path(blossom, entry, leave)
    LOGGER.debug("Lifting %s through %s as %s", path, blossom, arc)
    lifted = path[:index] + arc + path[index + 1:]
    assert is_augmenting_path(lifted, graph, matching), \
        "Lifted path {} is not augmenting".format(lifted)
    return lifted


def _grow_forest(graph, matching, start=None):
    """Grow an alternating forest from every exposed vertex.

    :return: a pair (path, blossom). At most one of these is not None: path
        is an augmenting path as a list of vertices, blossom is the first
        blossom found.
    """
    forest = Forest()
    queue = deque()
    exposed = [v for v in graph.nodes() if matching.is_exposed(v)]
    if start is not None and start in exposed:
        exposed.remove(start)
        exposed.insert(0, start)
    for vertex in exposed:
        forest.add_node(vertex)
        queue.append(vertex)
    marked = set(frozenset(edge) for edge in matching.edges())
    while queue:
        v = queue.popleft()
        if not forest.is_even(v):
            continue
        for w in graph.neighbours(v):
            edge = frozenset((v, w))
            if edge in marked:
                continue
            marked.add(edge)
            if not forest.has_node(w):
                # w is matched, as every exposed vertex is a root
                mate = matching.mate(w)
                assert mate is not None, "Exposed vertex {} not in forest".format(w)
                forest.attach(w, v)
                forest.attach(mate, w)
                queue.append(mate)
            elif not forest.is_even(w):
                # Do nothing
                continue
            elif not forest.find(v, w):
                path = list(reversed(forest.path(v))) + forest.path(w)
                return path, None
            else:
                return None, Blossom.from_forest(forest, v, w)
    return None, None


def find_augmenting_path(graph, matching=None, start=None):
    """Finds an augmenting path in the graph.

    Each blossom found is contracted and the search starts again on the
    contracted graph. The contracted graphs are kept on a stack, and once a
    path is found it is lifted through each blossom in turn, innermost first.

    :param matching: A Matching, empty by default
    :param start: An exposed vertex to grow the first tree from. Trees are
    still grown from every other exposed vertex too.
    :raises ValueError: if start is not an exposed vertex of the graph
    :returns: An augmenting path as a list of edges, or an empty list if no
    augmenting path exists.
    """
    if matching is None:
        matching = Matching()
    if start is not None:
        if start not in graph:
            raise ValueError("Start vertex {} is not in the graph".format(start))
        if not matching.is_exposed(start):
            raise ValueError("Start vertex {} is matched to {}".format(
                start, matching.mate(start)))
    frames = []
    while True:
        path, blossom = _grow_forest(graph, matching, start)
        if blossom is None:
            break
        LOGGER.debug("Shrinking on %s with stem %s", blossom, blossom.stem)
        frames.append((graph, matching, blossom))
        graph = graph.contract(blossom)
        matching = matching.contract(blossom)
        start = blossom if matching.is_exposed(blossom) else None
    if path is None:
        LOGGER.debug("No augmenting path after %d contractions", len(frames))
        return []
    while frames:
        graph, matching, blossom = frames.pop()
        path = lift_path(path, blossom, graph, matching)
    LOGGER.debug("Found a path %s", path)
    return list(zip(path, path[1:]))


def greedy_matching(graph):
    """A maximal matching, found by adding every edge whose end points are
    both still exposed."""
    matching = Matching()
    for one, two in graph.edges():
        if matching.is_exposed(one) and matching.is_exposed(two):
            matching.add_edge((one, two))
    return matching


def iter_matchings(graph, matching=None):
    """Generate the matchings found while augmenting, starting with the given
    matching and ending with a maximum matching. Each matching has one more
    edge than the one before.
    """
    if matching is None:
        matching = Matching()
    for one, two in matching.edges():
        if not graph.has_edge(one, two):
            raise InvalidMatching("Matched edge ({}, {}) is not in the graph".format(
                one, two))
    yield matching
    while True:
        # Follow augmenting path, which starts and ends with open edges not in
        # the matching, and alternates with edges that currently are in the
        # matching.
        path = find_augmenting_path(graph, matching)
        if not path:
            break
        augmented = matching.augment(path)
        assert len(augmented) == len(matching) + 1
        matching = augmented
        yield matching


def find_a_maximum_matching(graph, matching=None):
    """Find a maximum matching, optionally starting from the given one."""
    for matching in iter_matchings(graph, matching):
        pass
    LOGGER.debug("Maximum matching has size %d", len(matching))
    return matching


def find_maximally_matchable_edges(graph):
    """Find all edges which are in every maximum sized matching."""
    largest = find_a_maximum_matching(graph)
    LOGGER.info("Largest matching has size %d", len(largest))
    matchable = []
    for one, two in largest.edges():
        e = graph.edge(one, two)
        LOGGER.debug("Testing %s", e)
        reduced = graph.copy()
        reduced.remove_edge(e)
        new_matching = largest.copy()
        new_matching.remove_edge((one, two))
        new_max = find_a_maximum_matching(reduced, new_matching)
        if len(new_max) < len(largest):
            LOGGER.debug("%s is matchable", e)
            matchable.append(e)
    LOGGER.info("Found %s maximally matchable edges", len(matchable))
    return matchable
