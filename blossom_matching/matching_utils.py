import logging

from networkx import Graph as nx_Graph
from networkx.algorithms.matching import max_weight_matching

LOGGER = logging.getLogger(__name__)


class MatchingException(Exception):
    pass


def check_validity(matching, graph):
    """Check that the matching is valid for the graph.

    This method checks that:
      - all used edges exist
      - no vertex is used twice
    """
    vtx_used = set()
    for one, two in matching.edges():
        if not graph.has_edge(one, two):
            raise MatchingException("Edge ({}, {}) is used but does not exist".format(
                one, two))
        for vtx in (one, two):
            if vtx in vtx_used:
                raise MatchingException("Vertex {} used more than once".format(vtx))
            vtx_used.add(vtx)


def exposed_vertices(graph, matching):
    """The vertices of the graph which are not covered by the matching."""
    return [v for v in graph.nodes() if matching.is_exposed(v)]


def is_augmenting_path(path, graph, matching):
    """Is the given list of vertices an augmenting path?

    That is, a simple path of graph edges between two distinct exposed
    vertices, whose edges are alternately not in and in the matching.
    """
    if len(path) < 2 or len(path) % 2 != 0:
        return False
    if len(set(path)) != len(path):
        return False
    if not (matching.is_exposed(path[0]) and matching.is_exposed(path[-1])):
        return False
    for index, (one, two) in enumerate(zip(path, path[1:])):
        if not graph.has_edge(one, two):
            return False
        if matching.has_edge(one, two) != (index % 2 == 1):
            return False
    return True


def to_networkx(graph):
    """A networkx copy of the graph."""
    g = nx_Graph()
    g.add_nodes_from(graph.nodes())
    g.add_edges_from(graph.edges())
    return g


def maximum_matching_size_networkx(graph):
    """The size of a maximum matching, as computed by networkx."""
    return len(max_weight_matching(to_networkx(graph), maxcardinality=True))


def check_maximum(matching, graph):
    """Check that the matching is valid and that networkx can't find a
    larger one."""
    check_validity(matching, graph)
    expected = maximum_matching_size_networkx(graph)
    LOGGER.debug("networkx finds a matching of size %d", expected)
    if len(matching) != expected:
        raise MatchingException("Matching has size {}, but a maximum matching "
                                "has size {}".format(len(matching), expected))
