"""Small graphs with odd cycles, used to demonstrate the matching code."""

from blossom_matching.graph import Graph


def _make_graph(num_nodes, edges):
    g = Graph(nodes=range(num_nodes))
    for index, edge in enumerate(edges):
        g.add_edge(edge, "edge{}".format(index))
    return g


def make_path_and_triangles():
    """A triangle 0-1-2 and a square 1-2-3-4 sharing the edge 1-2, with a
    pendant vertex 5 at 4. A maximum matching has 3 edges."""
    return _make_graph(6, [(0, 1), (0, 2), (1, 2), (1, 4), (2, 3), (3, 4),
                           (4, 5)])


def make_triangles_and_squares():
    """Triangles and squares glued along their edges, with two pendant
    paths. A maximum matching is perfect."""
    return _make_graph(12, [(0, 1), (0, 4), (0, 7), (0, 8), (1, 2), (1, 7),
                            (1, 10), (2, 3), (2, 6), (2, 11), (3, 4), (3, 5),
                            (3, 6), (4, 5), (4, 9), (8, 9), (10, 11)])


def make_pentagon_and_line():
    """The pentagon 3-4-5-6-7, entered by the path 8-0-1-2-3, with a pendant
    vertex 9 at 7. A maximum matching is perfect."""
    return _make_graph(10, [(0, 1), (0, 8), (1, 2), (2, 3), (3, 4), (3, 7),
                            (4, 5), (5, 6), (6, 7), (7, 9)])


def make_cycle(length):
    """A single cycle through nodes 0, ..., length - 1."""
    return _make_graph(length, [(i, (i + 1) % length) for i in range(length)])


SAMPLE_GRAPHS = {
    "path_and_triangles": make_path_and_triangles,
    "triangles_and_squares": make_triangles_and_squares,
    "pentagon_and_line": make_pentagon_and_line,
    "pentagon": lambda: make_cycle(5),
}
