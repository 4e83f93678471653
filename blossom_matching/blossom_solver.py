"""
Find maximum matchings in the sample graphs
"""

import argparse
import logging
import time

from blossom_matching import edmonds
from blossom_matching import matching_utils
from blossom_matching import sample_graphs

LOGGER = logging.getLogger(__name__)


def solve(graph, use_greedy=False, check=False):
    if use_greedy:
        initial = edmonds.greedy_matching(graph)
    else:
        initial = None
    matching = edmonds.find_a_maximum_matching(graph, initial)
    if check:
        matching_utils.check_maximum(matching, graph)
    return matching


def start(argv=None):
    parser = argparse.ArgumentParser("Find a maximum matching in a sample graph")
    parser.add_argument("graph", choices=sorted(sample_graphs.SAMPLE_GRAPHS),
            help="The sample graph to match")
    parser.add_argument("--greedy", "-g", required=False,
            action="store_true",
            help="Start from a greedy matching instead of an empty one")
    parser.add_argument("--check", "-c", required=False,
            action="store_true",
            help="Check the matching is valid, and compare its size with networkx")
    parser.add_argument("--matchable", "-m", required=False,
            action="store_true",
            help="Also list the edges which are in every maximum matching")
    parser.add_argument("--debug", "-d", required=False, action="store_true",
                        help="Enable debugging output")

    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(asctime)s %(levelname)s:%(name)s '
                                   '%(message)s')
    else:
        logging.basicConfig(level=logging.INFO,
                            format='%(asctime)s %(levelname)s:%(name)s '
                                   '%(message)s')

    graph = sample_graphs.SAMPLE_GRAPHS[args.graph]()
    LOGGER.debug("Matching in graph\n%s", graph)
    start_time = time.time()
    matching = solve(graph, args.greedy, args.check)
    time_taken = time.time() - start_time
    print("graph: {}".format(args.graph))
    print("nodes: {}".format(graph.num_nodes()))
    print("edges: {}".format(graph.num_edges()))
    print("matching_size: {}".format(len(matching)))
    print("matching: {}".format(" ".join("{}-{}".format(one, two)
                                         for one, two in matching.edges())))
    exposed = matching_utils.exposed_vertices(graph, matching)
    print("exposed: {}".format(" ".join(str(v) for v in exposed)))
    if args.matchable:
        matchable = edmonds.find_maximally_matchable_edges(graph)
        print("matchable: {}".format(" ".join("{}-{}".format(one, two)
                                              for one, two in matchable)))
    print("total_time: {}".format(time_taken))

if __name__ == "__main__":
    start()
