import argparse
import logging
import sys

from graph_search.config import DEMO_PARAMS, LOG_LEVEL, PLOTS_DIR
from graph_search.exceptions import GraphError
from graph_search.interaction import run_demo

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate random graphs and compare BFS and DFS paths between two random vertices."
    )
    parser.add_argument("--graphs", type=int, default=DEMO_PARAMS['n_graphs'], help="number of graphs to generate")
    parser.add_argument("--vertices", type=int, nargs=2, metavar=("MIN", "MAX"),
                        default=(DEMO_PARAMS['min_vertices'], DEMO_PARAMS['max_vertices']))
    parser.add_argument("--edges", type=int, nargs=2, metavar=("MIN", "MAX"),
                        default=(DEMO_PARAMS['min_edges'], DEMO_PARAMS['max_edges']))
    parser.add_argument("--max-edges-per-vertex", type=int, default=DEMO_PARAMS['max_edges_per_vertex'])
    parser.add_argument("--directed", action="store_true", default=DEMO_PARAMS['directed'])
    parser.add_argument("--max-incoming", type=int, default=DEMO_PARAMS['max_incoming_edges'],
                        help="incoming edges per vertex, directed graphs only")
    parser.add_argument("--max-outgoing", type=int, default=DEMO_PARAMS['max_outgoing_edges'],
                        help="outgoing edges per vertex, directed graphs only")
    parser.add_argument("--one-sided-lists", action="store_true",
                        help="list undirected edges only under their first endpoint")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--plot", action="store_true", help=f"save a plot per graph (default dir: {PLOTS_DIR})")
    parser.add_argument("--plot-dir", default=DEMO_PARAMS['plot_dir'])
    parser.add_argument("--log-level", type=str.upper, default=LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level)

    params = {
        **DEMO_PARAMS,
        'n_graphs': args.graphs,
        'min_vertices': args.vertices[0],
        'max_vertices': args.vertices[1],
        'min_edges': args.edges[0],
        'max_edges': args.edges[1],
        'max_edges_per_vertex': args.max_edges_per_vertex,
        'directed': args.directed,
        'max_incoming_edges': args.max_incoming,
        'max_outgoing_edges': args.max_outgoing,
        'mirror_undirected_edges': not args.one_sided_lists,
        'plot_dir': args.plot_dir or (PLOTS_DIR if args.plot else None),
    }
    logger.info("Running demo with params %s", params)

    try:
        run_demo(params, seed=args.seed)
    except GraphError as e:
        logger.error("Demo failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
