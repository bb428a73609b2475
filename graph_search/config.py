"""
Default parameters for the random-graph traversal demo.

Any key of DEMO_PARAMS can be overridden from the command line (see run_demo.py).
"""

import os

from graph_search.utils import from_project_root

# Ten undirected graphs with 10 vertices and 10 edges each.
# The in/out caps only apply to directed graphs, so they have no effect here.
DEMO_PARAMS = {
    'n_graphs': 10,
    'min_vertices': 10,
    'max_vertices': 10,
    'min_edges': 10,
    'max_edges': 10,
    'max_edges_per_vertex': 10,
    'directed': False,
    'max_incoming_edges': 1,
    'max_outgoing_edges': 1,
    'min_weight': 1,
    'max_weight': 100,
    'mirror_undirected_edges': True,
    'plot_dir': None,
}

# Where run_demo --plot writes its figures unless --plot-dir is given
PLOTS_DIR = from_project_root("plots")

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")
