from pathlib import Path
from typing import Sequence, Tuple

import networkx as nx
from matplotlib import pyplot as plt

from graph_search.graph import Graph

NO_PATH = "Path does not exist"


def from_project_root(path) -> str:
    root_path = Path(__file__).absolute().parent.parent
    return str(root_path.joinpath(path))


def format_path(path: Sequence[int]) -> str:
    if not path:
        return NO_PATH
    return " ".join(map(str, path))


def plot_network(graph: Graph, *paths, save_to_path=None) -> Tuple[any, any]:
    """Plots the graph and highlights the given paths.

    Args:
        graph: Graph to draw, vertices placed on a circle.
        paths: Lists of vertex indexes; empty paths are skipped.
        save_to_path: If given, the figure is written there and closed.

    Returns:
        (fig, ax) from plt.subplots
    """
    nx_graph = graph.to_networkx()
    pos = nx.circular_layout(nx_graph)

    fig, ax = plt.subplots()

    path_nodes = {u for path in paths for u in path}
    node_colors = ["#d62728" if u in path_nodes else "#1f77b4" for u in nx_graph.nodes]
    _ = nx.draw_networkx_nodes(nx_graph, pos, node_size=300, node_color=node_colors, ax=ax)
    _ = nx.draw_networkx_labels(nx_graph, pos, font_size=10, font_color="white", ax=ax)
    _ = nx.draw_networkx_edges(nx_graph, pos, edgelist=list(nx_graph.edges), width=0.5, ax=ax)

    color_list = ['black', 'red']
    for path_idx, path in enumerate(p for p in paths if p):
        edgelist = [(path[i], path[i + 1]) for i in range(len(path) - 1)]
        _ = nx.draw_networkx_edges(
            nx_graph, pos, edgelist=edgelist, width=2, edge_color=color_list[path_idx % len(color_list)], ax=ax
        )

    if save_to_path is not None:
        fig.savefig(save_to_path, facecolor='white', transparent=False)
        plt.close(fig)

    return fig, ax
