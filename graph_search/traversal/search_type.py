from enum import Enum
from typing import List, Sequence

from graph_search.graph import Graph
from graph_search.traversal.bfs import bfs_shortest_path
from graph_search.traversal.dfs import dfs_shortest_path


class SearchType(Enum):
    BFS = 1
    DFS = 2


def find_path(graph: Graph, source: int, target: int, search_type: SearchType) -> List[int]:
    if search_type == SearchType.BFS:
        return bfs_shortest_path(graph, source, target)
    elif search_type == SearchType.DFS:
        return dfs_shortest_path(graph, source, target)
    raise ValueError(f"Invalid search_type. It must be one of {list(SearchType.__members__.keys())}")


def is_valid_path(graph: Graph, path: Sequence[int], source: int, target: int) -> bool:
    if not path or path[0] != source or path[-1] != target:
        return False
    return all(graph.adj_matrix[u, v] != 0 for u, v in zip(path[:-1], path[1:]))
