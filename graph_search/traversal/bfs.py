from collections import deque
from typing import List

from graph_search.graph import Graph


def reconstruct_path(parent: dict, source: int, target: int) -> List[int]:
    """Walk the parent pointers back from target; empty if target was never reached"""
    if target != source and target not in parent:
        return []
    path = [target]
    while path[-1] != source:
        path.append(parent[path[-1]])
    return path[::-1]


def bfs_shortest_path(graph: Graph, source: int, target: int) -> List[int]:
    """
    Unweighted shortest path from source to target over the adjacency matrix.
    Any nonzero entry counts as an edge; neighbors are explored in increasing index order.
    :return: vertices from source to target, [source] if they coincide, [] if target is unreachable
    """
    source = graph.check_vertex(source)
    target = graph.check_vertex(target)
    adj_matrix = graph.adj_matrix

    visited = {source}
    parent = {}
    queue = deque([source])
    while queue and target not in visited:
        u = queue.popleft()
        for v in range(graph.n):
            if adj_matrix[u, v] != 0 and v not in visited:
                visited.add(v)
                parent[v] = u
                queue.append(v)

    return reconstruct_path(parent, source, target)
