from typing import List

from graph_search.graph import Graph
from graph_search.traversal.bfs import reconstruct_path


def dfs_shortest_path(graph: Graph, source: int, target: int) -> List[int]:
    """
    Path from source to target found with a LIFO frontier over the adjacency matrix.
    The path is valid but, unlike BFS, not guaranteed to be the shortest one.

    The target gets its parent as soon as it is discovered. Discovering it only ends the
    scan of the current vertex's neighbors; the stack is still drained afterwards.
    """
    source = graph.check_vertex(source)
    target = graph.check_vertex(target)
    adj_matrix = graph.adj_matrix

    visited = {source}
    parent = {}
    stack = [source]
    while stack:
        u = stack.pop()
        for v in range(graph.n):
            if adj_matrix[u, v] != 0 and v not in visited:
                visited.add(v)
                parent[v] = u
                stack.append(v)
                if v == target:
                    break

    return reconstruct_path(parent, source, target)
