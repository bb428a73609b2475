from typing import List, Tuple

import networkx as nx
import numpy as np
import pandas as pd

from graph_search.exceptions import ConstructionError, InvalidVertex, InvalidWeight


class Graph:
    """
    Graph over the vertices 0..n-1 kept in three views that are updated together:
        - adj_matrix: (n, n) array, adj_matrix[u, v] is the weight of u->v or 0
        - adj_list: per-vertex list of (neighbor, weight) in insertion order
        - edges: (u, v) pairs in insertion order, indexing the incidence matrix columns
    The incidence matrix is built on demand and cached until the next add_edge.
    """

    def __init__(self, n: int, directed: bool = False, mirror_undirected_edges: bool = True):
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n <= 0:
            raise ConstructionError(f"Number of vertices must be a positive integer, got {n!r}")
        self.n = int(n)
        self.directed = directed
        # undirected edges go to both adjacency lists unless the one-sided layout is requested
        self.mirror_undirected_edges = mirror_undirected_edges
        self.adj_matrix = np.zeros((self.n, self.n), dtype=int)
        self.adj_list: List[List[Tuple[int, int]]] = [[] for _ in range(self.n)]
        self.edges: List[Tuple[int, int]] = []
        self._inc_matrix = np.zeros((self.n, 0), dtype=int)
        self._inc_dirty = False

    @property
    def vertex_count(self) -> int:
        return self.n

    def __len__(self):
        return self.n

    def __repr__(self):
        kind = "directed" if self.directed else "undirected"
        return f"Graph(n={self.n}, {kind}, edges={len(self.edges)})"

    def check_vertex(self, u) -> int:
        if isinstance(u, bool) or not isinstance(u, (int, np.integer)) or not 0 <= u < self.n:
            raise InvalidVertex(u, self.n)
        return int(u)

    def add_edge(self, u: int, v: int, weight: int = 1):
        u = self.check_vertex(u)
        v = self.check_vertex(v)
        if isinstance(weight, bool) or not isinstance(weight, (int, np.integer)) or weight <= 0:
            raise InvalidWeight(weight)
        weight = int(weight)
        self.adj_matrix[u, v] = weight
        self.adj_list[u].append((v, weight))
        self.edges.append((u, v))
        if not self.directed:
            self.adj_matrix[v, u] = weight
            if self.mirror_undirected_edges and u != v:
                self.adj_list[v].append((u, weight))
        self._inc_dirty = True

    def has_edge(self, u: int, v: int) -> bool:
        return self.adj_matrix[self.check_vertex(u), self.check_vertex(v)] != 0

    def neighbors(self, u: int) -> List[int]:
        return np.flatnonzero(self.adj_matrix[self.check_vertex(u)]).tolist()

    def number_of_edges(self) -> int:
        return len(self.edges)

    def get_adj_matrix(self) -> np.ndarray:
        return self.adj_matrix.copy()

    def get_adj_list(self) -> List[List[Tuple[int, int]]]:
        return [list(neighbors) for neighbors in self.adj_list]

    def get_edges(self) -> List[Tuple[int, int]]:
        return list(self.edges)

    def get_inc_matrix(self) -> np.ndarray:
        """
        Vertex-by-edge matrix where column i describes edges[i] = (u, v):
        row u holds +w and row v holds +w (undirected) or -w (directed)
        :return: (n, len(edges)) array, a copy of the cached matrix
        """
        if self._inc_dirty:
            inc_matrix = np.zeros((self.n, len(self.edges)), dtype=int)
            for i, (u, v) in enumerate(self.edges):
                weight = abs(self.adj_matrix[u, v])
                inc_matrix[u, i] = weight
                inc_matrix[v, i] = -weight if self.directed else weight
            self._inc_matrix = inc_matrix
            self._inc_dirty = False
        return self._inc_matrix.copy()

    def _vertex_labels(self) -> List[str]:
        return [f"V{i}" for i in range(self.n)]

    def format_adj_matrix(self) -> str:
        presence = pd.DataFrame(
            (self.adj_matrix != 0).astype(int),
            index=self._vertex_labels(),
            columns=self._vertex_labels(),
        )
        return presence.to_string()

    def format_inc_matrix(self) -> str:
        # one row per edge, in the order the edges were added
        if not self.edges:
            return "   " + " ".join(self._vertex_labels())
        presence = pd.DataFrame(
            (self.get_inc_matrix().T != 0).astype(int),
            index=[f"E{i}" for i in range(len(self.edges))],
            columns=self._vertex_labels(),
        )
        return presence.to_string()

    def format_adj_list(self) -> str:
        lines = []
        for u, neighbors in enumerate(self.adj_list):
            entries = " ".join(f"{v}({weight})" for v, weight in neighbors)
            lines.append(f"{u}: {entries}".rstrip())
        return "\n".join(lines)

    def print_adj_matrix(self, file=None):
        print(self.format_adj_matrix(), end="\n\n", file=file)

    def print_inc_matrix(self, file=None):
        print(self.format_inc_matrix(), end="\n\n", file=file)

    def print_adj_list(self, file=None):
        print(self.format_adj_list(), end="\n\n", file=file)

    def to_networkx(self) -> nx.Graph:
        graph = nx.DiGraph() if self.directed else nx.Graph()
        graph.add_nodes_from(range(self.n))
        for u, v in self.edges:
            graph.add_edge(u, v, weight=int(self.adj_matrix[u, v]))
        return graph
