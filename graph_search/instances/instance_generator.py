import dataclasses
import logging
from typing import Optional

import numpy as np

from graph_search.exceptions import InfeasibleGeneration, InvalidGeneratorConfig
from graph_search.graph import Graph

logger = logging.getLogger(__name__)


def max_simple_edges(n: int, directed: bool = False) -> int:
    """Number of edges of the complete simple graph on n vertices"""
    return n * (n - 1) if directed else n * (n - 1) // 2


@dataclasses.dataclass
class GeneratorConfig:
    min_vertices: int
    max_vertices: int
    min_edges: int
    max_edges: int
    # None means the cap is n - 1, i.e. only the simple-graph limit applies
    max_edges_per_vertex: Optional[int] = None
    directed: bool = False
    # in/out caps are only checked for directed graphs, None means unbounded
    max_incoming_edges: Optional[int] = None
    max_outgoing_edges: Optional[int] = None
    min_weight: int = 1
    max_weight: int = 100
    mirror_undirected_edges: bool = True

    def validate(self):
        if self.min_vertices <= 0:
            raise InvalidGeneratorConfig(f"min_vertices must be positive, got {self.min_vertices}")
        if self.min_vertices > self.max_vertices:
            raise InvalidGeneratorConfig(f"min_vertices ({self.min_vertices}) > max_vertices ({self.max_vertices})")
        if self.min_edges < 0:
            raise InvalidGeneratorConfig(f"min_edges must be non-negative, got {self.min_edges}")
        if self.min_edges > self.max_edges:
            raise InvalidGeneratorConfig(f"min_edges ({self.min_edges}) > max_edges ({self.max_edges})")
        if not 0 < self.min_weight <= self.max_weight:
            raise InvalidGeneratorConfig(f"Invalid weight range [{self.min_weight}, {self.max_weight}]")
        for name in ("max_edges_per_vertex", "max_incoming_edges", "max_outgoing_edges"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise InvalidGeneratorConfig(f"{name} must be non-negative, got {value}")

    @classmethod
    def from_params(cls, params: dict) -> "GeneratorConfig":
        field_names = {field.name for field in dataclasses.fields(cls)}
        return cls(**{k: v for k, v in params.items() if k in field_names})


class InstanceGenerator:
    def __init__(self, config: GeneratorConfig):
        config.validate()
        self.config = config

    def degree_cap(self, n: int) -> int:
        cap = n - 1
        if self.config.max_edges_per_vertex is not None:
            cap = min(cap, self.config.max_edges_per_vertex)
        return cap

    def check_feasibility(self, n: int, n_edges: int):
        """
        Fail fast when n_edges cannot fit in a graph with n vertices under the configured caps
        :raises InfeasibleGeneration: if the target edge count is out of reach
        """
        config = self.config
        limit = max_simple_edges(n, config.directed)
        if n_edges > limit:
            raise InfeasibleGeneration(
                f"Cannot place {n_edges} edges in a simple {'directed' if config.directed else 'undirected'} "
                f"graph with {n} vertices (at most {limit})"
            )
        cap = self.degree_cap(n)
        # every edge uses up one unit of degree on each endpoint
        if 2 * n_edges > n * cap:
            raise InfeasibleGeneration(
                f"Cannot place {n_edges} edges on {n} vertices with at most {cap} edges per vertex"
            )
        if config.directed:
            if config.max_incoming_edges is not None and n_edges > n * config.max_incoming_edges:
                raise InfeasibleGeneration(
                    f"Cannot place {n_edges} edges on {n} vertices with at most "
                    f"{config.max_incoming_edges} incoming edges per vertex"
                )
            if config.max_outgoing_edges is not None and n_edges > n * config.max_outgoing_edges:
                raise InfeasibleGeneration(
                    f"Cannot place {n_edges} edges on {n} vertices with at most "
                    f"{config.max_outgoing_edges} outgoing edges per vertex"
                )

    def _can_add(self, graph: Graph, u: int, v: int, degree, incoming, outgoing, cap: int) -> bool:
        if u == v:
            return False
        if degree[u] >= cap or degree[v] >= cap:
            return False
        if self.config.directed:
            max_in = self.config.max_incoming_edges
            max_out = self.config.max_outgoing_edges
            if (max_in is not None and incoming[v] >= max_in) or (max_out is not None and outgoing[u] >= max_out):
                return False
        return graph.adj_matrix[u, v] == 0

    def _has_candidate(self, graph: Graph, degree, incoming, outgoing, cap: int) -> bool:
        return any(
            self._can_add(graph, u, v, degree, incoming, outgoing, cap)
            for u in range(graph.n)
            for v in range(graph.n)
        )

    def generate_graph(self, seed: int = None) -> Graph:
        rng = np.random.RandomState(abs(seed % (2**32))) if seed is not None else np.random
        config = self.config
        n = rng.randint(config.min_vertices, config.max_vertices + 1)
        n_edges = rng.randint(config.min_edges, config.max_edges + 1)
        self.check_feasibility(n, n_edges)

        graph = Graph(n, directed=config.directed, mirror_undirected_edges=config.mirror_undirected_edges)
        cap = self.degree_cap(n)
        degree = np.zeros(n, dtype=int)
        incoming = np.zeros(n, dtype=int)
        outgoing = np.zeros(n, dtype=int)

        remaining = n_edges
        rejections = 0
        while remaining > 0:
            u = rng.randint(n)
            v = rng.randint(n)
            if not self._can_add(graph, u, v, degree, incoming, outgoing, cap):
                rejections += 1
                # the random picks can paint themselves into a corner, so check every n^2 misses
                if rejections >= n * n:
                    if not self._has_candidate(graph, degree, incoming, outgoing, cap):
                        raise InfeasibleGeneration(
                            f"No valid edge left after placing {n_edges - remaining} of {n_edges} edges "
                            f"on {n} vertices"
                        )
                    logger.debug("Still %d edges to place after %d rejected picks", remaining, rejections)
                    rejections = 0
                continue

            weight = rng.randint(config.min_weight, config.max_weight + 1)
            graph.add_edge(u, v, int(weight))
            remaining -= 1
            rejections = 0
            degree[u] += 1
            degree[v] += 1
            if config.directed:
                incoming[v] += 1
                outgoing[u] += 1

        logger.debug("Generated %r", graph)
        return graph


def generate_graph(min_vertices: int,
                   max_vertices: int,
                   min_edges: int,
                   max_edges: int,
                   max_edges_per_vertex: Optional[int] = None,
                   directed: bool = False,
                   max_incoming_edges: Optional[int] = None,
                   max_outgoing_edges: Optional[int] = None,
                   seed: int = None) -> Graph:
    config = GeneratorConfig(
        min_vertices=min_vertices,
        max_vertices=max_vertices,
        min_edges=min_edges,
        max_edges=max_edges,
        max_edges_per_vertex=max_edges_per_vertex,
        directed=directed,
        max_incoming_edges=max_incoming_edges,
        max_outgoing_edges=max_outgoing_edges,
    )
    return InstanceGenerator(config).generate_graph(seed)
