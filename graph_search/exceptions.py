class GraphError(ValueError):
    """Base class for the errors raised while building or searching a graph"""


class ConstructionError(GraphError):
    pass


class InvalidVertex(GraphError):
    def __init__(self, vertex, vertex_count: int):
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(f"Vertex {vertex} should be in the range [0, {vertex_count - 1}]")


class InfeasibleGeneration(GraphError):
    pass


class InvalidGeneratorConfig(GraphError):
    pass


class InvalidWeight(GraphError):
    def __init__(self, weight):
        self.weight = weight
        super().__init__(f"Edge weight must be a positive integer, got {weight!r}")
