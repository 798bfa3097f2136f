import operator
from dataclasses import dataclass


class DenseGraphError(Exception):
    """Base class for errors raised by densegraph."""
    pass

class OutOfRangeError(DenseGraphError, IndexError):
    """Exception raised when a vertex index is not a vertex of the graph."""

    def __init__(self, index: int, size: int):
        super().__init__(f"Vertex {index} out of range for graph with {size} vertices")
        self.index = index
        self.size = size

class StaleLabelRefError(DenseGraphError, RuntimeError):
    """Exception raised when a label reference outlived the storage it points into."""
    pass

@dataclass(frozen=True)
class Edge:
    source: int
    target: int

    def __str__(self) -> str:
        return f"{self.source} -> {self.target}"

class Graph():
    """
    Common base of the graph containers.

    Vertices are the integers 0 .. vertex_count() - 1.
    """

    def vertex_count(self) -> int:
        raise NotImplementedError()

    def __len__(self) -> int:
        return self.vertex_count()

    def __contains__(self, vertex: object) -> bool:
        try:
            vertex = operator.index(vertex)
        except TypeError:
            return False
        return 0 <= vertex < self.vertex_count()

    def __iter__(self):
        return self.vertices()

    def vertices(self):
        """Iterate over the vertex indices in ascending order."""
        return iter(range(self.vertex_count()))
