import copy
import logging
import operator
from typing import Any, Dict, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

import numpy as np

from .constants import Constants
from .graph import Graph, Edge, OutOfRangeError
from .labelref import LabelRef

logger = logging.getLogger(__name__)

T = TypeVar("T")

def _same_label(a: Any, b: Any) -> bool:
    # Array labels compare elementwise, reduce them to a single answer
    if a is b:
        return True
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    return bool(a == b)

class DenseGraph(Graph, Generic[T]):
    """
    Directed graph with adjacency stored as a dense boolean matrix.

    Vertices are the indices 0 .. vertex_count() - 1, each carrying a label of
    type T. The matrix has side `capacity` and is kept flattened in a single
    numpy buffer, cell `i * capacity + j` holding the edge i -> j. When a
    vertex is added to a full graph the capacity is multiplied by
    Constants.GROWTH_FACTOR.
    """

    def __init__(
        self,
        initial_capacity: Optional[int] = None,
        labels: Optional[Iterable[T]] = None,
        edges: Optional[Iterable[Tuple[int, int]]] = None
    ):

        super().__init__()

        if initial_capacity is None:
            initial_capacity = Constants.DEFAULT_CAPACITY
        initial_capacity = operator.index(initial_capacity)
        if initial_capacity < 1:
            raise ValueError(f"Initial capacity must be at least 1, got {initial_capacity}")

        self._capacity: int = initial_capacity
        self._count: int = 0
        self._labels: List[Optional[T]] = [None] * initial_capacity
        self._edges: np.ndarray = np.zeros(initial_capacity * initial_capacity, dtype=bool)

        if labels is not None:
            for label in labels:
                self.add_vertex(label)

        if edges is not None:
            for source, target in edges:
                self.add_edge(source, target)

    def __repr__(self) -> str:
        return f"DenseGraph(n={self._count}, capacity={self._capacity})"

    def __str__(self) -> str:
        # Generate a list of the edges in string format
        edges = ""
        for e in self.edges():
            edges += f"{self._labels[e.source]} -> {self._labels[e.target]}\n"
        return edges

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseGraph):
            return NotImplemented
        if self._count != other._count:
            return False
        if not all(_same_label(a, b) for a, b in zip(self.labels(), other.labels())):
            return False
        return np.array_equal(self._live(), other._live())

    __hash__ = None

    def __copy__(self) -> 'DenseGraph[T]':
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> 'DenseGraph[T]':
        other = self.__class__.__new__(self.__class__)
        memo[id(self)] = other
        other._capacity = self._capacity
        other._count = self._count
        other._labels = copy.deepcopy(self._labels, memo)
        other._edges = self._edges.copy()
        return other

    @property
    def capacity(self) -> int:
        """Side length of the allocated adjacency matrix."""
        return self._capacity

    def vertex_count(self) -> int:
        """Return number of vertices."""
        return self._count

    def _matrix(self) -> np.ndarray:
        # 2-D view over the flat buffer, writes go through
        return self._edges.reshape(self._capacity, self._capacity)

    def _live(self) -> np.ndarray:
        return self._matrix()[:self._count, :self._count]

    def _check_vertex(self, vertex: int) -> int:
        vertex = operator.index(vertex)
        if not 0 <= vertex < self._count:
            raise OutOfRangeError(vertex, self._count)
        return vertex

    def _offset(self, source: int, target: int) -> int:
        source = self._check_vertex(source)
        target = self._check_vertex(target)
        return source * self._capacity + target

    def _grow(self, new_capacity: int):
        """Reallocate storage with side new_capacity. Never shrinks."""
        if new_capacity <= self._capacity:
            return

        old_capacity = self._capacity
        logger.debug("Growing graph capacity from %d to %d", old_capacity, new_capacity)

        # Build the new buffers completely before replacing the old ones
        labels = self._labels + [None] * (new_capacity - old_capacity)
        edges = np.zeros(new_capacity * new_capacity, dtype=bool)
        edges.reshape(new_capacity, new_capacity)[:old_capacity, :old_capacity] = self._matrix()

        self._labels = labels
        self._edges = edges
        self._capacity = new_capacity

    def copy(self) -> 'DenseGraph[T]':
        """Return an independent deep copy of the graph, labels included.

        Labels go through copy.deepcopy, so labels that cannot be deep-copied
        make this raise TypeError.
        """
        logger.debug("Copying %r", self)
        return copy.deepcopy(self)

    def assign(self, other: 'DenseGraph[T]') -> 'DenseGraph[T]':
        """Replace the contents of this graph with a deep copy of other."""
        if not isinstance(other, DenseGraph):
            raise TypeError(f"Cannot assign {type(other).__name__} to DenseGraph")
        if other is self:
            return self

        logger.debug("Assigning %r to %r", other, self)
        clone = copy.deepcopy(other)
        self._capacity = clone._capacity
        self._count = clone._count
        self._labels = clone._labels
        self._edges = clone._edges
        return self

    def add_vertex(self, label: T) -> int:
        """Append a vertex without any edges and return its index.

        Growing a full graph invalidates every LabelRef taken before the call.
        """
        if self._count >= self._capacity:
            self._grow(self._capacity * Constants.GROWTH_FACTOR)

        vertex = self._count
        self._count += 1

        matrix = self._matrix()
        matrix[vertex, :self._count] = False
        matrix[:self._count, vertex] = False
        self._labels[vertex] = label
        return vertex

    def add_edge(self, source: int, target: int):
        self._edges[self._offset(source, target)] = True

    def remove_edge(self, source: int, target: int):
        """Remove the edge source -> target if present."""
        self._edges[self._offset(source, target)] = False

    def is_edge(self, source: int, target: int) -> bool:
        """Check if an edge exists from source to target."""
        return bool(self._edges[self._offset(source, target)])

    def label_at(self, vertex: int) -> T:
        return self._labels[self._check_vertex(vertex)]

    def set_label(self, vertex: int, label: T):
        self._labels[self._check_vertex(vertex)] = label

    def label_ref(self, vertex: int) -> LabelRef[T]:
        """Return a writable view of the label of vertex."""
        return LabelRef(self, self._check_vertex(vertex))

    def __getitem__(self, vertex: int) -> T:
        return self.label_at(vertex)

    def __setitem__(self, vertex: int, label: T):
        self.set_label(vertex, label)

    def labels(self) -> List[T]:
        """Labels of all vertices, in vertex order."""
        return self._labels[:self._count]

    def neighbors(self, vertex: int) -> List[int]:
        """Targets of the edges leaving vertex, ascending and without duplicates."""
        vertex = self._check_vertex(vertex)
        row = self._matrix()[vertex, :self._count]
        return np.flatnonzero(row).tolist()

    def edges(self) -> Iterator[Edge]:
        """Iterate over all edges in row-major order."""
        sources, targets = np.nonzero(self._live())
        for source, target in zip(sources.tolist(), targets.tolist()):
            yield Edge(source, target)

    def edge_count(self) -> int:
        """Return total number of directed edges."""
        return int(np.count_nonzero(self._live()))

    def out_degree(self, vertex: int) -> int:
        vertex = self._check_vertex(vertex)
        return int(np.count_nonzero(self._matrix()[vertex, :self._count]))

    def in_degree(self, vertex: int) -> int:
        vertex = self._check_vertex(vertex)
        return int(np.count_nonzero(self._matrix()[:self._count, vertex]))

    def get_out_degree(self) -> Dict[int, int]:
        """Compute out-degree for each vertex"""
        return {v: int(d) for v, d in enumerate(self._live().sum(axis=1))}

    def get_in_degree(self) -> Dict[int, int]:
        """Compute in-degree for each vertex"""
        return {v: int(d) for v, d in enumerate(self._live().sum(axis=0))}
