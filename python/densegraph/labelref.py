from typing import Generic, TypeVar, TYPE_CHECKING

from .graph import StaleLabelRefError

if TYPE_CHECKING:
    from .densegraph import DenseGraph

T = TypeVar("T")

class LabelRef(Generic[T]):
    """
    Writable view of the label of one vertex.

    The view is bound to the label storage that was current when it was
    created. Adding a vertex to a full graph reallocates that storage, and so
    does assigning another graph to it. After either, every existing view is
    stale and raises StaleLabelRefError on use.
    """

    def __init__(self, graph: 'DenseGraph[T]', vertex: int):
        self._graph = graph
        self._buffer = graph._labels
        self.vertex: int = vertex

    def __repr__(self) -> str:
        return f"LabelRef(vertex={self.vertex}, stale={self.is_stale()})"

    def is_stale(self) -> bool:
        return self._graph._labels is not self._buffer

    def _check(self):
        if self.is_stale():
            raise StaleLabelRefError(
                f"Label reference to vertex {self.vertex} was invalidated by graph growth")

    def get(self) -> T:
        self._check()
        return self._buffer[self.vertex]

    def set(self, label: T):
        self._check()
        self._buffer[self.vertex] = label
