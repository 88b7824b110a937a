"""
    Edge model - position of a directed edge between two vertices.
"""
from typing import Optional, TypeVar

from .position import Position
from .vertex import Vertex

E = TypeVar('E')


class Edge(Position[E]):
    """
        Directed edge position.
        Always leads from one vertex to a different one.
    """

    def __init__(self, value: E, from_vertex: Vertex, to_vertex: Vertex):
        super().__init__(value)
        self._from: Optional[Vertex] = from_vertex
        self._to: Optional[Vertex] = to_vertex

    def _release(self) -> None:
        super()._release()
        self._from = None
        self._to = None

    def __repr__(self) -> str:
        if not self.is_live():
            return f"Edge({self._value!r}, removed)"
        return f"Edge({self._from.get()!r} -> {self._to.get()!r}, {self._value!r})"
