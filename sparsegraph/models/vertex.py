"""
    Vertex model - position of a vertex in a graph.
"""
from typing import List, TYPE_CHECKING, TypeVar

from .position import Position

if TYPE_CHECKING:
    from .edge import Edge

V = TypeVar('V')


class Vertex(Position[V]):
    """
        Vertex position.
        Keeps its incident edges in two insertion-ordered lists.
    """

    def __init__(self, value: V):
        super().__init__(value)
        self._outgoing: List['Edge'] = []  # edges where this is "from"
        self._incoming: List['Edge'] = []  # edges where this is "to"

    def has_incident_edges(self) -> bool:
        return bool(self._outgoing or self._incoming)
