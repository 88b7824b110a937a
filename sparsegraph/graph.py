"""
    Abstract directed graph contract.
    Defines the operations every graph container must provide.
"""
from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, Tuple, TypeVar, Union

from .models.vertex import Vertex
from .models.edge import Edge

V = TypeVar('V')
E = TypeVar('E')


class Graph(ABC, Generic[V, E]):
    """
        Abstract base class for directed graphs of vertex elements V and
        edge elements E.

        Vertices and edges are handed out as positions. A position is only
        accepted by the graph that created it; every method raises
        ``InvalidPositionError`` for a position that is None, of the wrong
        kind, created by another graph or already removed.
    """

    @abstractmethod
    def insert_vertex(self, value: V) -> Vertex[V]:
        """
        Insert a new vertex.

        Args:
            value: Element to store.

        Returns:
            Vertex: Position created to hold the element.
        """
        pass

    @abstractmethod
    def insert_edge(self, from_: Vertex[V], to: Vertex[V], value: E) -> Edge[E]:
        """
        Insert a new edge.

        Args:
            from_: Vertex position where the edge starts.
            to:    Vertex position where the edge ends.
            value: Element to store.

        Returns:
            Edge: Position created to hold the element.

        Raises:
            SelfLoopError: If ``from_`` and ``to`` are the same vertex.
            DuplicateEdgeError: If an edge ``from_ -> to`` already exists.
        """
        pass

    @abstractmethod
    def remove_vertex(self, vertex: Vertex[V]) -> V:
        """
        Remove a vertex and return its element.

        Raises:
            IncidentEdgesError: If the vertex still has incident edges.
        """
        pass

    @abstractmethod
    def remove_edge(self, edge: Edge[E]) -> E:
        """Remove an edge and return its element."""
        pass

    @abstractmethod
    def vertices(self) -> Tuple[Vertex[V], ...]:
        """All vertices in insertion order."""
        pass

    @abstractmethod
    def edges(self) -> Tuple[Edge[E], ...]:
        """All edges in insertion order."""
        pass

    @abstractmethod
    def outgoing(self, vertex: Vertex[V]) -> Tuple[Edge[E], ...]:
        """Edges starting at ``vertex``, in insertion order."""
        pass

    @abstractmethod
    def incoming(self, vertex: Vertex[V]) -> Tuple[Edge[E], ...]:
        """Edges ending at ``vertex``, in insertion order."""
        pass

    @abstractmethod
    def from_vertex(self, edge: Edge[E]) -> Vertex[V]:
        """Vertex position the edge starts from."""
        pass

    @abstractmethod
    def to_vertex(self, edge: Edge[E]) -> Vertex[V]:
        """Vertex position the edge leads to."""
        pass

    @abstractmethod
    def set_label(self, position: Union[Vertex[V], Edge[E]], label: Any) -> None:
        """
        Attach a label to a vertex or edge, replacing any previous one.

        Raises:
            NullLabelError: If ``label`` is None.
        """
        pass

    @abstractmethod
    def get_label(self, position: Union[Vertex[V], Edge[E]]) -> Optional[Any]:
        """Label of a vertex or edge, or None if it has none."""
        pass

    @abstractmethod
    def clear_labels(self) -> None:
        """Remove the labels of all vertices and edges."""
        pass

    @abstractmethod
    def render(self) -> str:
        """DOT-like textual description of the graph."""
        pass

    def __str__(self) -> str:
        return self.render()
