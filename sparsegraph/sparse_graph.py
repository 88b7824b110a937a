"""
    SparseGraph - list-backed directed graph for sparse graphs.

    Storage:
        • _vertices  – live vertex positions, insertion order
        • _edges     – live edge positions, insertion order
        • each vertex keeps its own outgoing / incoming edge lists

    Every public method validates the positions it receives before
    checking anything else, so a failed call never leaves a partial
    mutation behind.
"""
import logging
from typing import Any, List, Optional, Tuple, TypeVar, Union

from .config import RenderConfig
from .exceptions import (
    DuplicateEdgeError,
    IncidentEdgesError,
    InvalidPositionError,
    NullLabelError,
    SelfLoopError,
)
from .graph import Graph
from .models.edge import Edge
from .models.vertex import Vertex
from .rendering import DotRenderer

logger = logging.getLogger(__name__)

V = TypeVar('V')
E = TypeVar('E')


class SparseGraph(Graph[V, E]):
    """
        Directed graph without self-loops or parallel edges.

        Usage:
            g = SparseGraph()
            a = g.insert_vertex("a")
            b = g.insert_vertex("b")
            e = g.insert_edge(a, b, 1)
            g.set_label(a, "visited")
            print(g)
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self._vertices: List[Vertex[V]] = []
        self._edges: List[Edge[E]] = []
        self._renderer = DotRenderer(config)

    # ── Validation ───────────────────────────────────────────────

    def _validate_vertex(self, vertex: Any) -> Vertex[V]:
        if not isinstance(vertex, Vertex):
            raise InvalidPositionError("Invalid vertex position")
        if vertex._owner is not self:
            raise InvalidPositionError("Invalid vertex position")
        return vertex

    def _validate_edge(self, edge: Any) -> Edge[E]:
        if not isinstance(edge, Edge):
            raise InvalidPositionError("Invalid edge position")
        if edge._owner is not self:
            raise InvalidPositionError("Invalid edge position")
        return edge

    def _validate_position(self, position: Any) -> Union[Vertex[V], Edge[E]]:
        if isinstance(position, Edge):
            return self._validate_edge(position)
        return self._validate_vertex(position)

    # ── Mutation ─────────────────────────────────────────────────

    def insert_vertex(self, value: V) -> Vertex[V]:
        vertex = Vertex(value)
        vertex._owner = self
        self._vertices.append(vertex)
        logger.debug("Inserted vertex %r", value)
        return vertex

    def insert_edge(self, from_: Vertex[V], to: Vertex[V], value: E) -> Edge[E]:
        source = self._validate_vertex(from_)
        target = self._validate_vertex(to)

        if source is target:
            raise SelfLoopError(f"Self-loop on vertex {source.get()!r} not allowed")

        # At most one edge per ordered pair
        for existing in source._outgoing:
            if existing._to is target:
                raise DuplicateEdgeError(
                    f"Edge {source.get()!r} -> {target.get()!r} already exists"
                )

        edge = Edge(value, source, target)
        edge._owner = self
        self._edges.append(edge)
        source._outgoing.append(edge)
        target._incoming.append(edge)
        logger.debug("Inserted edge %r -> %r (%r)", source.get(), target.get(), value)
        return edge

    def remove_vertex(self, vertex: Vertex[V]) -> V:
        node = self._validate_vertex(vertex)
        if node.has_incident_edges():
            raise IncidentEdgesError(
                f"Vertex {node.get()!r} still has incident edges"
            )

        value = node.get()
        self._vertices.remove(node)
        node._release()
        logger.debug("Removed vertex %r", value)
        return value

    def remove_edge(self, edge: Edge[E]) -> E:
        link = self._validate_edge(edge)

        value = link.get()
        self._edges.remove(link)
        link._from._outgoing.remove(link)
        link._to._incoming.remove(link)
        link._release()
        logger.debug("Removed edge %r", value)
        return value

    # ── Queries ──────────────────────────────────────────────────

    def vertices(self) -> Tuple[Vertex[V], ...]:
        return tuple(self._vertices)

    def edges(self) -> Tuple[Edge[E], ...]:
        return tuple(self._edges)

    def outgoing(self, vertex: Vertex[V]) -> Tuple[Edge[E], ...]:
        return tuple(self._validate_vertex(vertex)._outgoing)

    def incoming(self, vertex: Vertex[V]) -> Tuple[Edge[E], ...]:
        return tuple(self._validate_vertex(vertex)._incoming)

    def from_vertex(self, edge: Edge[E]) -> Vertex[V]:
        return self._validate_edge(edge)._from

    def to_vertex(self, edge: Edge[E]) -> Vertex[V]:
        return self._validate_edge(edge)._to

    def number_of_vertices(self) -> int:
        return len(self._vertices)

    def number_of_edges(self) -> int:
        return len(self._edges)

    # ── Labels ───────────────────────────────────────────────────

    def set_label(self, position: Union[Vertex[V], Edge[E]], label: Any) -> None:
        target = self._validate_position(position)
        if label is None:
            raise NullLabelError("Null label not allowed")
        target._label = label

    def get_label(self, position: Union[Vertex[V], Edge[E]]) -> Optional[Any]:
        return self._validate_position(position)._label

    def clear_labels(self) -> None:
        for vertex in self._vertices:
            vertex._label = None
        for edge in self._edges:
            edge._label = None

    # ── Rendering ────────────────────────────────────────────────

    def render(self) -> str:
        return self._renderer.render(self)

    def __repr__(self) -> str:
        return f"SparseGraph(vertices={len(self._vertices)}, edges={len(self._edges)})"
