"""
Sparse Graph — positional directed graph container and DOT rendering.
"""
from .config import RenderConfig
from .exceptions import (
    InvalidArgumentError,
    InvalidPositionError,
    SelfLoopError,
    DuplicateEdgeError,
    IncidentEdgesError,
    NullLabelError,
)
from .models.position import Position
from .models.vertex import Vertex
from .models.edge import Edge
from .graph import Graph
from .sparse_graph import SparseGraph
from .rendering import GraphRenderer, DotRenderer

__all__ = [
    'RenderConfig',
    'InvalidArgumentError',
    'InvalidPositionError',
    'SelfLoopError',
    'DuplicateEdgeError',
    'IncidentEdgesError',
    'NullLabelError',
    'Position',
    'Vertex',
    'Edge',
    'Graph',
    'SparseGraph',
    'GraphRenderer',
    'DotRenderer',
]
