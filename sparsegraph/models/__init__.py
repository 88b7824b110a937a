from .position import Position
from .vertex import Vertex
from .edge import Edge

__all__ = ['Position', 'Vertex', 'Edge']
