"""
    Renderers that turn a graph into text.

    Design Pattern: Strategy
    ─────────────────────────
    ``GraphRenderer`` is the contract; ``DotRenderer`` writes the DOT-like
    form used by ``Graph.render()``. The ``RenderConfig`` it is built with
    decides header, indentation and edge attribute name.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, TYPE_CHECKING

from .config import RenderConfig

if TYPE_CHECKING:
    from .graph import Graph


class GraphRenderer(ABC):
    """
        Abstract base class for graph renderers.
    """

    @abstractmethod
    def render(self, graph: 'Graph') -> str:
        """
        Convert a graph into its textual representation.

        Args:
            graph: Graph to render. Only its public API is used.

        Returns:
            str: Rendered text.
        """
        pass


class DotRenderer(GraphRenderer):
    """
        Writes vertices, then edges, each in insertion order:

            digraph {
              "Peter";
              "Andy";
              "Peter" -> "Andy" [label="1"];
            }

        The bracket carries the edge *element*, not the edge label.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self._config = config or RenderConfig()

    @property
    def config(self) -> RenderConfig:
        return self._config

    def render(self, graph: 'Graph') -> str:
        indent = self._config.indent
        lines: List[str] = [self._config.header()]

        for vertex in graph.vertices():
            lines.append(f'{indent}"{vertex.get()}";')

        for edge in graph.edges():
            source = graph.from_vertex(edge).get()
            target = graph.to_vertex(edge).get()
            lines.append(
                f'{indent}"{source}" -> "{target}" '
                f'[{self._config.edge_attribute}="{edge.get()}"];'
            )

        lines.append("}")
        return "\n".join(lines)
