"""
    Rendering configuration.

    Provides a typed configuration object that controls how a graph is
    written out as DOT text. The defaults produce the plain form:

        digraph {
          "a";
          "a" -> "b" [label="x"];
        }
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class RenderConfig:
    """
    Controls the textual form produced by ``DotRenderer``.

    Attributes:
        graph_type:      Keyword opening the block (``digraph``).
        name:            Optional graph identifier placed after the keyword.
                         ``None`` means anonymous.
        indent:          Prefix of every vertex / edge statement.
        edge_attribute:  Attribute name carrying the edge element in the
                         bracket list.
    """
    graph_type: str = "digraph"
    name: Optional[str] = None
    indent: str = "  "
    edge_attribute: str = "label"

    def header(self) -> str:
        """Opening line of the rendered block."""
        if self.name is None:
            return f"{self.graph_type} {{"
        return f'{self.graph_type} "{self.name}" {{'
