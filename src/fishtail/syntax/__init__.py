"""Token-level types shared by the parser and the graph model."""

from fishtail.syntax.types import EdgeType, NodeShape

__all__ = ["EdgeType", "NodeShape"]
