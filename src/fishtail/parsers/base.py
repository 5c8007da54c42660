"""Base parser protocol and the error raised for unsupported diagrams."""

from __future__ import annotations

from typing import Protocol

from fishtail.ir.model import Graph

# Mermaid dialects that are recognised but not handled.
UNSUPPORTED_DIAGRAMS: tuple[str, ...] = (
    "sequenceDiagram",
    "gantt",
    "classDiagram",
    "stateDiagram",
    "stateDiagram-v2",
    "pie",
    "erDiagram",
    "journey",
    "gitGraph",
    "mindmap",
    "timeline",
    "quadrantChart",
)

# Words that can never name a node in a standalone declaration.
RESERVED_KEYWORDS: frozenset[str] = frozenset(
    {
        "end",
        "subgraph",
        "graph",
        "flowchart",
        "style",
        "classDef",
        "class",
        "direction",
        "click",
        "linkStyle",
    }
)


class UnsupportedDiagramError(ValueError):
    """The input is not a graph/flowchart diagram.

    The message names the unsupported dialect keyword or quotes the header
    line verbatim, so it can be shown to the user as is.
    """


class Parser(Protocol):
    """Protocol that all diagram parsers must implement."""

    def parse(self, src: str) -> Graph:
        """Parse source text into a Graph."""
        ...
