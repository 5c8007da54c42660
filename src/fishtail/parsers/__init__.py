"""Parser registry: classify the diagram header and dispatch to its parser."""

from __future__ import annotations

from fishtail.ir.model import Graph
from fishtail.parsers.base import Parser, UnsupportedDiagramError
from fishtail.parsers.flowchart import FlowchartParser, split_lines
from fishtail.parsers.header import classify

__all__ = ["FlowchartParser", "Parser", "UnsupportedDiagramError", "detect_type", "parse"]

_PARSERS: dict[str, type[Parser]] = {
    "flowchart": FlowchartParser,
}


def detect_type(src: str) -> str:
    """Detect the diagram type from source text.

    Raises:
        UnsupportedDiagramError: If the header is not graph/flowchart.
    """
    classify(split_lines(src))
    return "flowchart"


def parse(src: str) -> Graph:
    """Parse Mermaid flowchart text into a Graph.

    Raises:
        UnsupportedDiagramError: If the diagram is not a graph/flowchart.
    """
    parser_cls = _PARSERS[detect_type(src)]
    return parser_cls().parse(src)
