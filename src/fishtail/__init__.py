"""fishtail: interactive viewer core for Mermaid flowchart diagrams."""

from fishtail.analysis import cyclic_edges, find_simple_cycles, strongly_connected_components
from fishtail.config import ViewerConfig
from fishtail.ir import (
    Edge,
    Graph,
    GraphIR,
    Highlight,
    Reachability,
    SubGraph,
    all_node_names,
    cycle_edges,
    highlight,
    node_subgraph,
    reachable,
)
from fishtail.parsers import UnsupportedDiagramError, parse
from fishtail.syntax.types import EdgeType, NodeShape
from fishtail.viewer import build_viewer_data

__all__ = [
    "Edge",
    "EdgeType",
    "Graph",
    "GraphIR",
    "Highlight",
    "NodeShape",
    "Reachability",
    "SubGraph",
    "UnsupportedDiagramError",
    "ViewerConfig",
    "all_node_names",
    "build_viewer_data",
    "cycle_edges",
    "cyclic_edges",
    "find_simple_cycles",
    "highlight",
    "node_subgraph",
    "parse",
    "reachable",
    "strongly_connected_components",
]
