"""Viewer data: the JSON payload the interactive page renders.

Nodes and edges are emitted as element lists ready for a graph drawing
library, together with a subgraph colour legend, the simple cycles and the
connected groups of the diagram.
"""

from __future__ import annotations

from typing import Any

from fishtail.analysis import component_ids, find_simple_cycles, is_cyclic, strongly_connected_components
from fishtail.config import ViewerConfig
from fishtail.ir.graph import GraphIR
from fishtail.ir.model import Graph, all_node_names, node_subgraph


def _node_elements(graph: Graph, config: ViewerConfig) -> list[dict[str, Any]]:
    colors_by_subgraph = {sg.name: config.subgraph_colors(i) for i, sg in enumerate(graph.subgraphs)}
    gir = GraphIR.from_graph(graph)
    elements: list[dict[str, Any]] = []
    for name in all_node_names(graph):
        sg = node_subgraph(graph, name)
        bg, border = colors_by_subgraph[sg.name] if sg is not None else config.unassigned
        elements.append(
            {
                "data": {
                    "id": name,
                    "label": graph.label_for(name),
                    "subgraph": sg.name if sg is not None else None,
                    "bgColor": bg,
                    "borderColor": border,
                    "dotColor": border,
                    "inDegree": gir.in_degree(name),
                    "outDegree": gir.out_degree(name),
                }
            }
        )
    return elements


def _edge_elements(graph: Graph) -> list[dict[str, Any]]:
    components = strongly_connected_components(graph.edges)
    ids = component_ids(components)
    sizes = [len(members) for members in components]
    repeats: dict[tuple[str, str], int] = {}
    elements: list[dict[str, Any]] = []
    for edge in graph.edges:
        pair = (edge.source, edge.target)
        n = repeats.get(pair, 0)
        repeats[pair] = n + 1
        edge_id = f"{edge.source}__{edge.target}" if n == 0 else f"{edge.source}__{edge.target}__{n}"
        data: dict[str, Any] = {"id": edge_id, "source": edge.source, "target": edge.target}
        if edge.label is not None:
            data["label"] = edge.label
        if edge.edge_type.dotted:
            data["dotted"] = True
        if is_cyclic(edge, ids, sizes):
            data["circular"] = True
        elements.append({"data": data})
    return elements


def build_viewer_data(graph: Graph, config: ViewerConfig | None = None) -> dict[str, Any]:
    """Build the JSON-serialisable payload for the interactive viewer."""
    if config is None:
        config = ViewerConfig()
    legend = [
        {"name": sg.name, "color": config.subgraph_colors(i)[1]} for i, sg in enumerate(graph.subgraphs)
    ]
    data: dict[str, Any] = {
        "direction": graph.direction,
        "nodes": _node_elements(graph, config),
        "edges": _edge_elements(graph),
        "legend": legend,
    }
    if config.include_cycles:
        data["cycles"] = find_simple_cycles(graph.edges)
    if config.include_groups:
        data["groups"] = GraphIR.from_graph(graph).groups()
    return data
