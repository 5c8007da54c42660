"""Graph model produced by the flowchart parser.

These types are the parsed form of a diagram: a layout direction, the
subgraphs in declaration order, every edge in source order, and the node
label map. All of them are frozen; a parse call hands the caller a value that
is never mutated again.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from fishtail.syntax.types import EdgeType


@dataclass(frozen=True)
class SubGraph:
    name: str
    nodes: tuple[str, ...] = ()

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    label: str | None = None
    edge_type: EdgeType = field(default_factory=EdgeType.default, compare=False)

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target


@dataclass(frozen=True)
class Graph:
    direction: str
    subgraphs: tuple[SubGraph, ...] = ()
    edges: tuple[Edge, ...] = ()
    labels: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze the label map; callers may pass a plain dict.
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))

    def __hash__(self) -> int:
        return hash((self.direction, self.subgraphs, self.edges, tuple(sorted(self.labels.items()))))

    def __reduce__(self):
        # mappingproxy cannot be pickled; rebuild from a plain dict.
        return (self.__class__, (self.direction, self.subgraphs, self.edges, dict(self.labels)))

    def label_for(self, node_id: str) -> str:
        """Display label for a node, falling back to its id."""
        return self.labels.get(node_id, node_id)


def all_node_names(graph: Graph) -> list[str]:
    """Every node id in the graph: subgraph members and edge endpoints, sorted."""
    names: set[str] = set()
    for sg in graph.subgraphs:
        names.update(sg.nodes)
    for edge in graph.edges:
        names.add(edge.source)
        names.add(edge.target)
    return sorted(names)


def node_subgraph(graph: Graph, name: str) -> SubGraph | None:
    """Return the first declared subgraph that lists ``name`` as a member."""
    for sg in graph.subgraphs:
        if name in sg:
            return sg
    return None
