"""Graph IR — wraps a parsed Graph in a networkx MultiDiGraph for queries.

The interactive viewer asks, per click, which nodes and edges are connected
to a node. These queries are answered here from a networkx view built on
demand; nothing is cached between calls.
"""

from __future__ import annotations

from dataclasses import dataclass

import networkx as nx

from fishtail.ir.model import Edge, Graph, all_node_names


@dataclass(frozen=True)
class Reachability:
    """A node with its ancestors and descendants, and the edges among them."""

    nodes: frozenset[str]
    edges: tuple[Edge, ...]


@dataclass(frozen=True)
class Highlight:
    """What the viewer shows when a node is selected."""

    selected: str
    highlighted: frozenset[str]
    dimmed: frozenset[str]
    edges: tuple[Edge, ...]
    upstream: tuple[Edge, ...]
    downstream: tuple[Edge, ...]
    circular: tuple[Edge, ...]


class GraphIR:
    """The graph intermediate representation built from a parsed Graph.

    Wraps a networkx MultiDiGraph (parallel edges are kept) and exposes
    helpers for topology queries.
    """

    def __init__(self, graph: Graph, digraph: nx.MultiDiGraph) -> None:
        self.graph = graph
        self.digraph = digraph

    @classmethod
    def from_graph(cls, graph: Graph) -> GraphIR:
        """Build a GraphIR; subgraph members become nodes even without edges."""
        digraph: nx.MultiDiGraph = nx.MultiDiGraph()
        for sg in graph.subgraphs:
            digraph.add_nodes_from(sg.nodes)
        for i, edge in enumerate(graph.edges):
            digraph.add_edge(edge.source, edge.target, key=i, data=edge)
        return cls(graph=graph, digraph=digraph)

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def edge_count(self) -> int:
        return self.digraph.number_of_edges()

    def in_degree(self, node_id: str) -> int:
        if node_id not in self.digraph:
            return 0
        return self.digraph.in_degree(node_id)

    def out_degree(self, node_id: str) -> int:
        if node_id not in self.digraph:
            return 0
        return self.digraph.out_degree(node_id)

    def descendants(self, node_id: str) -> set[str]:
        if node_id not in self.digraph:
            return set()
        return nx.descendants(self.digraph, node_id)

    def ancestors(self, node_id: str) -> set[str]:
        if node_id not in self.digraph:
            return set()
        return nx.ancestors(self.digraph, node_id)

    def edges_within(self, nodes: frozenset[str] | set[str]) -> tuple[Edge, ...]:
        """Edges whose endpoints both lie in ``nodes``, in source order."""
        return tuple(e for e in self.graph.edges if e.source in nodes and e.target in nodes)

    def groups(self) -> list[list[str]]:
        """Weakly connected components with more than one node.

        Each group is sorted; groups are ordered largest first, then by name.
        """
        groups = [sorted(c) for c in nx.weakly_connected_components(self.digraph) if len(c) > 1]
        groups.sort(key=lambda g: (-len(g), g))
        return groups


def reachable(graph: Graph, node: str) -> Reachability:
    """The node, everything upstream and downstream of it, and the edges among them."""
    gir = GraphIR.from_graph(graph)
    nodes = frozenset({node} | gir.descendants(node) | gir.ancestors(node))
    return Reachability(nodes=nodes, edges=gir.edges_within(nodes))


def highlight(graph: Graph, node: str) -> Highlight:
    """Compute the highlight state for selecting ``node``.

    Upstream edges feed into the node or one of its ancestors; downstream
    edges leave the node or one of its descendants. An edge that is both is
    circular and is reported only as such.
    """
    gir = GraphIR.from_graph(graph)
    ancestors = gir.ancestors(node)
    descendants = gir.descendants(node)
    nodes = frozenset({node} | ancestors | descendants)

    into = ancestors | {node}
    out_of = descendants | {node}
    upstream: list[Edge] = []
    downstream: list[Edge] = []
    circular: list[Edge] = []
    for edge in graph.edges:
        is_up = edge.target in into and edge.source in into
        is_down = edge.source in out_of and edge.target in out_of
        if is_up and is_down:
            circular.append(edge)
        elif is_up:
            upstream.append(edge)
        elif is_down:
            downstream.append(edge)

    return Highlight(
        selected=node,
        highlighted=nodes,
        dimmed=frozenset(all_node_names(graph)) - nodes,
        edges=gir.edges_within(nodes),
        upstream=tuple(upstream),
        downstream=tuple(downstream),
        circular=tuple(circular),
    )


def cycle_edges(graph: Graph, cycle: list[str]) -> tuple[Edge, ...]:
    """Edges traversed by a cycle as returned by ``find_simple_cycles``."""
    hops = {(cycle[i], cycle[(i + 1) % len(cycle)]) for i in range(len(cycle))}
    return tuple(e for e in graph.edges if (e.source, e.target) in hops)
