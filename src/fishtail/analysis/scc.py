"""Strongly connected components (Tarjan) and cyclic edge classification.

Tarjan's algorithm is run with an explicit work stack instead of recursion,
so deep chains cannot hit the interpreter's recursion limit. Index and
low-link values are assigned in the same order as the recursive form, so
component ids come out identical.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from fishtail.ir.model import Edge, Graph

logger = logging.getLogger(__name__)


def adjacency(edges: Iterable[Edge]) -> tuple[list[str], dict[str, list[str]]]:
    """Return (nodes in first-appearance order, successor lists in edge order)."""
    nodes: dict[str, None] = {}
    adj: dict[str, list[str]] = {}
    for edge in edges:
        nodes.setdefault(edge.source)
        nodes.setdefault(edge.target)
        adj.setdefault(edge.source, []).append(edge.target)
    return list(nodes), adj


def strongly_connected_components(edges: Iterable[Edge]) -> list[list[str]]:
    """Tarjan's SCC over the edge list.

    Components are returned in the order Tarjan completes them (reverse
    topological order of the condensation). Each component lists its members
    in pop order.
    """
    nodes, adj = adjacency(edges)
    index: dict[str, int] = {}
    lowlink: dict[str, int] = {}
    on_stack: set[str] = set()
    stack: list[str] = []
    components: list[list[str]] = []
    counter = 0

    def visit(v: str) -> Iterator[str]:
        nonlocal counter
        index[v] = lowlink[v] = counter
        counter += 1
        stack.append(v)
        on_stack.add(v)
        return iter(adj.get(v, ()))

    for root in nodes:
        if root in index:
            continue
        work: list[tuple[str, Iterator[str]]] = [(root, visit(root))]
        while work:
            v, successors = work[-1]
            descended = False
            for w in successors:
                if w not in index:
                    work.append((w, visit(w)))
                    descended = True
                    break
                if w in on_stack:
                    lowlink[v] = min(lowlink[v], index[w])
            if descended:
                continue

            work.pop()
            if lowlink[v] == index[v]:
                members: list[str] = []
                while True:
                    w = stack.pop()
                    on_stack.discard(w)
                    members.append(w)
                    if w == v:
                        break
                components.append(members)
            if work:
                parent = work[-1][0]
                lowlink[parent] = min(lowlink[parent], lowlink[v])

    logger.debug("tarjan: %d nodes, %d components", len(nodes), len(components))
    return components


def component_ids(components: list[list[str]]) -> dict[str, int]:
    """Map each node to the id (position) of its component."""
    return {node: i for i, members in enumerate(components) for node in members}


def is_cyclic(edge: Edge, ids: dict[str, int], sizes: list[int]) -> bool:
    """An edge is cyclic if it is a self-loop or stays inside a multi-node SCC."""
    if edge.is_self_loop:
        return True
    sid = ids.get(edge.source)
    return sid is not None and sid == ids.get(edge.target) and sizes[sid] > 1


def cyclic_edges(graph: Graph) -> list[Edge]:
    """Every edge of ``graph`` that lies on some cycle, in source order."""
    components = strongly_connected_components(graph.edges)
    ids = component_ids(components)
    sizes = [len(members) for members in components]
    return [edge for edge in graph.edges if is_cyclic(edge, ids, sizes)]
