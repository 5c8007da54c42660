"""Simple cycle enumeration, restricted to strongly connected components."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from fishtail.analysis.scc import adjacency, strongly_connected_components
from fishtail.ir.model import Edge

logger = logging.getLogger(__name__)


def canonical_rotation(path: list[str]) -> tuple[str, ...]:
    """Rotate a closed path so its smallest node comes first (never reversed)."""
    start = path.index(min(path))
    return tuple(path[start:] + path[:start])


def _cycles_from(start: str, scc_adj: dict[str, list[str]]) -> Iterator[list[str]]:
    """Depth-first walk from ``start``; yield every path that closes back on it."""
    path = [start]
    visited = {start}
    work: list[Iterator[str]] = [iter(scc_adj[start])]
    while work:
        neighbor = next(work[-1], None)
        if neighbor is None:
            work.pop()
            visited.discard(path.pop())
            continue
        if neighbor == start:
            if len(path) > 1:
                yield list(path)
        elif neighbor not in visited:
            visited.add(neighbor)
            path.append(neighbor)
            work.append(iter(scc_adj[neighbor]))


def find_simple_cycles(edges: Iterable[Edge]) -> list[list[str]]:
    """Enumerate every simple cycle in the edge list.

    Self-loops are reported as one-node cycles. Longer cycles are found by a
    depth-first walk from each member of every multi-node SCC, canonicalised
    by rotation and de-duplicated. The result is sorted by length, then by
    node sequence.

    The walk is exponential in SCC size in the worst case; diagrams are
    expected to be small.
    """
    edges = list(edges)
    seen: set[tuple[str, ...]] = set()
    cycles: list[tuple[str, ...]] = []

    for edge in edges:
        if edge.is_self_loop and (edge.source,) not in seen:
            seen.add((edge.source,))
            cycles.append((edge.source,))

    _, adj = adjacency(edges)
    for members in strongly_connected_components(edges):
        if len(members) <= 1:
            continue
        member_set = set(members)
        scc_adj = {node: [n for n in adj.get(node, ()) if n in member_set] for node in members}
        for start in members:
            for path in _cycles_from(start, scc_adj):
                canonical = canonical_rotation(path)
                if canonical not in seen:
                    seen.add(canonical)
                    cycles.append(canonical)

    cycles.sort(key=lambda c: (len(c), c))
    logger.debug("found %d simple cycles", len(cycles))
    return [list(c) for c in cycles]
