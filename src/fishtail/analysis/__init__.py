"""Cycle analysis: strongly connected components and simple cycles."""

from fishtail.analysis.cycles import canonical_rotation, find_simple_cycles
from fishtail.analysis.scc import component_ids, cyclic_edges, is_cyclic, strongly_connected_components

__all__ = [
    "canonical_rotation",
    "component_ids",
    "cyclic_edges",
    "find_simple_cycles",
    "is_cyclic",
    "strongly_connected_components",
]
