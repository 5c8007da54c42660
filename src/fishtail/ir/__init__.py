"""Intermediate representation: the parsed graph model and its networkx view."""

from fishtail.ir.graph import GraphIR, Highlight, Reachability, cycle_edges, highlight, reachable
from fishtail.ir.model import Edge, Graph, SubGraph, all_node_names, node_subgraph

__all__ = [
    "Edge",
    "Graph",
    "GraphIR",
    "Highlight",
    "Reachability",
    "SubGraph",
    "all_node_names",
    "cycle_edges",
    "highlight",
    "node_subgraph",
    "reachable",
]
