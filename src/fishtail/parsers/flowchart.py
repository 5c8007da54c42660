"""Flowchart parser: a single stateful pass over the lines of a diagram.

The only state carried between lines is the current scope, either the top
level or the subgraph being filled. Each line is matched against comment,
direction, subgraph open/close, edge chain and node declaration rules, first
match wins; anything else is ignored.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from fishtail.ir.model import Edge, Graph, SubGraph
from fishtail.parsers.base import RESERVED_KEYWORDS
from fishtail.parsers.edges import parse_chain
from fishtail.parsers.header import Header, classify, is_comment
from fishtail.parsers.shapes import NodeToken, parse_node_token

logger = logging.getLogger(__name__)

_DIRECTION_RE = re.compile(r"^\s*direction\s+")
_SUBGRAPH_START_RE = re.compile(r'^\s*subgraph\s+(?:"([^"]*)"|([\w-]+))')
_SUBGRAPH_END_RE = re.compile(r"^\s*end\s*$")
_NEWLINE_RE = re.compile(r"\r\n|\n|\r")


@dataclass(frozen=True)
class _Scope:
    """Where the parser is: top level, or inside the subgraph at ``index``."""

    index: int | None = None

    @property
    def top_level(self) -> bool:
        return self.index is None


_TOP_LEVEL = _Scope()


@dataclass
class _SubGraphBuilder:
    name: str
    nodes: list[str] = field(default_factory=list)

    def add(self, node_id: str) -> None:
        if node_id not in self.nodes:
            self.nodes.append(node_id)

    def build(self) -> SubGraph:
        return SubGraph(name=self.name, nodes=tuple(self.nodes))


@dataclass
class _GraphBuilder:
    """Mutable accumulator; frozen into a Graph once all lines are read."""

    header: Header
    subgraphs: list[_SubGraphBuilder] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    labels: dict[str, str] = field(default_factory=dict)
    scope: _Scope = _TOP_LEVEL

    def record_label(self, token: NodeToken) -> None:
        # Last declaration wins.
        if token.label is not None:
            self.labels[token.id] = token.label

    def current(self) -> _SubGraphBuilder | None:
        if self.scope.top_level:
            return None
        return self.subgraphs[self.scope.index]

    def open_subgraph(self, name: str) -> None:
        self.subgraphs.append(_SubGraphBuilder(name=name))
        self.scope = _Scope(index=len(self.subgraphs) - 1)
        logger.debug("subgraph %r opened", name)

    def close_subgraph(self) -> None:
        self.scope = _TOP_LEVEL

    def build(self) -> Graph:
        return Graph(
            direction=self.header.direction,
            subgraphs=tuple(sg.build() for sg in self.subgraphs),
            edges=tuple(self.edges),
            labels=self.labels,
        )


def split_lines(src: str) -> list[str]:
    return _NEWLINE_RE.split(src.strip())


def parse_edge_line(line: str, labels: dict[str, str]) -> list[Edge]:
    """Parse every edge of a (possibly chained) edge line.

    Labels of all node tokens on the line are written into ``labels``, even
    when the line turns out to hold no edge.
    """
    head, links = parse_chain(line.strip())
    if head is None:
        return []
    if head.label is not None:
        labels[head.id] = head.label
    edges: list[Edge] = []
    source = head.id
    for link in links:
        if link.target.label is not None:
            labels[link.target.id] = link.target.label
        edges.append(
            Edge(
                source=source,
                target=link.target.id,
                label=link.arrow.label,
                edge_type=link.arrow.edge_type,
            )
        )
        source = link.target.id
    return edges


def parse_node_declaration(line: str) -> NodeToken | None:
    """Parse a line holding nothing but one node token, e.g. ``db[(Store)]``."""
    trimmed = line.strip()
    token = parse_node_token(trimmed)
    if token is None or token.consumed != len(trimmed):
        return None
    if token.id in RESERVED_KEYWORDS:
        return None
    return token


class FlowchartParser:
    """Flowchart/graph diagram parser."""

    def parse(self, src: str) -> Graph:
        lines = split_lines(src)
        builder = _GraphBuilder(header=classify(lines))
        for line in lines[builder.header.line_index + 1 :]:
            self._parse_line(builder, line)
        graph = builder.build()
        logger.debug(
            "parsed %r: %d subgraphs, %d edges, %d labels",
            builder.header.text,
            len(graph.subgraphs),
            len(graph.edges),
            len(graph.labels),
        )
        return graph

    def _parse_line(self, builder: _GraphBuilder, line: str) -> None:
        if is_comment(line) or _DIRECTION_RE.match(line):
            return

        m = _SUBGRAPH_START_RE.match(line)
        if m:
            name = m.group(1) if m.group(1) is not None else m.group(2)
            builder.open_subgraph(name)
            return

        if _SUBGRAPH_END_RE.match(line):
            builder.close_subgraph()
            return

        current = builder.current()

        # Edge chains come first; a node declaration is a prefix of one.
        line_edges = parse_edge_line(line, builder.labels)
        if line_edges:
            builder.edges.extend(line_edges)
            if current is not None:
                for edge in line_edges:
                    current.add(edge.source)
                    current.add(edge.target)
            return

        if current is not None:
            token = parse_node_declaration(line)
            if token is not None:
                builder.record_label(token)
                current.add(token.id)
                return

        if line.strip():
            logger.debug("ignored line: %r", line.strip())
