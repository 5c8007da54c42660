"""Arrow lexemes and edge chains (``A --> B -->|yes| C``)."""

from __future__ import annotations

import re
from dataclasses import dataclass

from fishtail.parsers.shapes import NodeToken, parse_node_token
from fishtail.syntax.types import EdgeType

# Edge connectors, longest/most specific first.
_EDGE_PATTERNS: list[tuple[str, EdgeType]] = [
    ("-.->", EdgeType.DottedArrow),
    ("-..->", EdgeType.DottedArrow),
    ("==>", EdgeType.ThickArrow),
    ("-->", EdgeType.Arrow),
    ("---", EdgeType.Line),
    ("--", EdgeType.Open),
    ("-..-", EdgeType.DottedLine),
    ("-.-", EdgeType.DottedLine),
]

_WHITESPACE_RE = re.compile(r"[ \t]*")
_EDGE_LABEL_RE = re.compile(r"[ \t]*\|([^|]*)\|")


@dataclass(frozen=True)
class Arrow:
    edge_type: EdgeType
    consumed: int
    label: str | None = None


@dataclass(frozen=True)
class ChainLink:
    """One hop of an edge chain: the arrow and the node it points at."""

    arrow: Arrow
    target: NodeToken


def _skip_ws(text: str, pos: int) -> int:
    return _WHITESPACE_RE.match(text, pos).end()


def parse_arrow(text: str, pos: int = 0) -> Arrow | None:
    """Match an arrow (and optional ``|label|``) at ``pos``.

    Leading spaces and tabs are allowed. Whatever follows the arrow and its
    label must be end of text or whitespace, otherwise the next lexeme is
    tried.
    """
    start = _skip_ws(text, pos)
    for token, etype in _EDGE_PATTERNS:
        if not text.startswith(token, start):
            continue
        end = start + len(token)
        label = None
        m = _EDGE_LABEL_RE.match(text, end)
        if m:
            label = m.group(1).strip() or None
            end = m.end()
        if end < len(text) and text[end] not in " \t":
            continue
        return Arrow(edge_type=etype, consumed=end - pos, label=label)
    return None


def parse_chain(text: str) -> tuple[NodeToken | None, list[ChainLink]]:
    """Parse an edge chain from a trimmed line.

    Returns the head node token and every link recognised before the first
    position where no arrow or node follows. A line with no arrow yields an
    empty link list.
    """
    head = parse_node_token(text)
    if head is None:
        return None, []
    links: list[ChainLink] = []
    pos = head.consumed
    while pos < len(text):
        arrow = parse_arrow(text, pos)
        if arrow is None:
            break
        pos = _skip_ws(text, pos + arrow.consumed)
        target = parse_node_token(text, pos)
        if target is None:
            break
        links.append(ChainLink(arrow=arrow, target=target))
        pos += target.consumed
    return head, links
