"""Node token grammar: an identifier with an optional shape-delimited label.

Shapes are tried in a fixed order, most specific first, so that e.g. a
cylinder ``[(db)]`` is never read as a rectangle holding ``(db)``. Each shape
has a quoted variant that is tried before its unquoted form.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from fishtail.syntax.types import NodeShape

_NODE_ID_RE = re.compile(r"\w+")

_SHAPE_PATTERNS: list[tuple[re.Pattern[str], NodeShape]] = [
    (re.compile(r'\[\("([^"]*)"\)\]'), NodeShape.Cylinder),
    (re.compile(r"\[\(([^)]*)\)\]"), NodeShape.Cylinder),
    (re.compile(r'\(\("([^"]*)"\)\)'), NodeShape.Circle),
    (re.compile(r"\(\(([^)]*)\)\)"), NodeShape.Circle),
    (re.compile(r'\[\["([^"]*)"\]\]'), NodeShape.Subroutine),
    (re.compile(r"\[\[([^\]]*)\]\]"), NodeShape.Subroutine),
    (re.compile(r'\{\{"([^"]*)"\}\}'), NodeShape.Hexagon),
    (re.compile(r"\{\{([^}]*)\}\}"), NodeShape.Hexagon),
    (re.compile(r"\[/([^/]*)/\]"), NodeShape.Parallelogram),
    (re.compile(r"\[\\([^\\]*)\\\]"), NodeShape.ParallelogramAlt),
    (re.compile(r'\["([^"]*)"\]'), NodeShape.Rectangle),
    (re.compile(r"\[([^\]]*)\]"), NodeShape.Rectangle),
    (re.compile(r'\("([^"]*)"\)'), NodeShape.Rounded),
    (re.compile(r"\(([^)]*)\)"), NodeShape.Rounded),
    (re.compile(r'\{"([^"]*)"\}'), NodeShape.Diamond),
    (re.compile(r"\{([^}]*)\}"), NodeShape.Diamond),
    (re.compile(r'>"([^"]*)"\]'), NodeShape.Asymmetric),
    (re.compile(r">([^\]]*)\]"), NodeShape.Asymmetric),
]


@dataclass(frozen=True)
class NodeToken:
    """A node reference as it appeared in the source.

    ``consumed`` is the number of characters the token spans: the identifier
    plus its shape suffix, if any.
    """

    id: str
    consumed: int
    label: str | None = None
    shape: NodeShape | None = None


def _strip_quotes(text: str) -> str:
    if text.startswith('"'):
        text = text[1:]
    if text.endswith('"'):
        text = text[:-1]
    return text


def match_shape(text: str, pos: int = 0) -> tuple[NodeShape, str, int] | None:
    """Match a shape suffix at ``pos``. Returns (shape, label, length) or None."""
    for pattern, shape in _SHAPE_PATTERNS:
        m = pattern.match(text, pos)
        if m:
            return shape, _strip_quotes(m.group(1)), m.end() - pos
    return None


def parse_node_token(text: str, pos: int = 0) -> NodeToken | None:
    """Parse an identifier plus optional shape starting exactly at ``pos``."""
    m = _NODE_ID_RE.match(text, pos)
    if not m:
        return None
    node_id = m.group(0)
    shape_result = match_shape(text, m.end())
    if shape_result is None:
        return NodeToken(id=node_id, consumed=len(node_id))
    shape, label, length = shape_result
    return NodeToken(id=node_id, consumed=len(node_id) + length, label=label, shape=shape)
