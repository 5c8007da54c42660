"""Header classification: decide whether a diagram is one we can parse."""

from __future__ import annotations

import re
from dataclasses import dataclass

from fishtail.parsers.base import UNSUPPORTED_DIAGRAMS, UnsupportedDiagramError

_SUPPORTED_RE = re.compile(r"^(?:graph|flowchart)\s+([A-Za-z]+)", re.IGNORECASE)
_COMMENT_RE = re.compile(r"^\s*%%")


@dataclass(frozen=True)
class Header:
    """The accepted header line and where it sits in the source."""

    direction: str
    line_index: int
    text: str


def is_comment(line: str) -> bool:
    return _COMMENT_RE.match(line) is not None


def find_header(lines: list[str]) -> tuple[int, str]:
    """Return (index, stripped text) of the first significant line, or (-1, "")."""
    for i, line in enumerate(lines):
        if line.strip() and not is_comment(line):
            return i, line.strip()
    return -1, ""


def classify(lines: list[str]) -> Header:
    """Classify the diagram header.

    Raises:
        UnsupportedDiagramError: If the header names a known non-flowchart
            dialect, or is not a ``graph``/``flowchart`` header at all.
    """
    index, text = find_header(lines)
    lower = text.lower()
    for keyword in UNSUPPORTED_DIAGRAMS:
        if lower.startswith(keyword.lower()):
            raise UnsupportedDiagramError(
                f"Diagram type '{keyword}' is not supported yet. Only graph/flowchart diagrams are supported."
            )
    m = _SUPPORTED_RE.match(text)
    if m is None:
        raise UnsupportedDiagramError(
            f"Unsupported diagram type. Only graph/flowchart diagrams are supported. Got: '{text}'"
        )
    return Header(direction=m.group(1).upper(), line_index=index, text=text)
