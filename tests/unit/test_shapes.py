"""Tests for the node token / shape grammar."""

import pytest

from fishtail.parsers.shapes import NodeToken, match_shape, parse_node_token
from fishtail.syntax.types import NodeShape


@pytest.mark.parametrize(
    "text,shape,label",
    [
        ("db[(Store)]", NodeShape.Cylinder, "Store"),
        ('db[("Big Store")]', NodeShape.Cylinder, "Big Store"),
        ("c((Hub))", NodeShape.Circle, "Hub"),
        ('c(("Hub One"))', NodeShape.Circle, "Hub One"),
        ("s[[Run job]]", NodeShape.Subroutine, "Run job"),
        ('s[["Run job"]]', NodeShape.Subroutine, "Run job"),
        ("h{{Prepare}}", NodeShape.Hexagon, "Prepare"),
        ('h{{"Prepare all"}}', NodeShape.Hexagon, "Prepare all"),
        ("p[/Input/]", NodeShape.Parallelogram, "Input"),
        ("p[\\Output\\]", NodeShape.ParallelogramAlt, "Output"),
        ("A[Client]", NodeShape.Rectangle, "Client"),
        ('A["Long Label"]', NodeShape.Rectangle, "Long Label"),
        ("r(Rounded)", NodeShape.Rounded, "Rounded"),
        ('r("Rounded edge")', NodeShape.Rounded, "Rounded edge"),
        ("d{Decide?}", NodeShape.Diamond, "Decide?"),
        ('d{"Decide now?"}', NodeShape.Diamond, "Decide now?"),
        ("a>Flag]", NodeShape.Asymmetric, "Flag"),
        ('a>"Flag it"]', NodeShape.Asymmetric, "Flag it"),
    ],
)
def test_shapes(text, shape, label):
    token = parse_node_token(text)
    assert token is not None
    assert token.shape == shape
    assert token.label == label
    assert token.consumed == len(text)


def test_bare_identifier():
    assert parse_node_token("service --> log") == NodeToken(id="service", consumed=7)


def test_no_identifier():
    assert parse_node_token("--> b") is None
    assert parse_node_token("") is None


def test_parse_at_offset():
    token = parse_node_token("xx B[Bee] yy", 3)
    assert token == NodeToken(id="B", consumed=6, label="Bee", shape=NodeShape.Rectangle)


def test_cylinder_beats_rectangle():
    # A rectangle would otherwise capture "(db)" as its label.
    assert match_shape("[(db)]") == (NodeShape.Cylinder, "db", 6)


def test_circle_beats_rounded():
    assert match_shape("((x))") == (NodeShape.Circle, "x", 5)


def test_unterminated_shape_is_unlabeled():
    token = parse_node_token("A[oops")
    assert token == NodeToken(id="A", consumed=1)


def test_empty_label():
    token = parse_node_token("A[]")
    assert token.label == ""
    assert token.consumed == 3
