"""Tests for fishtail.ir.graph — GraphIR construction, reachability and highlighting."""

from fishtail.ir.graph import GraphIR, cycle_edges, highlight, reachable
from fishtail.ir.model import Edge, Graph, SubGraph
from fishtail.parsers import parse

LINEAR = """graph LR
  subgraph bases
    api
    utils
  end
  api --> service
  service --> log
  log --> db
"""


def _graph(*pairs: tuple[str, str], members: tuple[str, ...] = ()) -> Graph:
    subgraphs = (SubGraph("g", members),) if members else ()
    return Graph(direction="LR", subgraphs=subgraphs, edges=tuple(Edge(s, t) for s, t in pairs))


class TestGraphIR:
    def test_empty_graph(self):
        gir = GraphIR.from_graph(Graph(direction="TD"))
        assert gir.node_count() == 0
        assert gir.edge_count() == 0

    def test_subgraph_members_become_nodes(self):
        gir = GraphIR.from_graph(_graph(members=("x", "y")))
        assert gir.node_count() == 2
        assert gir.edge_count() == 0

    def test_parallel_edges_kept(self):
        gir = GraphIR.from_graph(_graph(("a", "b"), ("a", "b")))
        assert gir.node_count() == 2
        assert gir.edge_count() == 2
        assert gir.out_degree("a") == 2
        assert gir.in_degree("b") == 2

    def test_degree_of_unknown_node(self):
        gir = GraphIR.from_graph(_graph(("a", "b")))
        assert gir.in_degree("zz") == 0
        assert gir.out_degree("zz") == 0

    def test_descendants_and_ancestors(self):
        gir = GraphIR.from_graph(parse(LINEAR))
        assert gir.descendants("service") == {"log", "db"}
        assert gir.ancestors("service") == {"api"}
        assert gir.descendants("nope") == set()

    def test_groups(self):
        gir = GraphIR.from_graph(_graph(("a", "b"), ("c", "d"), ("d", "e"), members=("z",)))
        assert gir.groups() == [["c", "d", "e"], ["a", "b"]]


class TestReachable:
    def test_linear_chain_from_middle(self):
        result = reachable(parse(LINEAR), "service")
        assert result.nodes == {"api", "service", "log", "db"}
        assert result.edges == (Edge("api", "service"), Edge("service", "log"), Edge("log", "db"))

    def test_isolated_node(self):
        result = reachable(parse(LINEAR), "utils")
        assert result.nodes == {"utils"}
        assert result.edges == ()

    def test_siblings_not_reachable(self):
        # b and c share a parent but neither is an ancestor or descendant of the other.
        result = reachable(_graph(("a", "b"), ("a", "c")), "b")
        assert result.nodes == {"a", "b"}
        assert result.edges == (Edge("a", "b"),)

    def test_cycle(self):
        result = reachable(_graph(("a", "b"), ("b", "a"), ("b", "c")), "a")
        assert result.nodes == {"a", "b", "c"}
        assert len(result.edges) == 3

    def test_unknown_node(self):
        result = reachable(_graph(("a", "b")), "ghost")
        assert result.nodes == {"ghost"}
        assert result.edges == ()


class TestHighlight:
    def test_select_service(self):
        h = highlight(parse(LINEAR), "service")
        assert h.selected == "service"
        assert h.highlighted == {"api", "service", "log", "db"}
        assert h.dimmed == {"utils"}
        assert h.upstream == (Edge("api", "service"),)
        assert h.downstream == (Edge("service", "log"), Edge("log", "db"))
        assert h.circular == ()

    def test_select_isolated(self):
        h = highlight(parse(LINEAR), "utils")
        assert h.highlighted == {"utils"}
        assert h.dimmed == {"api", "service", "log", "db"}
        assert h.edges == ()

    def test_circular_edges(self):
        h = highlight(_graph(("a", "b"), ("b", "a"), ("x", "a"), ("b", "y")), "a")
        assert h.circular == (Edge("a", "b"), Edge("b", "a"))
        assert h.upstream == (Edge("x", "a"),)
        assert h.downstream == (Edge("b", "y"),)

    def test_self_loop_on_selection_is_circular(self):
        h = highlight(_graph(("a", "a"), ("a", "b")), "a")
        assert h.circular == (Edge("a", "a"),)
        assert h.downstream == (Edge("a", "b"),)


def test_cycle_edges():
    graph = _graph(("a", "b"), ("b", "c"), ("c", "a"), ("a", "c"))
    assert cycle_edges(graph, ["a", "b", "c"]) == (Edge("a", "b"), Edge("b", "c"), Edge("c", "a"))
