"""Tests for root-relative depth indexing."""

from lazygraph.graph.depth import DepthIndex, depth
from lazygraph.graph.model import LazyGraph
from lazygraph.graph.traversal import bfs
from tests.helpers import CountingGraph, FanGraph, adjacency_graph


class TestDepth:
    def test_labels_are_distances(self, diamond: LazyGraph) -> None:
        g = depth(diamond, "A")
        assert [(v.vertex, v.label) for v in bfs(g, "A")] == [
            ("A", 0),
            ("B", 1),
            ("C", 1),
            ("D", 2),
        ]

    def test_edges_are_kept(self, diamond: LazyGraph) -> None:
        node = depth(diamond, "A")("A")
        assert node is not None
        assert list(node.edges) == [("ab", "B"), ("ac", "C")]

    def test_unreachable_vertex_is_absent(self) -> None:
        g = adjacency_graph({"A": [("ab", "B")], "B": [], "island": []})
        assert depth(g, "A")("island") is None

    def test_max_depth_caps_lookup(self, naturals: CountingGraph) -> None:
        g = depth(naturals.graph, 1, max_depth=3)
        assert g(5).label == 3  # type: ignore[union-attr]
        assert g(10) is None

    def test_infinite_graph(self, naturals: CountingGraph) -> None:
        assert depth(naturals.graph, 1)(10).label == 4  # type: ignore[union-attr]

    def test_child_of_infinitely_branching_vertex(self, fan: FanGraph) -> None:
        node = depth(fan.graph, ())((7,))
        assert node is not None
        assert node.label == 1
        assert fan.calls == [(), (7,)]


class TestDepthIndex:
    def test_lookups_are_memoized(self, naturals: CountingGraph) -> None:
        index = DepthIndex(naturals.graph, 1)
        assert index.lookup(8) == 3
        generated = len(naturals.calls)
        assert index.lookup(8) == 3
        assert index.lookup(4) == 2
        assert len(naturals.calls) == generated

    def test_depth_known_once_discovered(self, naturals: CountingGraph) -> None:
        index = DepthIndex(naturals.graph, 1)
        assert naturals.calls == []
        assert index.lookup(2) == 1
        # 2 was reached by an edge of 1; it has not been generated yet.
        assert naturals.calls == [1]

    def test_stops_past_max_depth(self, naturals: CountingGraph) -> None:
        index = DepthIndex(naturals.graph, 1, max_depth=1)
        assert index.lookup(1000) is None
        assert index.lookup(2) == 1
        assert index.lookup(3) is None
        assert naturals.calls == [1, 2]

    def test_stops_on_entering_last_level(self, fan: FanGraph) -> None:
        index = DepthIndex(fan.graph, (), max_depth=0)
        assert index.lookup(()) == 0
        assert index.lookup((0,)) is None
        assert fan.calls == [()]

    def test_children_of_infinite_fan_are_indexed(self, fan: FanGraph) -> None:
        index = DepthIndex(fan.graph, (), max_depth=1)
        assert index.lookup((0,)) == 1
        assert index.lookup((1000,)) == 1
        assert fan.calls == [()]

    def test_negative_max_depth_excludes_root(self, diamond: LazyGraph) -> None:
        assert DepthIndex(diamond, "A", max_depth=-1).lookup("A") is None
