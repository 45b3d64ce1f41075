"""Tests for path tracking: wrappers, lineage, unwrapping and repeated-edge search."""

from __future__ import annotations

import pytest

from wend.exceptions import InvalidArgumentError
from wend.graph import Edge, RustworkxGraph, Vertex
from wend.path import (
    PathEdge,
    PathGraph,
    PathVertex,
    find_repeated_edge,
    is_path_tracked,
    path,
    reverse_path,
    strip_all_path_layers,
    strip_one_path_layer,
    with_path,
)
from wend.traversal import out, out_e

# ======================================================================
# Helpers
# ======================================================================


def _ids(items: list) -> list:
    return [strip_all_path_layers(x).element_id for x in items if isinstance(x, Vertex)]


def _wrap(e, times: int):
    for _ in range(times):
        e = with_path(e)
    return e


def _hop(v, n: int):
    """Follow the single out-edge *n* times."""
    for _ in range(n):
        [v] = out(v)
    return v


# ======================================================================
# with_path
# ======================================================================


class TestWithPath:
    def test_vertex(self, triangle: RustworkxGraph) -> None:
        v = with_path(triangle.vertex("a"))
        assert isinstance(v, PathVertex)
        assert is_path_tracked(v)

    def test_edge(self, triangle: RustworkxGraph) -> None:
        [e] = triangle.vertex("a").out_edges()
        tracked = with_path(e)
        assert isinstance(tracked, PathEdge)
        assert tracked.label == "L"
        assert tracked.traversed_forward is True

    def test_graph_roots_every_vertex(self, triangle: RustworkxGraph) -> None:
        g = with_path(triangle)
        assert isinstance(g, PathGraph)
        roots = list(g.all_vertices())
        assert all(isinstance(v, PathVertex) for v in roots)
        assert all(path(v) == [v] for v in roots)

    def test_graph_get_vertex(self, triangle: RustworkxGraph) -> None:
        g = with_path(triangle)
        assert isinstance(g.get_vertex("b"), PathVertex)
        assert g.get_vertex("missing") is None

    def test_untracked(self, triangle: RustworkxGraph) -> None:
        assert not is_path_tracked(triangle.vertex("a"))
        assert not is_path_tracked("a")

    @pytest.mark.parametrize("value", ["a", 1, None, ["a"]])
    def test_rejects_non_elements(self, value: object) -> None:
        with pytest.raises(InvalidArgumentError):
            with_path(value)

    def test_delegates_document_and_id(self, job_graph: RustworkxGraph) -> None:
        bob = with_path(job_graph.vertex("bob"))
        assert bob.element_id == "bob"
        assert bob.get_document()["name"] == "Bob"
        assert bob.graph is job_graph


# ======================================================================
# path / reverse_path
# ======================================================================


class TestLineage:
    def test_root_path_is_itself(self, triangle: RustworkxGraph) -> None:
        a = triangle.vertex("a")
        assert path(with_path(a)) == [a]

    @pytest.mark.parametrize("hops", [0, 1, 2, 3, 4])
    def test_vertex_hops(self, chain: RustworkxGraph, hops: int) -> None:
        end = _hop(with_path(chain.vertex("a")), hops)
        lineage = path(end)
        # each hop adds an edge and a vertex
        assert len(lineage) == 2 * hops + 1
        assert _ids(lineage) == ["a", "b", "c", "d", "e"][: hops + 1]
        assert list(reverse_path(end)) == lineage[::-1]

    def test_edge_hops(self, chain: RustworkxGraph) -> None:
        a = with_path(chain.vertex("a"))
        [e] = out_e(a)
        lineage = path(e)
        assert len(lineage) == 2
        assert isinstance(lineage[1], Edge)

    def test_path_items_are_raw(self, chain: RustworkxGraph) -> None:
        end = _hop(with_path(chain.vertex("a")), 2)
        assert not any(is_path_tracked(x) for x in path(end))

    def test_reverse_path_restartable(self, chain: RustworkxGraph) -> None:
        rp = reverse_path(_hop(with_path(chain.vertex("a")), 2))
        assert list(rp) == list(rp)
        assert len(list(rp)) == 5

    def test_untracked_is_own_path(self, triangle: RustworkxGraph) -> None:
        a = triangle.vertex("a")
        assert path(a) == [a]
        assert list(reverse_path(a)) == [a]

    def test_lineage_is_per_branch(self, dag: RustworkxGraph) -> None:
        a = with_path(dag.vertex("a"))
        b, c, _f = out(a)
        [d_via_b] = out(b)
        d_via_c, _e = out(c)
        assert _ids(path(d_via_b)) == ["a", "b", "d"]
        assert _ids(path(d_via_c)) == ["a", "c", "d"]

    def test_repr_shows_lineage(self, chain: RustworkxGraph) -> None:
        b = _hop(with_path(chain.vertex("a")), 1)
        assert repr(b) == "PathVertex[v('a') e('a' -[next]-> 'b') v('b')]"


# ======================================================================
# Unwrapping
# ======================================================================


class TestStripLayers:
    @pytest.mark.parametrize("depth", [0, 1, 2, 3, 4, 5])
    def test_strip_all(self, triangle: RustworkxGraph, depth: int) -> None:
        a = triangle.vertex("a")
        stripped = strip_all_path_layers(_wrap(a, depth))
        assert stripped is a

    @pytest.mark.parametrize("depth", [1, 2, 3, 4, 5])
    def test_strip_one_reduces_depth(self, triangle: RustworkxGraph, depth: int) -> None:
        a = triangle.vertex("a")
        wrapped = _wrap(a, depth)
        once = strip_one_path_layer(wrapped)
        assert once is wrapped.element
        layers = 0
        while is_path_tracked(once):
            once = strip_one_path_layer(once)
            layers += 1
        assert layers == depth - 1

    def test_strip_one_noop_on_raw(self, triangle: RustworkxGraph) -> None:
        a = triangle.vertex("a")
        assert strip_one_path_layer(a) is a
        assert strip_one_path_layer("x") == "x"

    def test_strip_graph(self, triangle: RustworkxGraph) -> None:
        assert strip_all_path_layers(with_path(with_path(triangle))) is triangle

    def test_deep_wrapping_is_iterative(self, triangle: RustworkxGraph) -> None:
        a = triangle.vertex("a")
        assert strip_all_path_layers(_wrap(a, 5000)) is a


# ======================================================================
# Equality transparency
# ======================================================================


class TestTransparency:
    def test_wrapped_equals_raw(self, triangle: RustworkxGraph) -> None:
        a = triangle.vertex("a")
        wrapped = with_path(a)
        assert wrapped == a
        assert a == wrapped
        assert hash(wrapped) == hash(a)

    def test_different_histories_are_equal(self, triangle: RustworkxGraph) -> None:
        a = triangle.vertex("a")
        root = with_path(a)
        around = _hop(root, 3)
        assert around == root
        assert around in {a}
        assert root in {around}
        assert len({a, root, around, with_path(with_path(a))}) == 1

    def test_wrapped_edges(self, triangle: RustworkxGraph) -> None:
        [raw] = triangle.vertex("a").out_edges()
        [tracked] = out_e(with_path(triangle.vertex("a")))
        assert tracked == raw
        assert {raw: 1}[tracked] == 1

    def test_unequal_elements(self, triangle: RustworkxGraph) -> None:
        assert with_path(triangle.vertex("a")) != with_path(triangle.vertex("b"))
        assert with_path(triangle.vertex("a")) != "a"

    def test_path_graph_equality(self, triangle: RustworkxGraph) -> None:
        assert with_path(triangle) == with_path(triangle)
        assert hash(with_path(triangle)) == hash(with_path(triangle))


# ======================================================================
# find_repeated_edge
# ======================================================================


class TestFindRepeatedEdge:
    def test_repeat_found(self, triangle: RustworkxGraph) -> None:
        # a -> b -> c -> a -> b: the a->b edge appears twice, non-adjacently
        end = _hop(with_path(triangle.vertex("a")), 4)
        repeated = find_repeated_edge(end)
        assert repeated is not None
        assert repeated.out_vertex().element_id == "a"
        assert repeated.in_vertex().element_id == "b"

    def test_all_distinct(self, chain: RustworkxGraph) -> None:
        end = _hop(with_path(chain.vertex("a")), 4)
        assert find_repeated_edge(end) is None

    def test_full_cycle_without_repeat(self, triangle: RustworkxGraph) -> None:
        # back at a, but every edge used once
        end = _hop(with_path(triangle.vertex("a")), 3)
        assert find_repeated_edge(end) is None

    def test_vertex_repeat_via_distinct_edges_not_reported(self) -> None:
        g = RustworkxGraph()
        g.add_edge("a", "b", "x")
        g.add_edge("b", "a", "y")
        g.add_edge("a", "c", "z")
        v = with_path(g.vertex("a"))
        [b] = out(v, "x")
        [a_again] = out(b, "y")
        [c] = out(a_again, "z")
        assert find_repeated_edge(c) is None

    def test_depth_limit(self, triangle: RustworkxGraph) -> None:
        end = _hop(with_path(triangle.vertex("a")), 4)
        assert find_repeated_edge(end, max_depth=3) is not None
        assert find_repeated_edge(end, max_depth=2) is None

    @pytest.mark.parametrize("bad", [0, -1])
    def test_non_positive_depth(self, triangle: RustworkxGraph, bad: int) -> None:
        with pytest.raises(InvalidArgumentError):
            find_repeated_edge(with_path(triangle.vertex("a")), max_depth=bad)

    def test_untracked(self, triangle: RustworkxGraph) -> None:
        assert find_repeated_edge(triangle.vertex("a")) is None
