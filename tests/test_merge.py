"""Tests for branch and merge."""

from __future__ import annotations

from itertools import count, islice

import pytest

from wend.exceptions import InvalidArgumentError
from wend.graph import RustworkxGraph
from wend.traversal import (
    Chunks,
    branch,
    chunked,
    in_,
    keyed_branch,
    merge_exhaustive,
    merge_round_robin,
    out,
)

# ======================================================================
# Chunks
# ======================================================================


class TestChunks:
    def test_chunked_blocks(self) -> None:
        source = chunked(range(7), 3)
        assert source.next_block() == [0, 1, 2]
        assert source.next_block() == [3, 4, 5]
        assert source.next_block() == [6]
        assert source.next_block() is None

    def test_iterating_flattens(self) -> None:
        assert list(chunked(range(5), 2)) == [0, 1, 2, 3, 4]

    def test_empty_blocks_skipped(self) -> None:
        source = Chunks([[], [1], [], [2, 3]])
        assert source.next_block() == [1]
        assert source.next_block() == [2, 3]
        assert source.next_block() is None

    @pytest.mark.parametrize("size", [0, -2])
    def test_bad_size(self, size: int) -> None:
        with pytest.raises(InvalidArgumentError):
            chunked([1], size)


# ======================================================================
# branch
# ======================================================================


class TestBranch:
    def test_one_result_per_function(self) -> None:
        result = branch([1, 2, 3], [sum, max, len])
        assert result == [6, 3, 3]

    def test_not_flattened(self, dag: RustworkxGraph) -> None:
        d = dag.vertex("d")
        outs, ins = branch(d, [out, in_])
        assert list(outs) == []
        assert [v.element_id for v in ins] == ["b", "c"]

    def test_iterator_route_is_shared(self) -> None:
        result = branch(iter([1, 2, 3]), [list, sum])
        assert result == [[1, 2, 3], 6]

    def test_keyed_branch(self) -> None:
        assert keyed_branch([3, 1, 2], {"low": min, "high": max}) == {"low": 1, "high": 3}

    def test_keyed_branch_iterator(self) -> None:
        assert keyed_branch(iter("ab"), {"joined": "".join, "n": lambda r: len(list(r))}) == {
            "joined": "ab",
            "n": 2,
        }


# ======================================================================
# Merge
# ======================================================================


class TestMergeExhaustive:
    def test_concatenates(self) -> None:
        assert list(merge_exhaustive([[1, 2], [], [3]])) == [1, 2, 3]

    def test_mapping_values(self) -> None:
        assert list(merge_exhaustive({"x": [1], "y": [2, 3]})) == [1, 2, 3]

    def test_with_branch(self, dag: RustworkxGraph) -> None:
        c = dag.vertex("c")
        merged = merge_exhaustive(branch(c, [in_, out]))
        assert [v.element_id for v in merged] == ["a", "d", "e"]


class TestMergeRoundRobin:
    def test_interleaves(self) -> None:
        assert list(merge_round_robin([[1, 2, 3], ["a", "b"], [9]])) == [1, "a", 9, 2, "b", 3]

    def test_empty_branches(self) -> None:
        assert list(merge_round_robin([[], [1, 2], []])) == [1, 2]
        assert list(merge_round_robin([])) == []

    def test_mapping_values(self) -> None:
        assert list(merge_round_robin({"x": [1, 2], "y": ["a"]})) == [1, "a", 2]

    def test_lazy_over_infinite_branches(self) -> None:
        merged = merge_round_robin([count(0), count(100)])
        assert list(islice(merged, 5)) == [0, 100, 1, 101, 2]

    def test_chunked_branch_gives_whole_blocks(self) -> None:
        merged = merge_round_robin([chunked(range(5), 2), ["a", "b", "c"]])
        assert list(merged) == [0, 1, "a", 2, 3, "b", 4, "c"]

    def test_deterministic(self) -> None:
        branches = [[1, 2, 3], ["a"], [7, 8]]
        assert list(merge_round_robin(branches)) == list(merge_round_robin(branches))
