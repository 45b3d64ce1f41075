"""Branch and merge: fan a route out into sub-traversals and recombine them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Mapping
from itertools import chain, islice, tee
from typing import TYPE_CHECKING, Any

from wend.exceptions import InvalidArgumentError
from wend.traversal.route import ensure_seq

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Iterable, Sequence


class Chunks:
    """A source that exposes its items in blocks.

    :func:`merge_round_robin` takes a whole block from a ``Chunks`` source on
    each turn instead of a single item.  Iterating a ``Chunks`` directly
    yields the items, flattened.
    """

    __slots__ = ("_blocks",)

    def __init__(self, blocks: Iterable[Iterable[Any]]) -> None:
        self._blocks = iter(blocks)

    def next_block(self) -> list[Any] | None:
        """Return the next non-empty block, or ``None`` once exhausted."""
        for block in self._blocks:
            items = list(block)
            if items:
                return items
        return None

    def __iter__(self) -> Iterator[Any]:
        while (block := self.next_block()) is not None:
            yield from block


def chunked(items: Iterable[Any], size: int) -> Chunks:
    """Expose *items* as blocks of *size* (the last block may be shorter)."""
    if size < 1:
        msg = f"chunk size must be at least 1, got {size}"
        raise InvalidArgumentError(msg)
    source = iter(items)
    return Chunks(iter(lambda: list(islice(source, size)), []))


def branch(r: Any, fs: Sequence[Callable[[Any], Any]]) -> list[Any]:
    """Apply every function in *fs* to the same route.

    Returns one result per function, in order, not flattened.  A one-shot
    iterator route is split with :func:`itertools.tee` so that each branch
    sees every element.
    """
    if isinstance(r, Iterator):
        copies = tee(r, len(fs))
        return [f(copy) for f, copy in zip(fs, copies, strict=True)]
    return [f(r) for f in fs]


def keyed_branch(r: Any, fs: Mapping[Hashable, Callable[[Any], Any]]) -> dict[Hashable, Any]:
    """Like :func:`branch`, keeping each result under the key of its function."""
    keys = list(fs)
    results = branch(r, [fs[key] for key in keys])
    return dict(zip(keys, results, strict=True))


def _branches(rs: Iterable[Any] | Mapping[Hashable, Any]) -> Iterable[Any]:
    if isinstance(rs, Mapping):
        return rs.values()
    return rs


def merge_exhaustive(rs: Iterable[Any] | Mapping[Hashable, Any]) -> Iterator[Any]:
    """Concatenate the branches, each one fully, first to last."""
    return chain.from_iterable(ensure_seq(r) for r in _branches(rs))


def merge_round_robin(rs: Iterable[Any] | Mapping[Hashable, Any]) -> Iterator[Any]:
    """Interleave the branches, one item (or one block of a :class:`Chunks`) per turn.

    Exhausted branches drop out of the rotation; the others keep their
    relative order.

    >>> list(merge_round_robin([[1, 2, 3], ["a", "b"], [9]]))
    [1, 'a', 9, 2, 'b', 3]
    """
    rotation: deque[Chunks | Iterator[Any]] = deque(
        r if isinstance(r, Chunks) else iter(ensure_seq(r)) for r in _branches(rs)
    )
    while rotation:
        source = rotation.popleft()
        if isinstance(source, Chunks):
            block = source.next_block()
            if block is None:
                continue
            yield from block
        else:
            for item in source:
                yield item
                break
            else:
                continue
        rotation.append(source)
