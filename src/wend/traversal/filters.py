"""Route filters: equality, membership and predicate tests, plus lookahead assertions.

Projection filters (:func:`with_`, :func:`with_id`, :func:`of_kind`, ...) share one
rule for their match argument:

* a set (``set``/``frozenset``) tests membership of the projected value;
* any other callable is applied to the projected value as a predicate;
* anything else (a string, number, ``KindId``...) is compared by equality.
"""

from __future__ import annotations

from collections.abc import Mapping, Set
from itertools import islice
from typing import TYPE_CHECKING, Any

from wend.graph.types import kind
from wend.traversal.route import ensure_seq

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    type Match = Any


def matcher(match: Match) -> Callable[[Any], bool]:
    """Turn a match argument into a predicate over projected values."""
    if isinstance(match, Set):
        return lambda value: value in match
    if callable(match):
        return lambda value: bool(match(value))
    return lambda value: value == match


# ------------------------------------------------------------------
# Identity filters
# ------------------------------------------------------------------


def is_(r: Any, value: Any) -> Iterator[Any]:
    """Elements equal to *value*."""
    return (e for e in ensure_seq(r) if e == value)


def isnt(r: Any, value: Any) -> Iterator[Any]:
    """Elements not equal to *value*."""
    return (e for e in ensure_seq(r) if e != value)


def one_of(r: Any, values: Iterable[Any]) -> Iterator[Any]:
    """Elements equal to any of *values*."""
    pool = values if isinstance(values, Set) else frozenset(values)
    return (e for e in ensure_seq(r) if e in pool)


def none_of(r: Any, values: Iterable[Any]) -> Iterator[Any]:
    """Elements equal to none of *values*."""
    pool = values if isinstance(values, Set) else frozenset(values)
    return (e for e in ensure_seq(r) if e not in pool)


# ------------------------------------------------------------------
# Projection filters
# ------------------------------------------------------------------


def with_(r: Any, projection: Callable[[Any], Any], match: Match) -> Iterator[Any]:
    """Elements whose ``projection(element)`` equals *match* (or is in it, for a set).

    Unlike the other projection filters, a callable *match* is compared by
    equality, not applied.
    """
    if isinstance(match, Set):
        return (e for e in ensure_seq(r) if projection(e) in match)
    return (e for e in ensure_seq(r) if projection(e) == match)


def with_id(r: Any, match: Match) -> Iterator[Any]:
    """Elements whose id matches."""
    test = matcher(match)
    return (e for e in ensure_seq(r) if test(e.element_id))


def not_id(r: Any, match: Match) -> Iterator[Any]:
    """Elements whose id does not match."""
    test = matcher(match)
    return (e for e in ensure_seq(r) if not test(e.element_id))


def with_label(r: Any, match: Match) -> Iterator[Any]:
    """Edges whose label matches."""
    test = matcher(match)
    return (e for e in ensure_seq(r) if test(e.label))


def of_kind(r: Any, match: Match) -> Iterator[Any]:
    """Elements whose id kind matches (see :class:`~wend.graph.types.KindId`)."""
    test = matcher(match)
    return (e for e in ensure_seq(r) if test(kind(e)))


def has_property(r: Any, key: str, value: Any) -> Iterator[Any]:
    """Elements whose document maps *key* to *value*.

    Only mapping documents are looked into; a missing key reads as ``None``.
    """
    for e in ensure_seq(r):
        doc = e.get_document()
        if isinstance(doc, Mapping) and doc.get(key) == value:
            yield e


# ------------------------------------------------------------------
# Lookahead
# ------------------------------------------------------------------


def _count_upto(f: Callable[[Any], Any], e: Any, limit: int) -> int:
    return sum(1 for _ in islice(ensure_seq(f(e)), limit))


def _bounded_test(
    f: Callable[[Any], Any],
    min_count: int | None,
    max_count: int | None,
) -> Callable[[Any], bool]:
    if min_count is not None and max_count is not None:
        return lambda e: min_count <= _count_upto(f, e, max_count + 1) <= max_count
    if min_count is not None:
        return lambda e: _count_upto(f, e, min_count) == min_count
    if max_count is not None:
        return lambda e: _count_upto(f, e, max_count + 1) <= max_count
    return lambda e: _count_upto(f, e, 1) == 1


def lookahead(
    r: Any,
    f: Callable[[Any], Any],
    *,
    min_count: int | None = None,
    max_count: int | None = None,
) -> Iterator[Any]:
    """Keep elements for which the sub-route ``f(element)`` is non-empty.

    With *min_count* and/or *max_count*, keep elements whose sub-route size
    lies within the bounds instead.  At most ``max_count + 1`` (or
    *min_count*) items are ever pulled from each sub-route.
    """
    test = _bounded_test(f, min_count, max_count)
    return (e for e in ensure_seq(r) if test(e))


def neg_lookahead(
    r: Any,
    f: Callable[[Any], Any],
    *,
    min_count: int | None = None,
    max_count: int | None = None,
) -> Iterator[Any]:
    """Keep elements that :func:`lookahead` with the same arguments would drop."""
    test = _bounded_test(f, min_count, max_count)
    return (e for e in ensure_seq(r) if not test(e))


def lookahead_element(
    e: Any,
    f: Callable[[Any], Any],
    *,
    min_count: int | None = None,
    max_count: int | None = None,
) -> Any:
    """Single-element :func:`lookahead`: return *e* if it passes, else ``None``."""
    return e if _bounded_test(f, min_count, max_count)(e) else None
