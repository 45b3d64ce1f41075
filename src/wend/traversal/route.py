"""Route helpers: normalizing, composing, grouping and collecting routes.

A *route* is whatever flows between traversal steps: a single element, an
iterable of elements, or ``None``.  ``None`` propagates as an empty route.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from itertools import islice
from typing import TYPE_CHECKING, Any

from wend.graph._rustworkx import RustworkxGraph
from wend.graph.protocols import Edge, Element, get_document
from wend.path import path, strip_all_path_layers

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Iterable, Iterator

    type Route = Any


def ensure_seq(r: Route) -> Iterable[Any]:
    """Return *r* as something iterable: ``()`` for ``None``, a 1-tuple for an element."""
    if r is None:
        return ()
    if isinstance(r, Element):
        return (r,)
    return r


def pipeline(*steps: Callable[[Any], Any]) -> Callable[[Route], Any]:
    """Compose route steps left to right into a single route function.

    >>> double_then_sum = pipeline(lambda r: (x * 2 for x in r), sum)
    >>> double_then_sum([1, 2, 3])
    12
    """

    def run(r: Route) -> Any:
        r = ensure_seq(r)
        for step in steps:
            r = step(r)
        return r

    return run


def iterate(r: Route, f: Callable[[Any], Any], n: int) -> Any:
    """Apply the route function *f* to *r* *n* times."""
    for _ in range(n):
        r = f(r)
    return r


def gather(r: Route, into: list[Any] | None = None) -> list[list[Any]]:
    """Collect the whole route into a single-item list holding one list."""
    collected = list(into or [])
    collected.extend(ensure_seq(r))
    return [collected]


def join(rs: Iterable[Iterable[Any]]) -> Iterator[Any]:
    """Flatten a route of routes back into a single lazy route."""
    for r in rs:
        yield from ensure_seq(r)


spread = join


def documents(r: Route) -> Iterator[Any]:
    """The document of each element."""
    return (get_document(e) for e in ensure_seq(r))


def make_pairs(
    r: Route,
    f: Callable[[Any], Any],
    g: Callable[[Any], Any] | None = None,
) -> Iterator[tuple[Any, Any]]:
    """Pair each element with ``f(element)``, or produce ``(f(e), g(e))`` pairs."""
    if g is None:
        return ((e, f(e)) for e in ensure_seq(r))
    return ((f(e), g(e)) for e in ensure_seq(r))


def section(r: Route, f: Callable[[Any], Any], section_fn: Callable[[Any], Any]) -> Iterator[Any]:
    """Apply *section_fn* to each element, then *f* to that element's section."""
    for e in ensure_seq(r):
        yield from ensure_seq(f(section_fn(e)))


def context(
    r: Route,
    f: Callable[[Any, Any], Any],
    section_fn: Callable[[Any], Any],
) -> Iterator[Any]:
    """Like :func:`section`, but *f* also receives the element: ``f(e, section)``."""
    for e in ensure_seq(r):
        yield from ensure_seq(f(e, section_fn(e)))


def fast_sort_by(f: Callable[[Any], Any], coll: Iterable[Any]) -> list[Any]:
    """Sort by key, calling *f* exactly once per item."""
    keyed = [(f(x), i, x) for i, x in enumerate(coll)]
    keyed.sort(key=lambda t: (t[0], t[1]))
    return [x for _, _, x in keyed]


def sorted_section(
    r: Route,
    key: Callable[[Any], Any],
    section_fn: Callable[[Any], Any],
) -> Iterator[Any]:
    """Sort each element's section by *key* before flattening."""
    return section(r, lambda s: fast_sort_by(key, ensure_seq(s)), section_fn)


def into_set(r: Route, f: Callable[[frozenset[Any], Iterable[Any]], Any]) -> Any:
    """Call ``f(seen, route)`` where *seen* is the route realized as a set.

    Useful for excluding everything the route started with from a later step.
    """
    realized = list(ensure_seq(r))
    return f(frozenset(realized), realized)


def distinct_by(r: Route, key: Callable[[Any], Hashable]) -> Iterator[Any]:
    """Drop elements whose ``key(element)`` was already seen."""
    seen: set[Hashable] = set()
    for e in ensure_seq(r):
        k = key(e)
        if k in seen:
            continue
        seen.add(k)
        yield e


def distinct_in(r: Route, seen: set[Any], *, update: bool = True) -> Iterator[Any]:
    """Drop elements already in *seen*, a set shared across several route steps.

    With ``update=False`` the set is only read, never extended.
    """
    for e in ensure_seq(r):
        if e in seen:
            continue
        if update:
            seen.add(e)
        yield e


def pluck(r: Route, f: Callable[[Any], Any]) -> Any:
    """The first element for which ``f`` is truthy, or ``None``."""
    return next((e for e in ensure_seq(r) if f(e)), None)


def index_by(
    r: Route,
    to_key: Callable[[Any], Hashable],
    to_val: Callable[[Any], Any] | None = None,
) -> dict[Hashable, Any]:
    """Index items by key; later items win on collision."""
    if to_val is None:
        return {to_key(x): x for x in ensure_seq(r)}
    return {to_key(x): to_val(x) for x in ensure_seq(r)}


def index_by_multi(
    r: Route,
    to_keys: Callable[[Any], Iterable[Hashable]],
    to_val: Callable[[Any], Any] | None = None,
) -> dict[Hashable, Any]:
    """Index each item under every key returned by ``to_keys(item)``."""
    index: dict[Hashable, Any] = {}
    for x in ensure_seq(r):
        v = x if to_val is None else to_val(x)
        for key in to_keys(x):
            index[key] = v
    return index


def group_count(r: Route, f: Callable[[Any], Hashable] | None = None) -> dict[Hashable, int]:
    """Count equal items (or equal ``f(item)`` values), in first-seen order."""
    items = ensure_seq(r)
    return dict(Counter(items if f is None else map(f, items)))


def group_by_count(
    r: Route,
    f: Callable[[Any], Hashable] | None = None,
    *,
    min_count: int = 1,
) -> dict[int, list[Hashable]]:
    """Invert :func:`group_count`: ``{count: [keys with that count]}``.

    Counts below *min_count* are left out.
    """
    grouped: defaultdict[int, list[Hashable]] = defaultdict(list)
    for key, count in group_count(r, f).items():
        if count >= min_count:
            grouped[count].append(key)
    return dict(grouped)


def sorted_group_count(r: Route, f: Callable[[Any], Hashable] | None = None) -> dict[Hashable, int]:
    """Like :func:`group_count`, ordered by key; keys must be mutually comparable."""
    return dict(sorted(group_count(r, f).items()))


def sorted_group_by_count(
    r: Route,
    f: Callable[[Any], Hashable] | None = None,
    *,
    min_count: int = 1,
) -> dict[int, list[Hashable]]:
    """Like :func:`group_by_count`, ordered by ascending count."""
    return dict(sorted(group_by_count(r, f, min_count=min_count).items()))


def drop_take(steps: Iterable[int], coll: Iterable[Any]) -> Iterator[Any]:
    """Alternately drop and take chunks of the given sizes.

    >>> from itertools import count
    >>> list(drop_take([1, 2, 3, 4], count()))
    [1, 2, 6, 7, 8, 9]
    """
    return _alternate(steps, coll, take_first=False)


def take_drop(steps: Iterable[int], coll: Iterable[Any]) -> Iterator[Any]:
    """Alternately take and drop chunks of the given sizes.

    >>> from itertools import count
    >>> list(take_drop([1, 2, 3, 4], count()))
    [0, 3, 4, 5]
    """
    return _alternate(steps, coll, take_first=True)


def _alternate(steps: Iterable[int], coll: Iterable[Any], *, take_first: bool) -> Iterator[Any]:
    source = iter(coll)
    taking = take_first
    for size in steps:
        if taking:
            yield from islice(source, size)
        else:
            next(islice(source, size, size), None)
        taking = not taking


def subgraph(r: Route) -> RustworkxGraph:
    """Build a sealed graph from every edge on the tracked paths of the route.

    Elements must have been wrapped with :func:`~wend.path.with_path` before
    the part of the route whose edges should be kept.
    """
    g = RustworkxGraph()
    seen: set[Edge] = set()
    for e in ensure_seq(r):
        for item in path(e):
            edge = strip_all_path_layers(item)
            if not isinstance(edge, Edge) or edge in seen:
                continue
            seen.add(edge)
            source, target = edge.out_vertex(), edge.in_vertex()
            g.add_edge(source.element_id, target.element_id, edge.label, edge.get_document())
            for v in (source, target):
                doc = v.get_document()
                if doc is not None:
                    g.add_vertex(v.element_id, doc)
    return g.seal()
