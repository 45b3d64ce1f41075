"""Directional steps: edges and neighbor vertices of every element in a route.

Each step comes in a grouped form (``*_groups``: one lazy sub-route per source
element, kept separate even when empty) and a flattened form.  Both accept an
optional label restriction and an optional ``post`` function that is applied to
each source's sub-route *before* flattening, while grouping is still visible:

    out(route, ["knows"], post=lambda vs: sorted(vs, key=name))

"both" steps yield in-edges before out-edges for each source.
"""

from __future__ import annotations

from itertools import chain
from typing import TYPE_CHECKING, Any

from wend.conditions import UnknownDirectionCondition, resolve
from wend.graph.protocols import Edge, Vertex
from wend.graph.types import prepare_labels
from wend.traversal.route import ensure_seq, fast_sort_by

if TYPE_CHECKING:
    from collections.abc import Callable, Collection, Iterable, Iterator

    from wend.conditions import Handler

    type Labels = str | Collection[str] | None
    type Post = Callable[[Iterable[Any]], Iterable[Any]] | None


# ------------------------------------------------------------------
# Traversal direction
# ------------------------------------------------------------------


def traversed_forward(e: Edge, on_unknown: Handler | None = None) -> bool:
    """Return ``True`` if *e* was reached by following an out-edge.

    Edges that were not produced by a directional step carry no direction;
    *on_unknown* may decide, otherwise they count as forward.
    """
    forward = e.traversed_forward
    if forward is not None:
        return forward
    condition = UnknownDirectionCondition(e, f"Traversal direction of {e!r} is unknown")
    return bool(resolve(condition, on_unknown, default=True))


def traversed_reverse(e: Edge, on_unknown: Handler | None = None) -> bool:
    """Return ``True`` if *e* was reached by following an in-edge."""
    return not traversed_forward(e, on_unknown)


def same_vertex(e: Edge, on_unknown: Handler | None = None) -> Vertex:
    """The endpoint we used to get to *e*."""
    return e.out_vertex() if traversed_forward(e, on_unknown) else e.in_vertex()


def other_vertex(e: Edge, on_unknown: Handler | None = None) -> Vertex:
    """The endpoint we did not use to get to *e*."""
    return e.in_vertex() if traversed_forward(e, on_unknown) else e.out_vertex()


# ------------------------------------------------------------------
# Edge steps
# ------------------------------------------------------------------


def _groups(
    r: Any,
    incident: Callable[[Vertex, frozenset[str] | None], Iterable[Any]],
    labels: Labels,
    post: Post,
) -> Iterator[Iterable[Any]]:
    prepared = prepare_labels(labels)
    for v in ensure_seq(r):
        sub = incident(v, prepared)
        yield sub if post is None else post(sub)


def _in(v: Vertex, labels: frozenset[str] | None) -> Iterable[Edge]:
    return v.in_edges(labels)


def _out(v: Vertex, labels: frozenset[str] | None) -> Iterable[Edge]:
    return v.out_edges(labels)


def _both(v: Vertex, labels: frozenset[str] | None) -> Iterable[Edge]:
    return chain(v.in_edges(labels), v.out_edges(labels))


def in_e_groups(r: Any, labels: Labels = None, post: Post = None) -> Iterator[Iterable[Edge]]:
    """Per-vertex in-edges, one sub-route per vertex."""
    return _groups(r, _in, labels, post)


def out_e_groups(r: Any, labels: Labels = None, post: Post = None) -> Iterator[Iterable[Edge]]:
    """Per-vertex out-edges, one sub-route per vertex."""
    return _groups(r, _out, labels, post)


def both_e_groups(r: Any, labels: Labels = None, post: Post = None) -> Iterator[Iterable[Edge]]:
    """Per-vertex in- and out-edges, one sub-route per vertex."""
    return _groups(r, _both, labels, post)


def in_e(r: Any, labels: Labels = None, post: Post = None) -> Iterator[Edge]:
    """Edges pointing in to each vertex of the route."""
    return chain.from_iterable(in_e_groups(r, labels, post))


def out_e(r: Any, labels: Labels = None, post: Post = None) -> Iterator[Edge]:
    """Edges pointing out of each vertex of the route."""
    return chain.from_iterable(out_e_groups(r, labels, post))


def both_e(r: Any, labels: Labels = None, post: Post = None) -> Iterator[Edge]:
    """Edges pointing in to, then out of, each vertex of the route."""
    return chain.from_iterable(both_e_groups(r, labels, post))


# ------------------------------------------------------------------
# Edge -> vertex steps
# ------------------------------------------------------------------


def out_v(r: Any) -> Iterator[Vertex]:
    """The source vertex of each edge."""
    return (e.out_vertex() for e in ensure_seq(r))


def in_v(r: Any) -> Iterator[Vertex]:
    """The target vertex of each edge."""
    return (e.in_vertex() for e in ensure_seq(r))


def both_v(r: Any) -> Iterator[Vertex]:
    """Target then source vertex of each edge."""
    for e in ensure_seq(r):
        yield e.in_vertex()
        yield e.out_vertex()


def other_v(r: Any, on_unknown: Handler | None = None) -> Iterator[Vertex]:
    """For each edge, the vertex on the far side from where we arrived."""
    return (other_vertex(e, on_unknown) for e in ensure_seq(r))


def same_v(r: Any, on_unknown: Handler | None = None) -> Iterator[Vertex]:
    """For each edge, the vertex we arrived from."""
    return (same_vertex(e, on_unknown) for e in ensure_seq(r))


# ------------------------------------------------------------------
# Vertex -> vertex steps
# ------------------------------------------------------------------


def _then(f: Callable[[Iterable[Any]], Iterable[Any]], post: Post) -> Post:
    if post is None:
        return f
    return lambda sub: post(f(sub))


def in_groups(r: Any, labels: Labels = None, post: Post = None) -> Iterator[Iterable[Vertex]]:
    """Per-vertex sources of incoming edges, one sub-route per vertex."""
    return in_e_groups(r, labels, _then(out_v, post))


def out_groups(r: Any, labels: Labels = None, post: Post = None) -> Iterator[Iterable[Vertex]]:
    """Per-vertex targets of outgoing edges, one sub-route per vertex."""
    return out_e_groups(r, labels, _then(in_v, post))


def both_groups(r: Any, labels: Labels = None, post: Post = None) -> Iterator[Iterable[Vertex]]:
    """Per-vertex neighbors in either direction, one sub-route per vertex."""
    return both_e_groups(r, labels, _then(other_v, post))


def in_(r: Any, labels: Labels = None, post: Post = None) -> Iterator[Vertex]:
    """Vertices with edges pointing in to each vertex of the route."""
    return chain.from_iterable(in_groups(r, labels, post))


def out(r: Any, labels: Labels = None, post: Post = None) -> Iterator[Vertex]:
    """Vertices that each vertex of the route points to."""
    return chain.from_iterable(out_groups(r, labels, post))


def both(r: Any, labels: Labels = None, post: Post = None) -> Iterator[Vertex]:
    """Neighbors of each vertex of the route, following edges either way."""
    return chain.from_iterable(both_groups(r, labels, post))


def in_sorted(r: Any, labels: Labels, key: Callable[[Any], Any]) -> Iterator[Vertex]:
    """Like :func:`in_`, sorting each vertex's neighbors by *key*."""
    return in_(r, labels, lambda vs: fast_sort_by(key, vs))


def out_sorted(r: Any, labels: Labels, key: Callable[[Any], Any]) -> Iterator[Vertex]:
    """Like :func:`out`, sorting each vertex's neighbors by *key*."""
    return out(r, labels, lambda vs: fast_sort_by(key, vs))
