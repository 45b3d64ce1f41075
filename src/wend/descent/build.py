"""Cycle-safe traversals built on the descent engine.

Every function here takes a route, an element-level ``children(element)``
function (``out``, ``in_``, ``partial(out, labels=["knows"])``...) and optional
predicates:

* ``pred(path, element)``: expand *element* only if it returns true.
* ``path_pred(path)`` and ``element_pred(element)``: the same test split in
  two halves; all given predicates must pass.
* An ``int`` in place of ``pred`` or ``path_pred`` bounds the path length:
  *element* is expanded only while fewer than that many ancestors precede it.

Cycle cutting (on by default) refuses to expand an element that is already on
its own path, before any of the predicates run.  The path used here is the
engine's own record of visited ancestors, not the lineage built by
:func:`~wend.path.with_path`.
"""

from __future__ import annotations

from itertools import chain
from typing import TYPE_CHECKING, Any

from wend.descent.control import CONTINUE, EMIT, EMIT_AND_CUT
from wend.descent.engine import OrderedPath, descend, descents
from wend.exceptions import InvalidArgumentError
from wend.traversal.filters import lookahead, neg_lookahead
from wend.traversal.route import ensure_seq

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from wend.descent.config import TraversalConfig
    from wend.descent.control import Instruction

    type Pred = Callable[[Any, Any], Any] | int | None
    type PathPred = Callable[[Any], Any] | int | None
    type ElementPred = Callable[[Any], Any] | None


_NOTHING = object()


def _length_bound(n: Any, name: str) -> Callable[[Any], bool]:
    if isinstance(n, bool) or n < 1:
        msg = f"{name} must be a positive path length or a function, got {n!r}"
        raise InvalidArgumentError(msg)
    return lambda p: len(p) < n


def _starting_path(*, cut_cycles: bool, ordered: bool, tracked: bool) -> Any:
    if ordered:
        return OrderedPath() if cut_cycles else ()
    if cut_cycles:
        return frozenset()
    if tracked:
        return ()
    return None


def _combine_preds(
    pred: Pred,
    path_pred: PathPred,
    element_pred: ElementPred,
    *,
    cut_cycles: bool,
) -> Callable[[Any, Any], bool] | None:
    tests: list[Callable[[Any, Any], Any]] = []
    if cut_cycles:
        tests.append(lambda p, e: e not in p)
    if callable(pred):
        tests.append(pred)
    elif pred is not None:
        bound = _length_bound(pred, "pred")
        tests.append(lambda p, e: bound(p))
    if callable(path_pred):
        tests.append(lambda p, e: path_pred(p))
    elif path_pred is not None:
        path_bound = _length_bound(path_pred, "path_pred")
        tests.append(lambda p, e: path_bound(p))
    if element_pred is not None:
        tests.append(lambda p, e: element_pred(e))
    if not tests:
        return None
    if len(tests) == 1:
        return tests[0]
    return lambda p, e: all(test(p, e) for test in tests)


def _leaves_only(
    children: Callable[[Any], Any],
    test: Callable[[Any, Any], Any] | None,
) -> tuple[Callable[[Any, Any], Instruction], Callable[[Any, Any], Any]]:
    # A leaf is decided on the raw children; the predicates only gate whether
    # the walk goes on below. The engine asks for the same element's children
    # straight after the control, so hand back what was already pulled.
    peeked: list[tuple[Any, Iterator[Any]]] = []

    def control(p: Any, e: Any) -> Instruction:
        peeked.clear()
        kids = iter(ensure_seq(children(e)))
        first = next(kids, _NOTHING)
        if first is _NOTHING:
            return EMIT
        peeked.append((e, chain((first,), kids)))
        return CONTINUE

    def expand(p: Any, e: Any) -> Any:
        if test is not None and not test(p, e):
            peeked.clear()
            return None
        if peeked and peeked[0][0] is e:
            return peeked.pop()[1]
        return children(e)

    return control, expand


def _all_cycles_control(p: Any, e: Any) -> Instruction:
    if len(p) and e == p[0]:
        return EMIT_AND_CUT
    return CONTINUE


def _build_all(
    r: Any,
    children: Callable[[Any], Any],
    pred: Pred = None,
    *,
    path_pred: PathPred = None,
    element_pred: ElementPred = None,
    control: Callable[[Any, Any], Instruction | str] | None = None,
    cut_cycles: bool = True,
    emit_paths: bool = False,
    ordered: bool = False,
    leaves_only: bool = False,
    config: TraversalConfig | None = None,
) -> Iterator[Any]:
    test = _combine_preds(pred, path_pred, element_pred, cut_cycles=cut_cycles)
    path = _starting_path(
        cut_cycles=cut_cycles,
        ordered=ordered or emit_paths or callable(pred) or callable(path_pred),
        tracked=test is not None,
    )

    if leaves_only:
        control, expand = _leaves_only(children, test)
    elif test is None:

        def expand(p: Any, e: Any) -> Any:
            return children(e)

    else:

        def expand(p: Any, e: Any) -> Any:
            return children(e) if test(p, e) else None

    if emit_paths:
        return descents(r, expand, control, path=path, config=config)
    return descend(r, expand, control, path=path, config=config)


# ------------------------------------------------------------------
# Reachability
# ------------------------------------------------------------------


def all_(
    r: Any,
    children: Callable[[Any], Any],
    pred: Pred = None,
    *,
    path_pred: PathPred = None,
    element_pred: ElementPred = None,
    config: TraversalConfig | None = None,
) -> Iterator[Any]:
    """Every element of the route and everything reachable from it; cuts cycles.

    >>> from wend.graph import RustworkxGraph
    >>> from wend.traversal import out
    >>> g = RustworkxGraph().add_edges("L", [("a", "b"), ("b", "c"), ("c", "a")]).seal()
    >>> [v.element_id for v in all_(g.vertex("a"), out)]
    ['a', 'b', 'c', 'a']
    """
    return _build_all(r, children, pred, path_pred=path_pred, element_pred=element_pred, config=config)


def all_with_cycles(
    r: Any,
    children: Callable[[Any], Any],
    pred: Pred = None,
    *,
    path_pred: PathPred = None,
    element_pred: ElementPred = None,
    config: TraversalConfig | None = None,
) -> Iterator[Any]:
    """Like :func:`all_`, without cycle cutting.

    Bounding the walk (a length *pred*, ``max_depth``, or consuming only a
    prefix) is up to the caller.
    """
    return _build_all(
        r,
        children,
        pred,
        path_pred=path_pred,
        element_pred=element_pred,
        cut_cycles=False,
        config=config,
    )


def deepest(
    r: Any,
    children: Callable[[Any], Any],
    pred: Pred = None,
    *,
    path_pred: PathPred = None,
    element_pred: ElementPred = None,
    config: TraversalConfig | None = None,
) -> Iterator[Any]:
    """Only the leaves: reachable elements for which *children* yields nothing.

    An element that still has children but is kept from expanding, by cycle
    cutting or a predicate, is not a leaf and is not emitted.
    """
    return _build_all(
        r,
        children,
        pred,
        path_pred=path_pred,
        element_pred=element_pred,
        leaves_only=True,
        config=config,
    )


# ------------------------------------------------------------------
# Path variants
# ------------------------------------------------------------------


def all_paths(
    r: Any,
    children: Callable[[Any], Any],
    pred: Pred = None,
    *,
    path_pred: PathPred = None,
    element_pred: ElementPred = None,
    config: TraversalConfig | None = None,
) -> Iterator[tuple[Any, ...]]:
    """The path to every element :func:`all_` would yield."""
    return _build_all(
        r,
        children,
        pred,
        path_pred=path_pred,
        element_pred=element_pred,
        emit_paths=True,
        config=config,
    )


def all_paths_with_cycles(
    r: Any,
    children: Callable[[Any], Any],
    pred: Pred = None,
    *,
    path_pred: PathPred = None,
    element_pred: ElementPred = None,
    config: TraversalConfig | None = None,
) -> Iterator[tuple[Any, ...]]:
    """The path to every element :func:`all_with_cycles` would yield."""
    return _build_all(
        r,
        children,
        pred,
        path_pred=path_pred,
        element_pred=element_pred,
        cut_cycles=False,
        emit_paths=True,
        config=config,
    )


def deepest_paths(
    r: Any,
    children: Callable[[Any], Any],
    pred: Pred = None,
    *,
    path_pred: PathPred = None,
    element_pred: ElementPred = None,
    config: TraversalConfig | None = None,
) -> Iterator[tuple[Any, ...]]:
    """The path to every leaf :func:`deepest` would yield."""
    return _build_all(
        r,
        children,
        pred,
        path_pred=path_pred,
        element_pred=element_pred,
        emit_paths=True,
        leaves_only=True,
        config=config,
    )


# ------------------------------------------------------------------
# Cycles
# ------------------------------------------------------------------


def all_cycles(
    r: Any,
    children: Callable[[Any], Any],
    pred: Pred = None,
    *,
    path_pred: PathPred = None,
    element_pred: ElementPred = None,
    config: TraversalConfig | None = None,
) -> Iterator[Any]:
    """Each time the walk returns to the route element it started from, yield it.

    Only cycles through the origin are reported; other repeats are cut.  With
    path-tracked elements, ``path(result)`` shows the cycle itself:

    >>> from wend.graph import RustworkxGraph
    >>> from wend.path import path, with_path
    >>> from wend.traversal import out
    >>> g = RustworkxGraph().add_edges("L", [("a", "b"), ("b", "c"), ("c", "a")]).seal()
    >>> [found] = all_cycles(with_path(g.vertex("a")), out, 3)
    >>> len(path(found))
    7
    """
    return _build_all(
        r,
        children,
        pred,
        path_pred=path_pred,
        element_pred=element_pred,
        control=_all_cycles_control,
        ordered=True,
        config=config,
    )


def all_cycle_paths(
    r: Any,
    children: Callable[[Any], Any],
    pred: Pred = None,
    *,
    path_pred: PathPred = None,
    element_pred: ElementPred = None,
    config: TraversalConfig | None = None,
) -> Iterator[tuple[Any, ...]]:
    """Like :func:`all_cycles`, yielding ``(origin, ..., origin)`` tuples."""
    return _build_all(
        r,
        children,
        pred,
        path_pred=path_pred,
        element_pred=element_pred,
        control=_all_cycles_control,
        ordered=True,
        emit_paths=True,
        config=config,
    )


def cycle(r: Any, children: Callable[[Any], Any], *, max_length: int = 1) -> Iterator[Any]:
    """Elements from which *children* leads straight back to themselves.

    With the default ``max_length=1`` that means a self-loop; larger values
    allow that many expansions before the return.
    """
    return lookahead(r, lambda e: all_cycles(e, children, max_length))


def no_cycle(r: Any, children: Callable[[Any], Any], *, max_length: int = 1) -> Iterator[Any]:
    """Elements that :func:`cycle` with the same arguments would drop."""
    return neg_lookahead(r, lambda e: all_cycles(e, children, max_length))
