"""The descent engine: a control-driven, pull-based recursive walk.

:func:`descend` and :func:`descents` visit every element of a route, ask a
*control* function what to do with it, and recurse into ``children(path,
element)`` as instructed.  The walk uses an explicit stack of frames rather than
Python recursion, so arbitrarily deep descents never hit the interpreter's
recursion limit, and it lives inside a generator: nothing happens until the
consumer pulls, and dropping the iterator abandons the walk at no cost.

The *path* handed to control and children holds the ancestors of the current
element (not the element itself).  Its type decides how it grows:

* ``None``: untracked; stays ``None``.
* ``tuple`` / ``list``: ordered, extended by appending.
* ``frozenset``: unordered membership, extended by union.
* :class:`OrderedPath`: ordered *and* constant-time membership.
"""

from __future__ import annotations

import logging
from collections.abc import Set
from typing import TYPE_CHECKING, Any

from wend.descent.config import DEFAULT_CONFIG, FailsafeAction, FailsafeContext, SearchCheckpoint
from wend.descent.control import coerce_instruction, default_control
from wend.exceptions import InvalidArgumentError
from wend.traversal.route import ensure_seq

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from wend.descent.config import TraversalConfig
    from wend.descent.control import Instruction

    type Path = Any
    type Control = Callable[[Path, Any], Instruction | str]
    type Children = Callable[[Path, Any], Any]

logger = logging.getLogger(__name__)


class OrderedPath:
    """An immutable path that keeps insertion order and answers ``in`` in O(1)."""

    __slots__ = ("_items", "_members")

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items = tuple(items)
        self._members = frozenset(self._items)

    def conj(self, item: Any) -> OrderedPath:
        """A new path with *item* appended."""
        extended = OrderedPath.__new__(OrderedPath)
        extended._items = (*self._items, item)
        extended._members = self._members | {item}
        return extended

    def __contains__(self, item: object) -> bool:
        return item in self._members

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrderedPath):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"OrderedPath({list(self._items)!r})"


# ------------------------------------------------------------------
# Path helpers
# ------------------------------------------------------------------


def extend_path(path: Path, element: Any) -> Path:
    """Grow *path* by *element*, preserving its kind."""
    if path is None:
        return None
    if isinstance(path, OrderedPath):
        return path.conj(element)
    if isinstance(path, tuple):
        return (*path, element)
    if isinstance(path, list):
        return [*path, element]
    if isinstance(path, Set):
        return frozenset(path) | {element}
    msg = f"Unsupported path type {type(path).__name__}"
    raise InvalidArgumentError(msg)


def empty_path(path: Path) -> Path:
    """An empty path of the same kind as *path*."""
    if path is None:
        return None
    if isinstance(path, OrderedPath):
        return OrderedPath()
    if isinstance(path, tuple):
        return ()
    if isinstance(path, list):
        return []
    if isinstance(path, Set):
        return frozenset()
    msg = f"Unsupported path type {type(path).__name__}"
    raise InvalidArgumentError(msg)


def is_ordered_path(path: Path) -> bool:
    return isinstance(path, (tuple, list, OrderedPath))


# ------------------------------------------------------------------
# Walk
# ------------------------------------------------------------------


class _Frame:
    __slots__ = ("candidates", "path")

    def __init__(self, path: Path, candidates: Iterator[Any]) -> None:
        self.path = path
        self.candidates = candidates


_EXHAUSTED = object()


def _walk(
    coll: Any,
    children: Children,
    control: Control,
    path: Path,
    config: TraversalConfig,
    *,
    emit_paths: bool,
) -> Iterator[Any]:
    max_depth = config.max_depth
    stack = [_Frame(path, iter(ensure_seq(coll)))]
    no_results = 0

    while stack:
        frame = stack[-1]
        element = next(frame.candidates, _EXHAUSTED)
        if element is _EXHAUSTED:
            stack.pop()
            continue

        instruction = coerce_instruction(control(frame.path, element))
        if not instruction.continue_siblings:
            frame.candidates = iter(())

        if instruction.emit:
            no_results = 0
            yield (*frame.path, element) if emit_paths else element

        if not instruction.descend:
            continue
        depth = len(stack) - 1
        if max_depth is not None and depth >= max_depth:
            continue

        no_results += 1
        if config.failsafe_due(no_results):
            checkpoint = SearchCheckpoint(frame.path, element, depth)
            logger.debug("Failsafe checkpoint after %d fruitless steps at %r", no_results, element)
            resolution = config.no_result_policy(FailsafeContext(checkpoint, no_results))
            if resolution.action is FailsafeAction.ADVANCE:
                logger.warning(
                    "Abandoning fruitless branch at %r (depth %d) after %d steps without results",
                    element,
                    depth,
                    no_results,
                )
                continue
            if resolution.action is FailsafeAction.CUT:
                logger.warning(
                    "Abandoning fruitless branch at %r and its siblings "
                    "(depth %d) after %d steps without results",
                    element,
                    depth,
                    no_results,
                )
                frame.candidates = iter(())
                continue
            if resolution.action is FailsafeAction.SUBSTITUTE:
                logger.warning(
                    "Ending fruitless search at %r after %d steps; substituting %r",
                    element,
                    no_results,
                    resolution.value,
                )
                yield resolution.value
                return

        child_path = empty_path(frame.path) if instruction.reset_path else extend_path(frame.path, element)
        stack.append(_Frame(child_path, iter(ensure_seq(children(frame.path, element)))))


def descend(
    coll: Any,
    children: Children,
    control: Control | None = None,
    *,
    path: Path = None,
    config: TraversalConfig | None = None,
) -> Iterator[Any]:
    """Walk *coll* and its descendants, yielding the elements *control* emits.

    Args:
        coll: The starting route.
        children: ``children(path, element)`` returns the next candidates
            (a route: ``None``, one element, or an iterable).
        control: ``control(path, element)`` returns an
            :class:`~wend.descent.control.Instruction` or a preset name.
            Defaults to emitting and descending into everything.
        path: Starting path; its type decides how paths are tracked (see the
            module docstring).  ``None`` tracks nothing.
        config: Failsafe and depth tuning for this walk.

    Returns:
        A lazy iterator; possibly infinite if *children* never runs dry.
    """
    return _walk(
        coll,
        children,
        control or default_control,
        path,
        config or DEFAULT_CONFIG,
        emit_paths=False,
    )


def descents(
    coll: Any,
    children: Children,
    control: Control | None = None,
    *,
    path: Path = (),
    config: TraversalConfig | None = None,
) -> Iterator[tuple[Any, ...]]:
    """Like :func:`descend`, but yield ``(*path, element)`` tuples instead of elements.

    The starting *path* must be ordered (a tuple, list or
    :class:`OrderedPath`).
    """
    if not is_ordered_path(path):
        msg = f"descents needs an ordered starting path, got {type(path).__name__}"
        raise InvalidArgumentError(msg)
    return _walk(
        coll,
        children,
        control or default_control,
        path,
        config or DEFAULT_CONFIG,
        emit_paths=True,
    )
