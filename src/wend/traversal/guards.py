"""Cycle guards: stop or report a route once an element comes around again."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from wend.conditions import CycleCondition, resolve
from wend.traversal.route import ensure_seq

if TYPE_CHECKING:
    from collections.abc import Iterator

    from wend.conditions import Handler

logger = logging.getLogger(__name__)


class RepeatGuard:
    """Iterator that passes a route through until its first repeated element.

    The guard stops *before* the repeat: the duplicate and everything after it
    are dropped.  Once iteration has finished, :attr:`truncated` tells a
    detected repeat apart from the source simply running out, and
    :attr:`repeated` holds the offending element.

    Args:
        route: The route to guard.
        on_cycle: Optional handler for a :class:`~wend.conditions.CycleCondition`.
            Without one (and with *strict* unset) a repeat truncates silently.
        strict: Make an unresolved repeat fatal (raise
            :class:`~wend.exceptions.CycleError`) instead of truncating.
    """

    __slots__ = ("_handler", "_position", "_seen", "_source", "_strict", "_truncated", "repeated")

    def __init__(self, route: Any, on_cycle: Handler | None = None, *, strict: bool = False) -> None:
        self._source = iter(ensure_seq(route))
        self._seen: set[Any] = set()
        self._handler = on_cycle
        self._strict = strict
        self._position = 0
        self._truncated = False
        self.repeated: Any = None

    @property
    def truncated(self) -> bool:
        """``True`` once the guard has stopped the route at a repeat."""
        return self._truncated

    def __iter__(self) -> RepeatGuard:
        return self

    def __next__(self) -> Any:
        if self.truncated:
            raise StopIteration
        for e in self._source:
            position = self._position
            self._position += 1
            if e not in self._seen:
                self._seen.add(e)
                return e
            if self._continue_past(e, position):
                return e
            self.repeated = e
            self._truncated = True
            logger.debug("Route truncated at repeated element %r (position %d)", e, position)
            raise StopIteration
        raise StopIteration

    def _continue_past(self, e: Any, position: int) -> bool:
        condition = CycleCondition(
            e,
            f"Element {e!r} repeated at position {position}",
            {"position": position},
        )
        if self._strict:
            return bool(resolve(condition, self._handler))
        return bool(resolve(condition, self._handler, default=False))


def truncate_on_repeat(r: Any) -> RepeatGuard:
    """Pass the route through until the first repeated element, then stop.

    The repeat and everything after it is dropped.  Check
    ``guard.truncated`` after consuming to see whether that happened.
    """
    return RepeatGuard(r)


def fail_on_repeat(r: Any, on_cycle: Handler | None = None) -> Iterator[Any]:
    """Like :func:`truncate_on_repeat`, but a repeat is a cycle condition.

    *on_cycle* receives a :class:`~wend.conditions.CycleCondition` and decides:
    ``False`` truncates the route there, ``True`` yields the repeat and carries
    on.  Unhandled, the repeat raises :class:`~wend.exceptions.CycleError`.
    """
    return RepeatGuard(r, on_cycle, strict=True)
