"""Recoverable conditions: structured payloads plus caller-supplied handlers.

A traversal that hits a recoverable situation (a repeated element, an edge whose
traversal direction was never recorded) builds a :class:`Condition` and passes it
to :func:`resolve`.  The caller decides what happens next by supplying a handler:

* a handler returns a decision (usually ``True`` to continue, ``False`` to stop);
* a handler may return ``None`` to decline, deferring to the next handler out
  (see :func:`chain_handlers`) and finally to the condition's default;
* a condition with no default and no resolving handler is fatal and raises the
  condition's error type.

Nothing here is global: handlers are ordinary arguments.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

from wend.exceptions import ConditionError, CycleError, UnknownDirectionError

if TYPE_CHECKING:
    from collections.abc import Callable

    type Handler = Callable[[Condition], Any]


_NO_DEFAULT = object()


@dataclass(frozen=True, slots=True)
class Condition:
    """A recoverable situation raised during traversal.

    Attributes:
        value: The element that triggered the condition.
        message: Human-readable description.
        data: Extra structured context (positions, counts).
    """

    kind: ClassVar[str] = "condition"
    error_type: ClassVar[type[ConditionError]] = ConditionError

    value: Any
    message: str = ""
    data: dict[str, Any] = field(default_factory=dict, hash=False, compare=False)

    def error(self) -> ConditionError:
        """Build the fatal error used when nothing resolves this condition."""
        return self.error_type(self)


@dataclass(frozen=True, slots=True)
class CycleCondition(Condition):
    """An element was seen a second time in a guarded route."""

    kind: ClassVar[str] = "on_cycle"
    error_type: ClassVar[type[ConditionError]] = CycleError


@dataclass(frozen=True, slots=True)
class UnknownDirectionCondition(Condition):
    """An edge carries no record of the direction it was reached from."""

    kind: ClassVar[str] = "traversal_direction/unknown"
    error_type: ClassVar[type[ConditionError]] = UnknownDirectionError


def resolve(
    condition: Condition,
    handler: Handler | None = None,
    *,
    default: Any = _NO_DEFAULT,
) -> Any:
    """Resolve *condition* through *handler*, then *default*, else raise."""
    if handler is not None:
        decision = handler(condition)
        if decision is not None:
            return decision
    if default is not _NO_DEFAULT:
        return default
    raise condition.error()


def chain_handlers(*handlers: Handler) -> Handler:
    """Compose handlers innermost-first; the first non-``None`` decision wins."""

    def chained(condition: Condition) -> Any:
        for handler in handlers:
            decision = handler(condition)
            if decision is not None:
                return decision
        return None

    return chained


def refuse(condition: Condition) -> Any:
    """Handler that makes any condition fatal, even one with a default."""
    raise condition.error()


def always(decision: bool) -> Handler:
    """Handler that resolves every condition with the same *decision*."""

    def handler(condition: Condition) -> bool:
        return decision

    return handler
