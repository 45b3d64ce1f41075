"""Traversal configuration and the hidden-cycle failsafe policies.

A :class:`TraversalConfig` is an ordinary value passed with ``config=`` to one
traversal call.  Nothing is read from globals or the environment, so traversals
started from different call sites never influence each other.

The failsafe watches how many descent steps have happened since the last
emitted result.  Once that count reaches ``no_result_ceiling``, and again every
``no_result_interval`` steps after it, the engine asks ``no_result_policy``
what to do by handing it a :class:`FailsafeContext`.
"""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from wend.exceptions import InvalidArgumentError, NoResultsError

if TYPE_CHECKING:
    from collections.abc import Callable

    type FailsafePolicy = Callable[[FailsafeContext], Resolution]


# ------------------------------------------------------------------
# Failsafe context
# ------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SearchCheckpoint:
    """Where the search was when the failsafe fired.

    Attributes:
        path: The path accumulated above *element*.
        element: The element about to be descended into.
        depth: Nesting depth of *element* (route elements are depth 0).
    """

    path: Any
    element: Any
    depth: int


class FailsafeAction(enum.Enum):
    """What the engine does after consulting the policy."""

    DESCEND = "descend"
    ADVANCE = "advance"
    CUT = "cut"
    SUBSTITUTE = "substitute"


@dataclass(frozen=True, slots=True)
class Resolution:
    """A policy's answer: an action, plus the result to substitute when there is one."""

    action: FailsafeAction
    value: Any = None


@dataclass(frozen=True, slots=True)
class FailsafeContext:
    """Everything a failsafe policy gets to look at, plus its continuations.

    Attributes:
        checkpoint: Current search state.
        no_results: Descent steps taken since the last emitted result.
    """

    checkpoint: SearchCheckpoint
    no_results: int

    def descend(self) -> Resolution:
        """Keep searching below the current element."""
        return Resolution(FailsafeAction.DESCEND)

    def advance(self) -> Resolution:
        """Abandon the current element's subtree and move to its next sibling."""
        return Resolution(FailsafeAction.ADVANCE)

    def cut(self) -> Resolution:
        """Abandon the current element's subtree and its remaining siblings."""
        return Resolution(FailsafeAction.CUT)

    def substitute(self, value: Any) -> Resolution:
        """Stop the traversal, yielding *value* as its final result."""
        return Resolution(FailsafeAction.SUBSTITUTE, value)


# ------------------------------------------------------------------
# Built-in policies
# ------------------------------------------------------------------


def cut_no_results(context: FailsafeContext) -> Resolution:
    """Abandon the fruitless branch, as if the control had returned ``cut``."""
    return context.cut()


def continue_no_results(context: FailsafeContext) -> Resolution:
    """Ignore the failsafe and keep searching."""
    return context.descend()


def value_for_no_results(value: Any) -> FailsafePolicy:
    """Policy that ends a fruitless search with *value* as its result."""

    def policy(context: FailsafeContext) -> Resolution:
        return context.substitute(value)

    return policy


def raise_no_results(context: FailsafeContext) -> Resolution:
    """Treat a fruitless search as fatal."""
    checkpoint = context.checkpoint
    msg = (
        f"No results after {context.no_results} descent steps "
        f"(at {checkpoint.element!r}, depth {checkpoint.depth})"
    )
    raise NoResultsError(msg, no_results=context.no_results)


# ------------------------------------------------------------------
# Configuration
# ------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TraversalConfig:
    """Per-invocation tuning for the descent engine.

    Attributes:
        no_result_ceiling: Fruitless descent steps before the failsafe first fires.
        no_result_interval: Steps between later failsafe checks.
        no_result_policy: Decides what happens when the failsafe fires.
        max_depth: Deepest nesting level visited; elements at that depth are
            not expanded.  ``None`` is unbounded.  Route elements are at
            depth 0, so ``max_depth=0`` visits the route without descending.
    """

    no_result_ceiling: int = 10_000_000
    no_result_interval: int = 10_000
    no_result_policy: FailsafePolicy = cut_no_results
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.no_result_ceiling < 1:
            msg = f"no_result_ceiling must be positive, got {self.no_result_ceiling}"
            raise InvalidArgumentError(msg)
        if self.no_result_interval < 1:
            msg = f"no_result_interval must be positive, got {self.no_result_interval}"
            raise InvalidArgumentError(msg)
        if self.max_depth is not None and self.max_depth < 0:
            msg = f"max_depth must not be negative, got {self.max_depth}"
            raise InvalidArgumentError(msg)
        if not callable(self.no_result_policy):
            msg = f"no_result_policy must be callable, got {self.no_result_policy!r}"
            raise InvalidArgumentError(msg)

    def evolve(self, **changes: Any) -> TraversalConfig:
        """Return a copy with *changes* applied (validated again)."""
        return dataclasses.replace(self, **changes)

    def failsafe_due(self, no_results: int) -> bool:
        """Whether the failsafe should fire after *no_results* fruitless steps."""
        if no_results < self.no_result_ceiling:
            return False
        return (no_results - self.no_result_ceiling) % self.no_result_interval == 0


DEFAULT_CONFIG = TraversalConfig()
