"""Custom exception hierarchy for the wend traversal engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from wend.conditions import Condition


class WendError(Exception):
    """Base exception for all wend errors."""


class InvalidArgumentError(WendError, ValueError):
    """Raised on programmer error: a bad bound, an unordered path where order is required."""


class GraphSealedError(WendError):
    """Raised when a sealed (published) graph is mutated."""


class ElementNotFoundError(WendError, KeyError):
    """Raised when a vertex id is not present in the graph."""


class ConditionError(WendError):
    """Raised when a recoverable condition is left unhandled.

    Attributes:
        condition: The structured payload describing what happened.
    """

    def __init__(self, condition: Condition) -> None:
        super().__init__(condition.message)
        self.condition = condition

    @property
    def value(self) -> Any:
        """The element that triggered the condition."""
        return self.condition.value


class CycleError(ConditionError):
    """Raised by ``fail_on_repeat`` when a repeat is seen and no handler resolves it."""


class UnknownDirectionError(ConditionError):
    """Raised when a handler explicitly refuses to guess an edge's traversal direction."""


class NoResultsError(WendError):
    """Raised by the ``raise_no_results`` failsafe policy."""

    def __init__(self, message: str, *, no_results: int) -> None:
        super().__init__(message)
        self.no_results = no_results
