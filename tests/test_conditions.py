"""Tests for recoverable conditions and the exception hierarchy."""

from __future__ import annotations

import dataclasses

import pytest

from wend.conditions import (
    Condition,
    CycleCondition,
    UnknownDirectionCondition,
    always,
    chain_handlers,
    refuse,
    resolve,
)
from wend.exceptions import (
    ConditionError,
    CycleError,
    ElementNotFoundError,
    GraphSealedError,
    InvalidArgumentError,
    NoResultsError,
    UnknownDirectionError,
    WendError,
)

# ======================================================================
# Exceptions
# ======================================================================


class TestExceptionHierarchy:
    @pytest.mark.parametrize(
        "exc",
        [
            InvalidArgumentError,
            GraphSealedError,
            ElementNotFoundError,
            ConditionError,
            CycleError,
            UnknownDirectionError,
            NoResultsError,
        ],
    )
    def test_rooted_at_wend_error(self, exc: type) -> None:
        assert issubclass(exc, WendError)

    def test_invalid_argument_is_value_error(self) -> None:
        assert issubclass(InvalidArgumentError, ValueError)

    def test_not_found_is_key_error(self) -> None:
        assert issubclass(ElementNotFoundError, KeyError)

    def test_condition_errors(self) -> None:
        assert issubclass(CycleError, ConditionError)
        assert issubclass(UnknownDirectionError, ConditionError)

    def test_no_results_count(self) -> None:
        err = NoResultsError("nothing", no_results=42)
        assert err.no_results == 42
        assert str(err) == "nothing"


# ======================================================================
# Condition payloads
# ======================================================================


class TestCondition:
    def test_fields(self) -> None:
        c = CycleCondition("x", "seen twice", {"position": 3})
        assert c.value == "x"
        assert c.message == "seen twice"
        assert c.data == {"position": 3}

    def test_frozen(self) -> None:
        c = CycleCondition("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.value = "y"  # type: ignore[misc]

    def test_kinds(self) -> None:
        assert Condition.kind == "condition"
        assert CycleCondition.kind == "on_cycle"
        assert UnknownDirectionCondition.kind == "traversal_direction/unknown"

    def test_error_types(self) -> None:
        assert isinstance(CycleCondition("x").error(), CycleError)
        assert isinstance(UnknownDirectionCondition("x").error(), UnknownDirectionError)
        assert type(Condition("x").error()) is ConditionError

    def test_error_carries_condition(self) -> None:
        c = CycleCondition("x", "boom")
        err = c.error()
        assert err.condition is c
        assert err.value == "x"
        assert str(err) == "boom"

    def test_data_not_compared(self) -> None:
        assert CycleCondition("x", "m", {"a": 1}) == CycleCondition("x", "m", {"a": 2})


# ======================================================================
# resolve
# ======================================================================


class TestResolve:
    def test_handler_decides(self) -> None:
        assert resolve(CycleCondition("x"), always(False), default=True) is False

    def test_declined_falls_back_to_default(self) -> None:
        assert resolve(CycleCondition("x"), lambda c: None, default="fallback") == "fallback"

    def test_no_handler_uses_default(self) -> None:
        assert resolve(CycleCondition("x"), default=None) is None

    def test_no_default_is_fatal(self) -> None:
        with pytest.raises(CycleError):
            resolve(CycleCondition("x"))

    def test_declined_without_default_is_fatal(self) -> None:
        with pytest.raises(UnknownDirectionError):
            resolve(UnknownDirectionCondition("e"), lambda c: None)

    def test_refuse_overrides_default(self) -> None:
        with pytest.raises(CycleError):
            resolve(CycleCondition("x"), refuse, default=True)

    def test_handler_exceptions_propagate(self) -> None:
        def broken(condition):
            raise RuntimeError("handler failed")

        with pytest.raises(RuntimeError, match="handler failed"):
            resolve(CycleCondition("x"), broken, default=True)


# ======================================================================
# chain_handlers
# ======================================================================


class TestChainHandlers:
    def test_first_decision_wins(self) -> None:
        handler = chain_handlers(always(False), always(True))
        assert handler(CycleCondition("x")) is False

    def test_declines_pass_outward(self) -> None:
        calls: list[str] = []

        def inner(condition):
            calls.append("inner")

        def outer(condition):
            calls.append("outer")
            return True

        assert chain_handlers(inner, outer)(CycleCondition("x")) is True
        assert calls == ["inner", "outer"]

    def test_all_decline(self) -> None:
        handler = chain_handlers(lambda c: None, lambda c: None)
        assert handler(CycleCondition("x")) is None
        assert resolve(CycleCondition("x"), handler, default=7) == 7

    def test_dispatch_on_kind(self) -> None:
        def cycles_only(condition):
            return False if condition.kind == "on_cycle" else None

        handler = chain_handlers(cycles_only, always(True))
        assert handler(CycleCondition("x")) is False
        assert handler(UnknownDirectionCondition("e")) is True
