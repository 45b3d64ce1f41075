"""Descent engine: control-driven recursive walks and the cycle-safe traversals built on them."""

from wend.descent.build import (
    all_,
    all_cycle_paths,
    all_cycles,
    all_paths,
    all_paths_with_cycles,
    all_with_cycles,
    cycle,
    deepest,
    deepest_paths,
    no_cycle,
)
from wend.descent.config import (
    DEFAULT_CONFIG,
    FailsafeAction,
    FailsafeContext,
    Resolution,
    SearchCheckpoint,
    TraversalConfig,
    continue_no_results,
    cut_no_results,
    raise_no_results,
    value_for_no_results,
)
from wend.descent.control import (
    CHAIN,
    CONTINUE,
    CONTROL_RETURN_VALUES,
    CUT,
    EMIT,
    EMIT_AND_CHAIN,
    EMIT_AND_CONTINUE,
    EMIT_AND_CUT,
    IGNORE,
    Instruction,
    coerce_instruction,
    reset_path,
)
from wend.descent.engine import OrderedPath, descend, descents

__all__ = [
    "CHAIN",
    "CONTINUE",
    "CONTROL_RETURN_VALUES",
    "CUT",
    "DEFAULT_CONFIG",
    "EMIT",
    "EMIT_AND_CHAIN",
    "EMIT_AND_CONTINUE",
    "EMIT_AND_CUT",
    "IGNORE",
    "FailsafeAction",
    "FailsafeContext",
    "Instruction",
    "OrderedPath",
    "Resolution",
    "SearchCheckpoint",
    "TraversalConfig",
    "all_",
    "all_cycle_paths",
    "all_cycles",
    "all_paths",
    "all_paths_with_cycles",
    "all_with_cycles",
    "coerce_instruction",
    "continue_no_results",
    "cut_no_results",
    "cycle",
    "deepest",
    "deepest_paths",
    "descend",
    "descents",
    "no_cycle",
    "raise_no_results",
    "reset_path",
    "value_for_no_results",
]
