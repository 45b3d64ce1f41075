"""Wend: lazy, composable graph traversals.

Path tracking, Gremlin-style steps and filters, and a control-driven descent
engine with cycle protection, all built from ordinary function composition.
"""

__version__ = "0.1.0"

from wend.conditions import (
    Condition,
    CycleCondition,
    UnknownDirectionCondition,
    always,
    chain_handlers,
    refuse,
    resolve,
)
from wend.descent import (
    DEFAULT_CONFIG,
    Instruction,
    TraversalConfig,
    all_,
    all_cycle_paths,
    all_cycles,
    all_paths,
    all_paths_with_cycles,
    all_with_cycles,
    cycle,
    deepest,
    deepest_paths,
    descend,
    descents,
    no_cycle,
)
from wend.exceptions import (
    CycleError,
    ElementNotFoundError,
    GraphSealedError,
    InvalidArgumentError,
    NoResultsError,
    UnknownDirectionError,
    WendError,
)
from wend.graph import Edge, Element, Graph, KindId, RustworkxGraph, Vertex, k, kind
from wend.path import (
    PathEdge,
    PathGraph,
    PathVertex,
    find_repeated_edge,
    is_path_tracked,
    path,
    reverse_path,
    strip_all_path_layers,
    strip_one_path_layer,
    with_path,
)
from wend.traversal import (
    both,
    both_e,
    branch,
    fail_on_repeat,
    in_,
    in_e,
    in_v,
    lookahead,
    merge_exhaustive,
    merge_round_robin,
    neg_lookahead,
    out,
    out_e,
    out_v,
    pipeline,
    subgraph,
    truncate_on_repeat,
)

__all__ = [
    "DEFAULT_CONFIG",
    "Condition",
    "CycleCondition",
    "CycleError",
    "Edge",
    "Element",
    "ElementNotFoundError",
    "Graph",
    "GraphSealedError",
    "Instruction",
    "InvalidArgumentError",
    "KindId",
    "NoResultsError",
    "PathEdge",
    "PathGraph",
    "PathVertex",
    "RustworkxGraph",
    "TraversalConfig",
    "UnknownDirectionCondition",
    "UnknownDirectionError",
    "Vertex",
    "WendError",
    "__version__",
    "all_",
    "all_cycle_paths",
    "all_cycles",
    "all_paths",
    "all_paths_with_cycles",
    "all_with_cycles",
    "always",
    "both",
    "both_e",
    "branch",
    "chain_handlers",
    "cycle",
    "deepest",
    "deepest_paths",
    "descend",
    "descents",
    "fail_on_repeat",
    "find_repeated_edge",
    "in_",
    "in_e",
    "in_v",
    "is_path_tracked",
    "k",
    "kind",
    "lookahead",
    "merge_exhaustive",
    "merge_round_robin",
    "neg_lookahead",
    "no_cycle",
    "out",
    "out_e",
    "out_v",
    "path",
    "pipeline",
    "refuse",
    "resolve",
    "reverse_path",
    "strip_all_path_layers",
    "strip_one_path_layer",
    "subgraph",
    "truncate_on_repeat",
    "with_path",
]
