"""Traversal combinators: steps, filters, lookahead, branch/merge and cycle guards."""

from wend.traversal.filters import (
    has_property,
    is_,
    isnt,
    lookahead,
    lookahead_element,
    matcher,
    neg_lookahead,
    none_of,
    not_id,
    of_kind,
    one_of,
    with_,
    with_id,
    with_label,
)
from wend.traversal.guards import RepeatGuard, fail_on_repeat, truncate_on_repeat
from wend.traversal.merge import (
    Chunks,
    branch,
    chunked,
    keyed_branch,
    merge_exhaustive,
    merge_round_robin,
)
from wend.traversal.route import (
    context,
    distinct_by,
    distinct_in,
    documents,
    drop_take,
    ensure_seq,
    fast_sort_by,
    gather,
    group_by_count,
    group_count,
    index_by,
    index_by_multi,
    into_set,
    iterate,
    join,
    make_pairs,
    pipeline,
    pluck,
    section,
    sorted_group_by_count,
    sorted_group_count,
    sorted_section,
    spread,
    subgraph,
    take_drop,
)
from wend.traversal.steps import (
    both,
    both_e,
    both_e_groups,
    both_groups,
    both_v,
    in_,
    in_e,
    in_e_groups,
    in_groups,
    in_sorted,
    in_v,
    other_v,
    other_vertex,
    out,
    out_e,
    out_e_groups,
    out_groups,
    out_sorted,
    out_v,
    same_v,
    same_vertex,
    traversed_forward,
    traversed_reverse,
)

__all__ = [
    "Chunks",
    "RepeatGuard",
    "both",
    "both_e",
    "both_e_groups",
    "both_groups",
    "both_v",
    "branch",
    "chunked",
    "context",
    "distinct_by",
    "distinct_in",
    "documents",
    "drop_take",
    "ensure_seq",
    "fail_on_repeat",
    "fast_sort_by",
    "gather",
    "group_by_count",
    "group_count",
    "has_property",
    "in_",
    "in_e",
    "in_e_groups",
    "in_groups",
    "in_sorted",
    "in_v",
    "index_by",
    "index_by_multi",
    "into_set",
    "is_",
    "isnt",
    "iterate",
    "join",
    "keyed_branch",
    "lookahead",
    "lookahead_element",
    "make_pairs",
    "matcher",
    "merge_exhaustive",
    "merge_round_robin",
    "neg_lookahead",
    "none_of",
    "not_id",
    "of_kind",
    "one_of",
    "other_v",
    "other_vertex",
    "out",
    "out_e",
    "out_e_groups",
    "out_groups",
    "out_sorted",
    "out_v",
    "pipeline",
    "pluck",
    "same_v",
    "same_vertex",
    "section",
    "sorted_group_by_count",
    "sorted_group_count",
    "sorted_section",
    "spread",
    "subgraph",
    "take_drop",
    "traversed_forward",
    "traversed_reverse",
    "truncate_on_repeat",
    "with_",
    "with_id",
    "with_label",
]
