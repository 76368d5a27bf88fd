"""
betwixt core: the marker-based substring and interval engine.

Index scanner -> interval builder -> {extraction, mutation, splitter}.
"""

from betwixt.core.extraction import (
    find_all_between,
    find_all_between_spans,
    substring_after,
    substring_after_last,
    take_between,
    take_between_after_mark,
    take_between_multiple,
)
from betwixt.core.intervals import (
    Interval,
    contains_point,
    pair,
    pair_distinct,
    pair_symmetric,
)
from betwixt.core.mutation import (
    OccurrenceSelector,
    ReplacementSpec,
    apply_replacement,
    multiple_remove,
    remove_between,
    replace_first,
    replace_first_and_last_only,
    replace_last,
    replace_word,
)
from betwixt.core.scanner import (
    Occurrence,
    index_of,
    last_index_of,
    scan,
    scan_any,
)
from betwixt.core.splitter import (
    DEFAULT_SPLIT_OPTIONS,
    SplitOptions,
    SplitState,
    exclusion_zones,
    split,
)

__all__ = [
    # Scanner
    "Occurrence",
    "scan",
    "scan_any",
    "index_of",
    "last_index_of",
    # Intervals
    "Interval",
    "pair",
    "pair_symmetric",
    "pair_distinct",
    "contains_point",
    # Extraction
    "take_between",
    "take_between_after_mark",
    "take_between_multiple",
    "find_all_between",
    "find_all_between_spans",
    "substring_after",
    "substring_after_last",
    # Mutation
    "OccurrenceSelector",
    "ReplacementSpec",
    "apply_replacement",
    "remove_between",
    "replace_first",
    "replace_last",
    "replace_first_and_last_only",
    "replace_word",
    "multiple_remove",
    # Splitter
    "SplitOptions",
    "SplitState",
    "DEFAULT_SPLIT_OPTIONS",
    "exclusion_zones",
    "split",
]
