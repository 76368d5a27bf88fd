"""
betwixt - marker-based string and sequence primitives.

Extract, remove, replace and split text by the markers around it:

    >>> from betwixt import take_between, split
    >>> take_between("a band like {amduscia}", "{", "}")
    'amduscia'
    >>> split("hello {a b} world", " ", [("{", "}")])
    ['hello', '{a b}', 'world']
"""

from betwixt.core import (
    DEFAULT_SPLIT_OPTIONS,
    Interval,
    Occurrence,
    OccurrenceSelector,
    ReplacementSpec,
    SplitOptions,
    apply_replacement,
    contains_point,
    find_all_between,
    multiple_remove,
    pair_distinct,
    pair_symmetric,
    remove_between,
    replace_first,
    replace_first_and_last_only,
    replace_last,
    replace_word,
    scan,
    scan_any,
    split,
    substring_after,
    substring_after_last,
    take_between,
    take_between_after_mark,
    take_between_multiple,
)
from betwixt.utils.errors import ArgumentError, BetwixtError, OrderViolation

__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Errors
    "BetwixtError",
    "ArgumentError",
    "OrderViolation",
    # Value types
    "Occurrence",
    "Interval",
    "OccurrenceSelector",
    "ReplacementSpec",
    "SplitOptions",
    "DEFAULT_SPLIT_OPTIONS",
    # Scanning and intervals
    "scan",
    "scan_any",
    "pair_symmetric",
    "pair_distinct",
    "contains_point",
    # Extraction
    "take_between",
    "take_between_after_mark",
    "take_between_multiple",
    "find_all_between",
    "substring_after",
    "substring_after_last",
    # Mutation
    "remove_between",
    "apply_replacement",
    "replace_first",
    "replace_last",
    "replace_first_and_last_only",
    "replace_word",
    "multiple_remove",
    # Splitting
    "split",
]
