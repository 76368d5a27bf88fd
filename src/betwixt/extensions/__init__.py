"""
betwixt extensions.

Helpers around the marker engine: null-safe string helpers, object
expansion and interpolation, and sequence windowing.
"""

from betwixt.extensions.objects import (
    PropertyReader,
    are_all_null,
    interpolate,
    public_properties,
    to_string_expanded,
)
from betwixt.extensions.sequences import (
    contains_any_of,
    element_at_from_last,
    first_match_of,
    from_index,
    get_keys,
    has_elements,
    insert_multiple,
    is_first,
    is_in,
    is_null_or_empty,
    join_together,
    join_together_between,
    penultimate,
    take_after,
    take_range,
    to_index,
)
from betwixt.extensions.strings import (
    append,
    contains_any,
    decompose,
    get_first_occurrence,
    parse_to_string_safe,
    prepend,
    remove_diacritics,
    remove_from_end,
    remove_last,
    skip,
    substring_safe,
    take,
    take_from,
    to_string_safe,
    truncate,
)

__all__ = [
    # Strings
    "to_string_safe",
    "substring_safe",
    "prepend",
    "append",
    "remove_from_end",
    "remove_last",
    "take",
    "skip",
    "truncate",
    "take_from",
    "contains_any",
    "get_first_occurrence",
    "decompose",
    "remove_diacritics",
    "parse_to_string_safe",
    # Objects
    "PropertyReader",
    "public_properties",
    "to_string_expanded",
    "interpolate",
    "are_all_null",
    # Sequences
    "take_range",
    "from_index",
    "to_index",
    "contains_any_of",
    "first_match_of",
    "is_in",
    "is_null_or_empty",
    "has_elements",
    "is_first",
    "penultimate",
    "element_at_from_last",
    "take_after",
    "get_keys",
    "insert_multiple",
    "join_together",
    "join_together_between",
]
