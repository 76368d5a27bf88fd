"""
Mutation engine.

Builds new strings with parts removed or replaced: patterns removed inside
a marker-delimited zone only, first/last occurrence replacement, whole-word
replacement and sequential multi-pattern removal.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

from betwixt.core.intervals import pair
from betwixt.core.scanner import index_of, last_index_of
from betwixt.utils.errors import ArgumentError
from betwixt.utils.guards import as_patterns, require_marker, require_text

logger = logging.getLogger(__name__)


class OccurrenceSelector(Enum):
    """Which occurrences of a search string a replacement applies to."""

    FIRST = auto()
    LAST = auto()
    FIRST_AND_LAST = auto()
    ALL = auto()


@dataclass(frozen=True, slots=True)
class ReplacementSpec:
    """
    How a replacement transforms matched occurrences.

    Attributes:
        selector: Occurrences to replace
        replacement: Text inserted in place of each selected occurrence
    """

    selector: OccurrenceSelector
    replacement: str = ""


def _splice(text: str, position: int, length: int, replacement: str) -> str:
    return text[:position] + replacement + text[position + length:]


def apply_replacement(text: str, occurrence: str, spec: ReplacementSpec) -> str:
    """
    Replace the occurrences of ``occurrence`` selected by ``spec``.

    Positions are computed on the input text, so a replacement that contains
    the search string is never matched again. When the first and last
    occurrences coincide or overlap, only the first one is replaced.

    Raises:
        ArgumentError: If ``text`` or ``occurrence`` is empty
    """
    require_text(text, "text")
    require_text(occurrence, "occurrence")
    replacement = spec.replacement or ""

    if spec.selector is OccurrenceSelector.ALL:
        return text.replace(occurrence, replacement)

    first = index_of(text, occurrence)
    if first == -1:
        return text

    if spec.selector is OccurrenceSelector.FIRST:
        return _splice(text, first, len(occurrence), replacement)

    last = last_index_of(text, occurrence)
    if spec.selector is OccurrenceSelector.LAST:
        return _splice(text, last, len(occurrence), replacement)

    # FIRST_AND_LAST: splice the rightmost position first so `first` stays valid
    if last >= first + len(occurrence):
        text = _splice(text, last, len(occurrence), replacement)
    return _splice(text, first, len(occurrence), replacement)


def replace_first(text: str, occurrence: str, replacement: str = "") -> str:
    """
    Replace the first occurrence of ``occurrence``.

    Example:
        >>> replace_first("let sleeping dogs lie", "t", "KUZ")
        'leKUZ sleeping dogs lie'
    """
    return apply_replacement(text, occurrence, ReplacementSpec(OccurrenceSelector.FIRST, replacement))


def replace_last(text: str, occurrence: str, replacement: str = "") -> str:
    """Replace the last occurrence of ``occurrence``."""
    return apply_replacement(text, occurrence, ReplacementSpec(OccurrenceSelector.LAST, replacement))


def replace_first_and_last_only(text: str, occurrence: str, replacement: str = "") -> str:
    """
    Replace the first and the last occurrence, leaving the middle ones alone.

    Example:
        >>> replace_first_and_last_only('She said "yeah"', '"')
        'She said yeah'
    """
    return apply_replacement(
        text, occurrence, ReplacementSpec(OccurrenceSelector.FIRST_AND_LAST, replacement)
    )


def remove_between(
    text: str,
    to_remove: str | Iterable[str] | None,
    open_marker: str,
    close_marker: str,
) -> str:
    """
    Remove patterns, but only inside the first marker-delimited zone.

    The zone includes both markers. Text before and after the zone is left
    untouched:

        >>> remove_between("a b {c, d} e", " ", "{", "}")
        'a b {c,d} e'

    Args:
        text: Text to process
        to_remove: One pattern or an iterable of patterns, removed in order
        open_marker: Marker opening the zone
        close_marker: Marker closing the zone

    Returns:
        The new text, or ``text`` unchanged when the zone is not found

    Raises:
        ArgumentError: If ``text`` is None or a marker is empty
        OrderViolation: If the closing marker precedes the opening marker
    """
    if text is None:
        raise ArgumentError("String cannot be null", "text")
    require_marker(open_marker, "open_marker")
    require_marker(close_marker, "close_marker")

    if to_remove is None:
        return text

    interval = pair(text, open_marker, close_marker)
    if interval is None:
        logger.debug("remove_between: no %r...%r zone found", open_marker, close_marker)
        return text

    zone_start = interval.start - len(open_marker)
    zone_end = interval.end + len(close_marker)
    zone = text[zone_start:zone_end]
    for pattern in as_patterns(to_remove):
        if pattern:
            zone = zone.replace(pattern, "")

    return text[:zone_start] + zone + text[zone_end:]


def replace_word(text: str, previous_word: str, new_word: str) -> str:
    """
    Replace ``previous_word`` where it stands as a whole word.

    A word boundary is whitespace or either end of the text, so occurrences
    embedded in longer words stay untouched:

        >>> replace_word("the islanders were insane", "island", "village")
        'the islanders were insane'
    """
    if text is None:
        raise ArgumentError("String cannot be null", "text")
    require_marker(previous_word, "previous_word")
    if new_word is None:
        raise ArgumentError("String instance cannot be null", "new_word")

    pattern = re.compile(rf"(?<!\S){re.escape(previous_word)}(?!\S)")
    return pattern.sub(lambda _match: new_word, text)


def multiple_remove(text: str, patterns: Iterable[str] | None) -> str:
    """
    Remove every occurrence of each pattern, one pattern after the other.

    Order matters when patterns overlap: removing ``"ab"`` then ``"b"`` is
    not the same as removing ``"b"`` then ``"ab"``.
    """
    require_text(text, "text")
    for pattern in as_patterns(patterns):
        if pattern:
            text = text.replace(pattern, "")
    return text
