"""
Exclusion-aware splitter.

Splits text on a set of separators, except inside exclusion zones: regions
delimited by marker pairs such as ``{...}`` or ``"..."`` are kept whole.

    >>> split("a {b c} d", " ", [("{", "}")])
    ['a', '{b c}', 'd']

The walk over separator occurrences is a two-state machine:

- EMITTING: a separator outside every zone closes the current segment.
- INSIDE_ZONE: entered on the first separator found inside a zone. The zone
  stays verbatim in the current segment and the remaining separators inside
  it are ignored; the machine goes back to EMITTING once the scan passes the
  end of the zone.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from betwixt.core.extraction import find_all_between_spans
from betwixt.core.intervals import Interval, contains_point
from betwixt.core.scanner import Occurrence, scan_any
from betwixt.utils.errors import ArgumentError
from betwixt.utils.guards import as_patterns, require_marker

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SplitOptions:
    """
    Post-processing applied to the segments.

    Attributes:
        remove_empty: Drop empty segments (whitespace-only ones too when trimming)
        trim: Strip surrounding whitespace from each segment
    """

    remove_empty: bool = False
    trim: bool = False


DEFAULT_SPLIT_OPTIONS = SplitOptions()


class SplitState(Enum):
    """States of the splitter walk."""

    EMITTING = auto()
    INSIDE_ZONE = auto()


def exclusion_zones(
    text: str,
    exclusion_pairs: Iterable[tuple[str, str]],
) -> list[Interval]:
    """Compute the zones, markers included, for every exclusion pair."""
    zones: list[Interval] = []
    for open_marker, close_marker in exclusion_pairs:
        require_marker(open_marker, "exclusion_pairs")
        require_marker(close_marker, "exclusion_pairs")
        zones.extend(find_all_between_spans(text, open_marker, close_marker))
    return zones


def _ordered(occurrences: list[Occurrence]) -> list[Occurrence]:
    # Longest separator first when two start at the same position
    return sorted(occurrences, key=lambda occ: (occ.position, -len(occ.marker)))


class _SplitWalk:
    """Single-use state machine producing the raw segments of one split call."""

    def __init__(self, text: str, zones: list[Interval]) -> None:
        self.text = text
        self.zones = zones
        self.state = SplitState.EMITTING
        self.zone: Optional[Interval] = None
        self.cursor = 0
        self.segments: list[str] = []

    def feed(self, occurrence: Occurrence) -> None:
        if occurrence.position < self.cursor:
            return  # overlaps a separator that was already consumed

        if self.state is SplitState.INSIDE_ZONE:
            if self.zone.contains(occurrence.position, half_open=True):
                return
            self._leave_zone()

        inside, zone = contains_point(occurrence.position, self.zones, half_open=True)
        if inside:
            self._enter_zone(zone)
            return

        self.segments.append(self.text[self.cursor:occurrence.position])
        self.cursor = occurrence.end

    def finish(self) -> list[str]:
        if self.state is SplitState.INSIDE_ZONE:
            self._leave_zone()
        self.segments.append(self.text[self.cursor:])
        return self.segments

    def _enter_zone(self, zone: Interval) -> None:
        logger.debug("split: entering exclusion zone [%d, %d)", zone.start, zone.end)
        self.state = SplitState.INSIDE_ZONE
        self.zone = zone

    def _leave_zone(self) -> None:
        logger.debug("split: leaving exclusion zone [%d, %d)", self.zone.start, self.zone.end)
        self.state = SplitState.EMITTING
        self.zone = None


def split(
    text: str | None,
    separators: str | Iterable[str],
    exclusion_pairs: Optional[Iterable[tuple[str, str]]] = None,
    options: Optional[SplitOptions] = None,
) -> list[str]:
    """
    Split ``text`` on ``separators`` without cutting through exclusion zones.

    Args:
        text: Text to split; ``None`` or empty gives an empty list
        separators: One separator or an iterable of separators
        exclusion_pairs: ``(open, close)`` marker pairs delimiting zones that
            must not be split
        options: Trimming and empty-segment handling

    Returns:
        The segments, the remainder after the last separator always included
        (unless dropped by ``remove_empty``)

    Raises:
        ArgumentError: If no separator is given, or a separator or exclusion
            marker is empty
    """
    patterns = as_patterns(separators)
    if not patterns:
        raise ArgumentError("At least one separator is required", "separators")
    for pattern in patterns:
        require_marker(pattern, "separators")
    pairs = list(exclusion_pairs or ())
    for open_marker, close_marker in pairs:
        require_marker(open_marker, "exclusion_pairs")
        require_marker(close_marker, "exclusion_pairs")
    options = options or DEFAULT_SPLIT_OPTIONS

    if not text:
        return []

    zones = exclusion_zones(text, pairs)
    walk = _SplitWalk(text, zones)
    for occurrence in _ordered(scan_any(text, patterns)):
        walk.feed(occurrence)
    segments = walk.finish()

    if options.trim:
        segments = [segment.strip() for segment in segments]
    if options.remove_empty:
        segments = [segment for segment in segments if segment]
    return segments
