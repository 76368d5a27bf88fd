"""
Interval builder.

Pairs marker occurrences into intervals and answers point membership
queries. Two pairing rules exist:

- symmetric: the same marker opens and closes. The interval runs from the
  end of the first occurrence to the start of the last one, whatever the
  number of occurrences in between.
- distinct: two different markers. The first opening marker is paired with
  the first closing marker found after it. A closing marker that shows up
  before the opening one is an ``OrderViolation``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from betwixt.core.scanner import index_of, scan
from betwixt.utils.errors import OrderViolation
from betwixt.utils.guards import require_marker

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Interval:
    """
    A ``[start, end)`` range inside a text.

    Attributes:
        start: 0-indexed start offset
        end: 0-indexed end offset (exclusive), never lower than ``start``
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise OrderViolation("start", "end", self.start, self.end)

    @property
    def length(self) -> int:
        return self.end - self.start

    def contains(self, point: int, half_open: bool = False) -> bool:
        """Check whether ``point`` lies in ``[start, end]`` (or ``[start, end)``)."""
        low, high = min(self.start, self.end), max(self.start, self.end)
        if half_open:
            return low <= point < high
        return low <= point <= high

    def slice(self, text: str) -> str:
        """Return the part of ``text`` covered by this interval."""
        return text[self.start:self.end]


def pair_symmetric(text: str | None, marker: str) -> list[Interval]:
    """
    Pair the first and last occurrence of a marker used on both sides.

    Returns a single-element list with the content interval, or an empty
    list when fewer than two non-overlapping occurrences exist.
    """
    positions = scan(text, marker)
    if len(positions) < 2:
        return []

    first_end = positions[0] + len(marker)
    last_start = positions[-1]
    if last_start < first_end:
        return []
    return [Interval(first_end, last_start)]


def pair_distinct(text: str | None, open_marker: str, close_marker: str) -> Optional[Interval]:
    """
    Pair the first ``open_marker`` with the first ``close_marker`` after it.

    Returns:
        The content interval (markers excluded), or None if either marker
        is missing

    Raises:
        OrderViolation: If the first closing marker precedes the opening one
    """
    require_marker(open_marker, "open_marker")
    require_marker(close_marker, "close_marker")

    open_index = index_of(text, open_marker)
    first_close = index_of(text, close_marker)
    if open_index == -1 or first_close == -1:
        return None

    if first_close < open_index:
        logger.debug("pair_distinct: %r at %d precedes %r at %d", close_marker, first_close, open_marker, open_index)
        raise OrderViolation(open_marker, close_marker, open_index, first_close)

    content_start = open_index + len(open_marker)
    close_index = index_of(text, close_marker, content_start)
    if close_index == -1:
        return None
    return Interval(content_start, close_index)


def pair(text: str | None, open_marker: str, close_marker: str) -> Optional[Interval]:
    """Pair markers with the symmetric rule when they are equal, else the distinct rule."""
    require_marker(open_marker, "open_marker")
    require_marker(close_marker, "close_marker")

    if open_marker == close_marker:
        intervals = pair_symmetric(text, open_marker)
        return intervals[0] if intervals else None
    return pair_distinct(text, open_marker, close_marker)


def contains_point(
    point: int,
    intervals: Iterable[Interval],
    half_open: bool = False,
) -> tuple[bool, Optional[Interval]]:
    """
    Check whether ``point`` falls inside any of ``intervals``.

    Intervals need not be sorted or disjoint: the first one that matches, in
    the order given, is returned.

    Returns:
        (True, matching interval) or (False, None)
    """
    for interval in intervals:
        if interval.contains(point, half_open):
            return True, interval
    return False, None
