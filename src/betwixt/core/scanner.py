"""
Index scanner.

Finds every position of a marker, or of any marker of a set, inside a text.
All the other engines locate their markers through this module.

Scanning resumes one character after the start of each match rather than
after the whole match, so overlapping occurrences are reported:

    scan("aaa", "aa") -> [0, 1]
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from betwixt.utils.guards import as_patterns, require_marker

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Occurrence:
    """
    One located instance of a marker.

    Attributes:
        position: 0-indexed offset of the first marker character
        marker: The marker that was found
    """

    position: int
    marker: str

    @property
    def end(self) -> int:
        """Offset just past the marker."""
        return self.position + len(self.marker)


def _ignore_case_pattern(marker: str) -> re.Pattern[str]:
    # Zero-width lookahead so every start position is reported, overlaps included.
    return re.compile(f"(?={re.escape(marker)})", re.IGNORECASE)


def scan(text: str | None, marker: str, ignore_case: bool = False) -> list[int]:
    """
    Return all positions of ``marker`` in ``text``, in ascending order.

    Args:
        text: Text to scan; ``None`` or empty yields no positions
        marker: Non-empty marker to look for
        ignore_case: Compare case-insensitively

    Returns:
        List of start positions, overlapping matches included

    Raises:
        ArgumentError: If the marker is empty
    """
    require_marker(marker, "marker")
    if not text:
        return []

    if ignore_case:
        return [m.start() for m in _ignore_case_pattern(marker).finditer(text)]

    positions: list[int] = []
    index = text.find(marker)
    while index != -1:
        positions.append(index)
        index = text.find(marker, index + 1)
    return positions


def scan_any(
    text: str | None,
    markers: str | Iterable[str],
    ignore_case: bool = False,
) -> list[Occurrence]:
    """
    Scan ``text`` for every marker of a set.

    Each marker is scanned independently, in the order given. The result is
    grouped by marker: within one marker the positions ascend, but the list
    as a whole is not sorted by position.
    """
    patterns = as_patterns(markers)
    for marker in patterns:
        require_marker(marker, "markers")

    occurrences: list[Occurrence] = []
    for marker in patterns:
        occurrences.extend(
            Occurrence(position, marker) for position in scan(text, marker, ignore_case)
        )
    logger.debug("scan_any found %d occurrences of %d markers", len(occurrences), len(patterns))
    return occurrences


def index_of(
    text: str | None,
    marker: str,
    start: int = 0,
    ignore_case: bool = False,
) -> int:
    """Find the first position of ``marker`` at or after ``start``, -1 if absent."""
    require_marker(marker, "marker")
    if not text:
        return -1
    if ignore_case:
        match = _ignore_case_pattern(marker).search(text, start)
        return match.start() if match else -1
    return text.find(marker, start)


def last_index_of(text: str | None, marker: str, ignore_case: bool = False) -> int:
    """Find the last position of ``marker``, -1 if absent."""
    require_marker(marker, "marker")
    if not text:
        return -1
    if ignore_case:
        positions = scan(text, marker, ignore_case=True)
        return positions[-1] if positions else -1
    return text.rfind(marker)
