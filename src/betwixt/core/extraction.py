"""
Extraction engine.

Returns the text found between marker pairs: once, after an anchor, for
every pair in the text, or repeatedly while matches keep coming.

Not finding a marker is never an error here: those calls return an empty
string (or the input, for ``substring_after``), and ``None`` text behaves
like an empty string.
"""

from __future__ import annotations

import logging

from betwixt.core.intervals import Interval, pair
from betwixt.core.scanner import index_of, last_index_of
from betwixt.utils.errors import ArgumentError
from betwixt.utils.guards import require_marker

logger = logging.getLogger(__name__)


def substring_after(
    text: str | None,
    mark: str,
    ignore_case: bool = False,
    trim: bool = False,
) -> str:
    """
    Return what follows the first occurrence of ``mark``.

    Example:
        >>> substring_after("the quick brown fox jumps", "fox")
        ' jumps'

    The text is returned unchanged when ``mark`` is not found; an empty mark
    matches at position 0.
    """
    if not text:
        return ""
    if not mark:
        return text.strip() if trim else text

    index = index_of(text, mark, ignore_case=ignore_case)
    if index == -1:
        return text

    result = text[index + len(mark):]
    return result.strip() if trim else result


def substring_after_last(
    text: str | None,
    mark: str,
    ignore_case: bool = False,
    trim: bool = False,
) -> str:
    """Return what follows the last occurrence of ``mark``, or the text if absent."""
    if not text:
        return ""
    if not mark:
        return ""

    index = last_index_of(text, mark, ignore_case=ignore_case)
    if index == -1:
        return text

    result = text[index + len(mark):]
    return result.strip() if trim else result


def take_between(
    text: str | None,
    open_marker: str,
    close_marker: str,
    trim: bool = False,
) -> str:
    """
    Return the text strictly between a pair of markers.

    With two different markers, the first opening marker is paired with the
    first closing marker after it. With the same marker on both sides, the
    first and the last occurrences are paired:

        >>> take_between('this "a" and "b" end', '"', '"')
        'a" and "b'

    Args:
        text: Text to search
        open_marker: Marker opening the region
        close_marker: Marker closing the region
        trim: Strip surrounding whitespace from the result

    Returns:
        The enclosed text, or "" when the pair is not found

    Raises:
        ArgumentError: If a marker is empty
        OrderViolation: If the closing marker precedes the opening marker
    """
    interval = pair(text, open_marker, close_marker)
    if interval is None:
        logger.debug("take_between: no %r...%r pair found", open_marker, close_marker)
        return ""

    result = interval.slice(text)
    return result.strip() if trim else result


def take_between_after_mark(
    text: str | None,
    mark: str,
    open_marker: str,
    close_marker: str,
    trim: bool = False,
) -> str:
    """
    Extract between markers, looking only after the first ``mark``.

    Useful to scope an extraction behind a prefix anchor, for example the
    braces that follow ``"payload:"`` rather than the first braces of the
    document.
    """
    if mark is None or not mark.strip():
        raise ArgumentError("String cannot be null or white space", "mark")
    require_marker(open_marker, "open_marker")
    require_marker(close_marker, "close_marker")

    return take_between(substring_after(text, mark), open_marker, close_marker, trim)


def find_all_between_spans(
    text: str | None,
    open_marker: str,
    close_marker: str,
) -> list[Interval]:
    """
    Locate every non-overlapping marker pair.

    The returned intervals cover the markers themselves. Each closing
    marker is searched after the end of its opening marker, and the next
    search resumes after that closing marker.
    """
    require_marker(open_marker, "open_marker")
    require_marker(close_marker, "close_marker")

    spans: list[Interval] = []
    if not text:
        return spans

    cursor = 0
    while True:
        start = index_of(text, open_marker, cursor)
        if start == -1:
            break
        close = index_of(text, close_marker, start + len(open_marker))
        if close == -1:
            break
        end = close + len(close_marker)
        spans.append(Interval(start, end))
        cursor = end
    return spans


def find_all_between(
    text: str | None,
    open_marker: str,
    close_marker: str,
    include_markers: bool = False,
) -> list[str]:
    """
    Return the content of every marker pair in the text.

    Example:
        >>> find_all_between("{a} and {b}", "{", "}")
        ['a', 'b']
        >>> find_all_between("{a} and {b}", "{", "}", include_markers=True)
        ['{a}', '{b}']
    """
    results: list[str] = []
    for span in find_all_between_spans(text, open_marker, close_marker):
        if include_markers:
            results.append(span.slice(text))
        else:
            results.append(text[span.start + len(open_marker):span.end - len(close_marker)])
    return results


def take_between_multiple(
    text: str | None,
    open_marker: str,
    close_marker: str,
    trim: bool = False,
) -> list[str]:
    """
    Apply ``take_between`` repeatedly, moving past each closing marker.

    The loop stops on the first empty extraction, so an empty pair such as
    ``{}`` ends the scan even when more pairs follow it.
    """
    require_marker(open_marker, "open_marker")
    require_marker(close_marker, "close_marker")

    results: list[str] = []
    remaining = text or ""
    while remaining:
        interval = pair(remaining, open_marker, close_marker)
        if interval is None:
            break
        extracted = interval.slice(remaining)
        if trim:
            extracted = extracted.strip()
        if not extracted:
            break
        results.append(extracted)
        remaining = remaining[interval.end + len(close_marker):]
    return results
