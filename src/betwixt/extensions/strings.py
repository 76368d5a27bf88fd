"""
betwixt extensions - string helpers.

Null-safe conversions, repetition, slicing and search helpers that sit
around the marker engine.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Callable, Iterable, Iterator
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from betwixt.utils.errors import ArgumentError
from betwixt.utils.guards import require_not_none


# =============================================================================
# Null Safety
# =============================================================================


def to_string_safe(value: Any, default: Optional[str] = "") -> str:
    """Return ``str(value)``, or ``default`` when value is None."""
    if value is None:
        return "" if default is None else default
    return str(value)


def substring_safe(text: Optional[str], start: int, length: int) -> str:
    """Return ``length`` characters from ``start``, or "" when out of range."""
    if text and start >= 0 and length >= 0 and len(text) >= start + length:
        return text[start:start + length]
    return ""


# =============================================================================
# Repetition
# =============================================================================


def prepend(text: Optional[str], value: Optional[str], repetitions: int = 1) -> str:
    """
    Prepend ``value`` to ``text`` ``repetitions`` times.

    None arguments count as empty strings; a negative repetition count
    counts as one.

    Example:
        >>> prepend("test string", "\\t", 3)
        '\\t\\t\\ttest string'
    """
    if repetitions < 0:
        repetitions = 1
    return (value or "") * repetitions + (text or "")


def append(text: Optional[str], value: Optional[str], repetitions: int = 1) -> str:
    """Append ``value`` to ``text`` ``repetitions`` times (see ``prepend``)."""
    if repetitions < 0:
        repetitions = 1
    return (text or "") + (value or "") * repetitions


# =============================================================================
# Slicing
# =============================================================================


def remove_from_end(text: Optional[str], count: int, trim_end_first: bool = False) -> str:
    """
    Remove ``count`` characters from the end of ``text``.

    Returns "" for empty text or when ``count`` exceeds the length.
    Trailing whitespace is stripped first when ``trim_end_first`` is set.
    """
    if not text:
        return ""
    if trim_end_first:
        text = text.rstrip()
    if count > len(text):
        return ""
    return text[:len(text) - count]


def remove_last(text: str, removee: str) -> str:
    """Remove the last occurrence of ``removee``."""
    require_not_none(text, "text")
    require_not_none(removee, "removee")

    index = text.rfind(removee)
    if index >= 0:
        return text[:index] + text[index + len(removee):]
    return text


def take(text: str, index: int) -> str:
    """Return the first ``index`` characters."""
    if text is None or not text.strip():
        raise ArgumentError("String cannot be null", "text")
    if index < 0:
        raise ArgumentError("Index cannot be less than zero", "index")
    return text[:index]


def skip(text: str, index: int) -> str:
    """Return everything from ``index`` on."""
    if text is None or not text.strip():
        raise ArgumentError("String cannot be null", "text")
    if index < 0:
        raise ArgumentError("Index cannot be less than zero", "index")
    if index > len(text):
        raise ArgumentError("Index cannot be bigger than actual string length", "index")
    return text[index:]


def truncate(text: str, length: int) -> str:
    """Keep at most ``length`` characters."""
    return text[:length]


def take_from(text: str, index: int) -> str:
    """Return ``text[index:]``, or the whole text when ``index`` is past its end."""
    if index > len(text):
        return text
    return text[index:]


# =============================================================================
# Searching
# =============================================================================


def _matcher(text: str, word_boundaries: bool) -> Callable[[str], bool]:
    if not word_boundaries:
        return lambda search: search in text
    return lambda search: re.search(rf"\b{re.escape(search)}\b", text) is not None


def contains_any(
    text: str,
    searches: Optional[Iterable[str]],
    word_boundaries: bool = False,
) -> bool:
    """
    Check whether any of ``searches`` occurs in ``text``.

    With ``word_boundaries`` a search term only counts as a whole word.
    """
    return bool(get_first_occurrence(text, searches, word_boundaries))


def get_first_occurrence(
    text: str,
    searches: Optional[Iterable[str]],
    word_boundaries: bool = False,
) -> str:
    """Return the first of ``searches`` found in ``text``, or ""."""
    if text is None:
        raise ArgumentError("the string cannot be null.", "text")

    matches = _matcher(text, word_boundaries)
    for search in searches or ():
        if search and matches(search):
            return search
    return ""


# =============================================================================
# Unicode
# =============================================================================


def decompose(text: str) -> Iterator[tuple[str, str]]:
    """Yield ``(character, unicode category)`` for the NFD form of ``text``."""
    for char in unicodedata.normalize("NFD", text):
        yield char, unicodedata.category(char)


def remove_diacritics(text: str) -> str:
    """
    Strip accents and other combining marks.

    Example:
        >>> remove_diacritics("àëíôüñ")
        'aeioun'
    """
    kept = "".join(char for char, category in decompose(text) if category != "Mn")
    return unicodedata.normalize("NFC", kept)


# =============================================================================
# Parsing
# =============================================================================


def _format_number(value: Any, fmt: str) -> str:
    return format(value, fmt)


def _format_datetime(value: datetime, fmt: str) -> str:
    return value.strftime(fmt)


# target type -> (parser, formatter)
PARSE_TABLE: dict[type, tuple[Callable[[str], Any], Callable[[Any, str], str]]] = {
    int: (int, _format_number),
    float: (float, _format_number),
    Decimal: (Decimal, _format_number),
    datetime: (datetime.fromisoformat, _format_datetime),
}


def parse_to_string_safe(
    text: Optional[str],
    target: type,
    fmt: str = "",
    default: str = "",
) -> str:
    """
    Parse ``text`` as ``target`` and render it back, optionally formatted.

    Example:
        >>> parse_to_string_safe("1277.4848", Decimal, ",.2f")
        '1,277.48'

    Args:
        text: Text to parse
        target: One of the types in ``PARSE_TABLE``
        fmt: ``format()`` spec, or ``strftime`` pattern for datetimes
        default: Returned for empty input

    Returns:
        The rendered value, ``text`` itself when it cannot be parsed, or
        ``default`` for empty input

    Raises:
        ArgumentError: If ``target`` has no entry in ``PARSE_TABLE``
    """
    if target not in PARSE_TABLE:
        raise ArgumentError(f"Unsupported target type: {target.__name__}", "target")
    if not text:
        return default or ""

    parser, formatter = PARSE_TABLE[target]
    try:
        value = parser(text)
        if not fmt:
            return str(value)
        return formatter(value, fmt)
    except (ValueError, ArithmeticError):
        return text
