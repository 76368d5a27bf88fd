"""Argument checks shared by the core engines and the extensions."""

from __future__ import annotations

from collections.abc import Iterable

from betwixt.utils.errors import ArgumentError


def require_marker(marker: str | None, argument: str) -> str:
    """Reject ``None`` or empty markers."""
    if not marker:
        raise ArgumentError("String instance cannot be null or empty", argument)
    return marker


def require_text(text: str | None, argument: str = "text") -> str:
    """Reject ``None`` or empty text."""
    if not text:
        raise ArgumentError("String cannot be null or empty", argument)
    return text


def require_not_none(value: object, argument: str) -> None:
    if value is None:
        raise ArgumentError("Value cannot be null", argument)


def as_patterns(patterns: str | Iterable[str] | None) -> list[str]:
    """
    Normalize a single pattern or an iterable of patterns to a list.

    A plain ``str`` is one pattern, never a sequence of characters.
    """
    if patterns is None:
        return []
    if isinstance(patterns, str):
        return [patterns]
    return list(patterns)
