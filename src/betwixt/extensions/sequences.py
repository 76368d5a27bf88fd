"""
betwixt extensions - sequence helpers.

Index windows over lists, membership checks and joining.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any, Optional, TypeVar

from betwixt.extensions.strings import remove_last
from betwixt.utils.errors import ArgumentError

T = TypeVar("T")
K = TypeVar("K")


# =============================================================================
# Windowing
# =============================================================================


def take_range(seq: Iterable[T], start: int, end: int) -> list[T]:
    """
    Return the elements from ``start`` to ``end``, both inclusive.

    Example:
        take_range(["a", "kl", "do", "d", "cm"], 2, 4) -> ["do", "d", "cm"]
    """
    items = list(seq)
    if start < 0 or end < start or end >= len(items):
        raise ArgumentError(f"Invalid range [{start}, {end}] for {len(items)} elements", "end")
    return items[start:end + 1]


def from_index(seq: Iterable[T], start: int) -> list[T]:
    """Return the elements from ``start`` to the end."""
    items = list(seq)
    if start < 0 or start > len(items):
        raise ArgumentError(f"Invalid start {start} for {len(items)} elements", "start")
    return items[start:]


def to_index(seq: Iterable[T], end: int) -> list[T]:
    """Return the elements from the beginning to ``end``, inclusive."""
    items = list(seq)
    if end < -1 or end >= len(items):
        raise ArgumentError(f"Invalid end {end} for {len(items)} elements", "end")
    return items[:end + 1]


# =============================================================================
# Membership
# =============================================================================


def contains_any_of(seq: Iterable[T], searches: Optional[Iterable[T]]) -> bool:
    """Check whether any of ``searches`` is in ``seq``."""
    found, _ = first_match_of(seq, searches)
    return found


def first_match_of(seq: Iterable[T], searches: Optional[Iterable[T]]) -> tuple[bool, Optional[T]]:
    """
    Return ``(True, item)`` for the first of ``searches`` present in ``seq``.

    Returns ``(False, None)`` when none is present.
    """
    if seq is None:
        raise ArgumentError("the list cannot be null.", "seq")

    items = list(seq)
    for search in searches or ():
        if search in items:
            return True, search
    return False, None


def is_in(value: T, seq: Optional[Iterable[T]]) -> bool:
    if seq is None:
        return False
    return value in seq


def is_null_or_empty(seq: Optional[Iterable[Any]]) -> bool:
    if seq is None:
        return True
    return not any(True for _ in seq)


def has_elements(seq: Optional[Iterable[Any]]) -> bool:
    return not is_null_or_empty(seq)


def is_first(value: Any, seq: Optional[Iterable[Any]]) -> bool:
    """Check whether ``value`` equals the first element of ``seq``."""
    if seq is None:
        return False
    for item in seq:
        return item == value
    return False


# =============================================================================
# Access
# =============================================================================


def penultimate(seq: Optional[Sequence[T]]) -> Optional[T]:
    """Return the second-to-last element."""
    if seq is None:
        return None
    return seq[-2]


def element_at_from_last(seq: Optional[Sequence[T]], index: int) -> Optional[T]:
    """Return the element at ``index`` counting from the back, starting at 1."""
    if seq is None:
        return None
    if index < 1:
        raise ArgumentError("Index counts from 1", "index")
    return seq[-index]


def take_after(seq: Iterable[T], predicate: Callable[[T], bool]) -> Optional[list[T]]:
    """
    Return the elements after the first one matching ``predicate``.

    This is not a filter: everything after the first match is kept.
    Returns None when nothing matches.
    """
    items = list(seq)
    for i, item in enumerate(items):
        if predicate(item):
            return items[i + 1:]
    return None


def get_keys(pairs: Iterable[tuple[K, Any]]) -> list[K]:
    """Return the first element of each pair."""
    return [key for key, _ in pairs]


# =============================================================================
# Building
# =============================================================================


def insert_multiple(seq: Iterable[T], inserts: Optional[Iterable[tuple[int, T]]]) -> list[T]:
    """
    Insert several values at once.

    Each ``(index, value)`` goes right before the *original* element at
    ``index``, so earlier insertions do not shift later ones. An index equal
    to the length appends. Values sharing an index keep their given order.
    """
    if seq is None:
        raise ArgumentError("the list cannot be null.", "seq")

    items = list(seq)
    if inserts is None:
        return items

    pending: dict[int, list[T]] = {}
    for index, value in inserts:
        if index < 0 or index > len(items):
            raise ArgumentError(f"Invalid insert position {index}", "inserts")
        pending.setdefault(index, []).append(value)

    result: list[T] = []
    for i, item in enumerate(items):
        result.extend(pending.get(i, ()))
        result.append(item)
    result.extend(pending.get(len(items), ()))
    return result


def join_together(series: Iterable[Any], separator: Optional[str] = None) -> str:
    """
    Join the string forms of ``series``.

    Example:
        join_together([1, 2, 3], ", ") -> "1, 2, 3"
    """
    if series is None:
        raise ArgumentError("Cannot join together a null series of elements", "series")
    separator = separator or ""
    joined = "".join(f"{item}{separator}" for item in series)
    return remove_last(joined, separator)


def join_together_between(
    series: Iterable[Any],
    start: int,
    end: int,
    separator: Optional[str] = None,
) -> str:
    """Join the elements from ``start`` to ``end``, both inclusive."""
    if series is None:
        raise ArgumentError("Cannot join together a null series of elements", "series")
    if start < 0:
        raise ArgumentError("Cannot specify a starting position lower than 0", "start")
    if end < start:
        raise ArgumentError("Cannot specify an upper index lower than the starting index", "end")
    return join_together(take_range(series, start, end), separator)
