"""
betwixt extensions - object helpers.

Expanded string rendering and template interpolation. Both read an
object's properties through a ``PropertyReader``: a callable returning
``(name, value as text)`` pairs. The default reader, ``public_properties``,
covers dataclasses, slotted classes and plain instances; pass another
reader to expose computed attributes or to hide some.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from betwixt.extensions.strings import to_string_safe

PropertyReader = Callable[[Any], Iterable[tuple[str, str]]]

PROPERTY_SEPARATOR = " - "
PLACEHOLDER_FORMAT = "#{{{name}}}"


def _slot_names(obj: Any) -> Iterator[str]:
    for cls in reversed(type(obj).__mro__):
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        yield from slots


def public_properties(obj: Any) -> Iterator[tuple[str, str]]:
    """List the public attributes of ``obj`` in definition order."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        names = [f.name for f in dataclasses.fields(obj)]
    elif hasattr(obj, "__dict__"):
        names = list(vars(obj))
    else:
        names = [name for name in _slot_names(obj) if hasattr(obj, name)]

    for name in names:
        if not name.startswith("_"):
            yield name, to_string_safe(getattr(obj, name))


def to_string_expanded(obj: Any, reader: PropertyReader = public_properties) -> str:
    """
    Render every public property as ``name : value``.

    Example:
        >>> to_string_expanded(Dummy(field_a="Hello", field_c=999))
        'field_a : Hello - field_c : 999'
    """
    if obj is None:
        return ""
    return PROPERTY_SEPARATOR.join(f"{name} : {value}" for name, value in reader(obj))


def interpolate(template: str, obj: Any, reader: PropertyReader = public_properties) -> str:
    """
    Fill ``#{name}`` placeholders in ``template`` with properties of ``obj``.

    Placeholders without a matching property are left as they are.
    """
    if not template or obj is None:
        return ""

    result = template
    for name, value in reader(obj):
        result = result.replace(PLACEHOLDER_FORMAT.format(name=name), value)
    return result


def are_all_null(obj: Any, names: Iterable[str]) -> bool:
    """Check that every named attribute of ``obj`` is None."""
    return all(getattr(obj, name) is None for name in names)
