"""Single-object text rendering: one ``name: value`` line per property."""

from typing import Any, Mapping

from objcompare.comparison.flattener import flatten, is_primitive
from objcompare.comparison.padding import pad

# Rendered in place of a None object
NULL_OBJECT_TEXT = "null"


def format_properties(properties: Mapping[str, str]) -> str:
    """
    Render properties as lines of ``{key padded to longest key}: {value}``.

    Returns:
        Newline-terminated lines, or "" for an empty mapping
    """
    if not properties:
        return ""

    width = max(len(key) for key in properties)
    return "".join(f"{pad(key, width)}: {properties[key]}\n" for key in properties)


def stringify(obj: Any) -> str:
    """
    Render one object's top-level properties as human-readable text.

    None renders as "null" and primitive-like values as ``str(obj)``.
    Everything else is flattened and formatted by format_properties.

    Example:
        >>> print(stringify(date(2025, 1, 2)), end="")
        day  : 2
        month: 1
        year : 2025
    """
    if obj is None:
        return NULL_OBJECT_TEXT

    if is_primitive(obj):
        return f"{obj}"

    return format_properties(flatten(obj))
