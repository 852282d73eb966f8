"""
Variable resolution for template placeholders.

Looks up dotted paths ("user.name", "education.0.school") in resume data and
converts resolved values to the text that replaces a placeholder.
"""

import json
from collections.abc import Mapping, Sequence
from typing import Any


class _Missing:
    """Sentinel for a path that does not resolve. Distinct from None, which is a value."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def is_sequence(value: Any) -> bool:
    """True for lists and tuples, false for strings and bytes."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def lookup_key(obj: Any, key: str) -> Any:
    """
    Look up a single key on a mapping or a decimal index on a sequence.

    Args:
        obj: Mapping or sequence to look into
        key: Key name, or decimal index for sequences

    Returns:
        The value, or MISSING if the key is absent or obj is not a container
    """
    if isinstance(obj, Mapping):
        return obj.get(key, MISSING)

    if is_sequence(obj) and key.isdecimal():
        index = int(key)
        return obj[index] if index < len(obj) else MISSING

    return MISSING


def resolve(data: Any, path: str) -> Any:
    """
    Resolve a dot-separated path against data.

    Walks one key at a time and gives up as soon as the current object is falsy
    (None, empty string, 0, empty container) or the key is absent. Never raises.

    Args:
        data: Scope to resolve against (usually a mapping)
        path: Dot-separated key path

    Returns:
        The resolved value as-is, or MISSING

    Examples:
        >>> resolve({"user": {"name": "Ada"}}, "user.name")
        'Ada'
        >>> resolve({"user": {}}, "user.name")
        MISSING
    """
    current = data
    for key in path.split("."):
        if not current:
            return MISSING
        current = lookup_key(current, key)
        if current is MISSING:
            return MISSING
    return current


def stringify(value: Any) -> str:
    """
    Convert a resolved value to its placeholder replacement text.

    - strings pass through
    - booleans become "true" / "false"
    - None becomes "null"
    - integral floats drop the trailing ".0" (14.0 -> "14")
    - lists and tuples are stringified element-wise and joined with ","
      (None elements become empty, so [1, None, 2] -> "1,,2")
    - mappings become JSON text
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Mapping):
        return json.dumps(dict(value), default=str, ensure_ascii=False)
    if is_sequence(value):
        return ",".join("" if item is None else stringify(item) for item in value)
    return str(value)
