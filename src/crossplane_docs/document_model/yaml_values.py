"""Tolerant accessors over parsed YAML values.

Parsed manifests are plain ``dict``/``list``/scalar trees. Every accessor here
returns an empty result instead of raising when a value is missing or has the
wrong shape, so callers can treat absent data as "nothing to show".
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_EMPTY_MAPPING: Mapping[str, Any] = {}


def as_string(value: Any) -> str:
    """Return ``value`` when it is a string, otherwise an empty string."""
    return value if isinstance(value, str) else ""


def as_bool(value: Any) -> bool:
    """Return ``value`` when it is a boolean, otherwise False."""
    return value if isinstance(value, bool) else False


def as_number(value: Any) -> int | float | None:
    """Return ``value`` when it is an int or float (but not a bool)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return value
    return None


def as_mapping(value: Any) -> Mapping[str, Any]:
    """Return ``value`` when it is a mapping, otherwise an empty mapping."""
    return value if isinstance(value, Mapping) else _EMPTY_MAPPING


def as_sequence(value: Any) -> Sequence[Any]:
    """Return ``value`` when it is a list-like sequence, otherwise an empty tuple."""
    if isinstance(value, Sequence) and not isinstance(value, str | bytes):
        return value
    return ()


def lookup_path(mapping: Any, dotted_path: str) -> Any:
    """Resolve ``dotted_path`` (e.g. ``metadata.name``) segment by segment.

    Returns None when a segment is missing or an intermediate value is not a
    mapping.
    """
    current = mapping
    for segment in dotted_path.split("."):
        if not isinstance(current, Mapping) or segment not in current:
            return None
        current = current[segment]
    return current
