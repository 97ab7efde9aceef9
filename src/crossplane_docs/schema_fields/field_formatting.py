"""Display formatting for schema types, defaults, and validation constraints."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from .schema_models import SchemaNode

ARRAY_TYPE = "array"
OBJECT_TYPE = "object"


def format_type(node: SchemaNode) -> str:
    """Return the terraform-docs style type label, e.g. ``list(string)``."""
    if node.type == ARRAY_TYPE and node.items is not None:
        return f"list({format_type(node.items)})"
    if node.type == OBJECT_TYPE:
        return OBJECT_TYPE
    if node.enum:
        return "string"
    return node.type


def format_default(value: Any) -> str:
    """Return the textual default value, or an empty string when unset."""
    if value is None:
        return ""
    return format_value(value)


def format_value(value: Any) -> str:
    """Render one YAML value the way it reads in a manifest."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping) or (isinstance(value, Sequence) and not isinstance(value, bytes)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


def format_constraints(node: SchemaNode) -> str:
    """Join validation constraints in their fixed display order."""
    constraints: list[str] = []
    if node.enum:
        allowed = ", ".join(f"`{format_value(value)}`" for value in node.enum)
        constraints.append(f"Allowed: {allowed}")
    if node.minimum is not None:
        constraints.append(f"Min: {format_value(node.minimum)}")
    if node.maximum is not None:
        constraints.append(f"Max: {format_value(node.maximum)}")
    if node.min_items is not None:
        constraints.append(f"MinItems: {node.min_items}")
    if node.max_items is not None:
        constraints.append(f"MaxItems: {node.max_items}")
    return ", ".join(constraints)
