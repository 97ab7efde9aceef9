"""Schema field entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from crossplane_docs.document_model.yaml_values import (
    as_mapping,
    as_number,
    as_sequence,
    as_string,
)


@dataclass(frozen=True)
class SchemaNode:  # pylint: disable=too-many-instance-attributes
    """One node of an OpenAPI v3 schema as declared in an XRD version."""

    type: str = ""
    description: str = ""
    properties: Mapping[str, SchemaNode] = field(default_factory=dict)
    items: SchemaNode | None = None
    required: tuple[str, ...] = ()
    default: Any = None
    enum: tuple[Any, ...] = ()
    minimum: int | float | None = None
    maximum: int | float | None = None
    min_items: int | None = None
    max_items: int | None = None

    @classmethod
    def from_mapping(cls, raw: Any) -> SchemaNode:
        """Build a node from a parsed YAML mapping; malformed children are skipped."""
        node = as_mapping(raw)
        properties = {
            name: cls.from_mapping(child)
            for name, child in as_mapping(node.get("properties")).items()
            if isinstance(name, str) and isinstance(child, Mapping)
        }
        items = node.get("items")
        return cls(
            type=as_string(node.get("type")),
            description=as_string(node.get("description")),
            properties=properties,
            items=cls.from_mapping(items) if isinstance(items, Mapping) else None,
            required=tuple(
                name for name in as_sequence(node.get("required")) if isinstance(name, str)
            ),
            default=node.get("default"),
            enum=tuple(as_sequence(node.get("enum"))),
            minimum=as_number(node.get("minimum")),
            maximum=as_number(node.get("maximum")),
            min_items=_as_int(node.get("minItems")),
            max_items=_as_int(node.get("maxItems")),
        )


@dataclass(frozen=True)
class Field:  # pylint: disable=too-many-instance-attributes
    """One documented row of a spec or status table."""

    name: str
    type: str
    description: str
    required: bool
    default: str
    constraints: str
    nested: tuple[Field, ...] = ()
    level: int = 0


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value
