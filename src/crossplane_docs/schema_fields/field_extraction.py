"""Schema field extraction, ordering, and flattening service."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .field_formatting import OBJECT_TYPE, format_constraints, format_default, format_type
from .schema_models import Field, SchemaNode


def extract_fields(root: SchemaNode, section: str, *, show_nested: bool = True) -> list[Field]:
    """Return the fields directly under ``section`` (``spec`` or ``status``) of ``root``.

    A missing section, or one without properties, yields no fields. Property
    names are visited alphabetically so the output is reproducible.
    """
    section_node = root.properties.get(section)
    if section_node is None or not section_node.properties:
        return []
    return _extract_children(section_node, level=0, show_nested=show_nested)


def _extract_children(parent: SchemaNode, *, level: int, show_nested: bool) -> list[Field]:
    fields: list[Field] = []
    for name in sorted(parent.properties):
        child = parent.properties[name]
        nested: tuple[Field, ...] = ()
        if show_nested and child.type == OBJECT_TYPE and child.properties:
            nested = tuple(_extract_children(child, level=level + 1, show_nested=show_nested))
        fields.append(
            Field(
                name=name,
                type=format_type(child),
                description=child.description,
                required=name in parent.required,
                default=format_default(child.default),
                constraints=format_constraints(child),
                nested=nested,
                level=level,
            )
        )
    return fields


def sort_spec_fields(fields: Iterable[Field]) -> list[Field]:
    """Order top-level spec fields: required first, then by name."""
    return sorted(fields, key=lambda field: (not field.required, field.name))


def sort_status_fields(fields: Iterable[Field]) -> list[Field]:
    """Order top-level status fields by name."""
    return sorted(fields, key=lambda field: field.name)


def flatten_fields(fields: Sequence[Field]) -> list[Field]:
    """Flatten nested fields depth-first, each parent directly before its subtree."""
    flattened: list[Field] = []
    for field in fields:
        flattened.append(field)
        if field.nested:
            flattened.extend(flatten_fields(field.nested))
    return flattened
