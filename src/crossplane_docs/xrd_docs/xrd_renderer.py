"""XRD markdown rendering."""

from __future__ import annotations

from collections.abc import Sequence

from crossplane_docs.markdown_rendering.table_cells import escape_cell, indent_name, render_table
from crossplane_docs.schema_fields.schema_models import Field

from .xrd_models import XRDDocument, XRDVersion

SPEC_HEADERS = ("Name", "Type", "Description", "Required", "Default", "Constraints")
STATUS_HEADERS = ("Name", "Type", "Description")
PRINTER_COLUMN_HEADERS = ("Name", "Type", "JSON Path")

REQUIRED_MARK = "✅"
OPTIONAL_MARK = "❌"
EMPTY_CELL = "-"


def render_xrd_markdown(
    document: XRDDocument,
    version: XRDVersion,
    spec_fields: Sequence[Field],
    status_fields: Sequence[Field],
) -> str:
    """Render an XRD version as markdown; field sequences must already be flattened."""
    lines = [f"# {document.names.kind}", ""]
    if version.schema.description:
        lines.extend([version.schema.description.strip(), ""])

    # Two trailing spaces force markdown line breaks.
    lines.append(f"**API Group:** {document.group}  ")
    lines.append(f"**API Version:** {version.name}  ")
    lines.append(f"**Kind:** {document.names.kind}  ")
    if document.claim_names is not None:
        lines.append(f"**Claim Kind:** {document.claim_names.kind}  ")
    lines.append("")

    lines.extend(["## Spec Fields", ""])
    lines.extend(render_table(SPEC_HEADERS, (_spec_row(field) for field in spec_fields)))
    lines.append("")

    if status_fields:
        lines.extend(["## Status Fields", ""])
        lines.extend(render_table(STATUS_HEADERS, (_status_row(field) for field in status_fields)))
        lines.append("")

    if version.printer_columns:
        lines.extend(["## Printer Columns", ""])
        lines.extend(
            render_table(
                PRINTER_COLUMN_HEADERS,
                (
                    (escape_cell(column.name), column.type, f"`{column.json_path}`")
                    for column in version.printer_columns
                ),
            )
        )
        lines.append("")

    lines.extend(_example_block(document, version))
    return "\n".join(lines) + "\n"


def _spec_row(field: Field) -> tuple[str, ...]:
    return (
        indent_name(field.name, field.level),
        field.type,
        escape_cell(field.description),
        REQUIRED_MARK if field.required else OPTIONAL_MARK,
        f"`{escape_cell(field.default)}`" if field.default else EMPTY_CELL,
        escape_cell(field.constraints) if field.constraints else EMPTY_CELL,
    )


def _status_row(field: Field) -> tuple[str, ...]:
    return (
        indent_name(field.name, field.level),
        field.type,
        escape_cell(field.description),
    )


def _example_block(document: XRDDocument, version: XRDVersion) -> list[str]:
    kind = document.claim_names.kind if document.claim_names else document.names.kind
    return [
        "## Example",
        "",
        "```yaml",
        f"apiVersion: {document.group}/{version.name}",
        f"kind: {kind}",
        "metadata:",
        "  name: example",
        "spec:",
        "  # Add your spec fields here",
        "```",
    ]
