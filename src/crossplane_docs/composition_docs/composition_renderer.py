"""Composition markdown rendering."""

from __future__ import annotations

from collections.abc import Sequence

from crossplane_docs.markdown_rendering.table_cells import escape_cell, render_table

from .composition_models import CompositionDocument, ManagedResource, PipelineStep

RESOURCE_HEADERS = ("Resource Name", "Kind", "API Version")
PATCH_HEADERS = ("XRD Field", "Mapped To", "Transformation")
PIPELINE_HEADERS = ("Step", "Function")
NO_PATCHES_MESSAGE = "No patches defined."
EMPTY_CELL = "-"


def render_composition_markdown(
    document: CompositionDocument,
    resources: Sequence[ManagedResource],
    *,
    show_patches: bool = True,
    pipeline_steps: Sequence[PipelineStep] = (),
) -> str:
    """Render a composition as markdown; ``resources`` are rendered in the given order."""
    lines = [f"# {document.composite_kind} Composition", ""]
    lines.append(f"**Composition Name:** {document.name}  ")
    lines.append(
        f"**Composite Type:** {document.composite_api_version}/{document.composite_kind}  "
    )
    if document.mode:
        lines.append(f"**Mode:** {document.mode}  ")
    lines.append("")

    if pipeline_steps:
        lines.extend(["## Pipeline Steps", ""])
        lines.extend(
            render_table(
                PIPELINE_HEADERS,
                (
                    (escape_cell(step.step), escape_cell(step.function_name))
                    for step in pipeline_steps
                ),
            )
        )
        lines.append("")

    lines.extend(
        [
            "## Managed Resources",
            "",
            f"This composition creates {len(resources)} managed resource(s):",
            "",
        ]
    )
    lines.extend(
        render_table(
            RESOURCE_HEADERS,
            (
                (escape_cell(resource.name), resource.kind, resource.api_version)
                for resource in resources
            ),
        )
    )
    lines.append("")

    if show_patches:
        lines.extend(["## Field Mappings", ""])
        for resource in resources:
            lines.extend(_field_mapping_section(resource))

    return "\n".join(lines) + "\n"


def _field_mapping_section(resource: ManagedResource) -> list[str]:
    lines = [f"### {resource.name} ({resource.kind})", ""]
    if not resource.patches:
        return [*lines, NO_PATCHES_MESSAGE, ""]
    lines.extend(
        render_table(
            PATCH_HEADERS,
            (
                (
                    escape_cell(patch.source_field) or EMPTY_CELL,
                    escape_cell(patch.target_field),
                    escape_cell(patch.transformation),
                )
                for patch in resource.patches
            ),
        )
    )
    lines.append("")
    return lines
