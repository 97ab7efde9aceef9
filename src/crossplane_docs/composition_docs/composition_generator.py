"""Composition documentation generation service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .composition_models import CompositionDocument
from .composition_renderer import render_composition_markdown
from .resource_extraction import extract_managed_resources, extract_pipeline_steps, sort_resources

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompositionOptions:
    """Rendering options for Composition documentation."""

    show_patches: bool = True


def generate_composition_documentation(
    manifest: Mapping[str, Any] | CompositionDocument,
    options: CompositionOptions | None = None,
) -> str:
    """Render markdown documentation for one Composition."""
    resolved_options = options or CompositionOptions()
    document = (
        manifest
        if isinstance(manifest, CompositionDocument)
        else CompositionDocument.from_mapping(manifest)
    )
    logger.debug("Documenting composition %s (mode=%s)", document.name, document.mode or "<none>")

    resources = sort_resources(
        extract_managed_resources(document.spec, show_patches=resolved_options.show_patches)
    )
    return render_composition_markdown(
        document,
        resources,
        show_patches=resolved_options.show_patches,
        pipeline_steps=extract_pipeline_steps(document.spec),
    )
