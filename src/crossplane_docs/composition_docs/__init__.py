"""Composition documentation exports."""

from .composition_generator import CompositionOptions, generate_composition_documentation
from .composition_models import CompositionDocument, ManagedResource, PatchInfo, PipelineStep
from .composition_renderer import render_composition_markdown
from .resource_extraction import (
    DIRECT_COPY,
    PIPELINE_MODE,
    classify_function_input_transformation,
    classify_transformation,
    extract_managed_resources,
    extract_patches,
    extract_pipeline_steps,
    sort_resources,
)

__all__ = [
    "DIRECT_COPY",
    "PIPELINE_MODE",
    "CompositionDocument",
    "CompositionOptions",
    "ManagedResource",
    "PatchInfo",
    "PipelineStep",
    "classify_function_input_transformation",
    "classify_transformation",
    "extract_managed_resources",
    "extract_patches",
    "extract_pipeline_steps",
    "generate_composition_documentation",
    "render_composition_markdown",
    "sort_resources",
]
