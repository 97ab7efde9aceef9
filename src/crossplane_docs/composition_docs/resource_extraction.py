"""Managed resource and patch extraction service.

Resources are discovered either from a static ``spec.resources`` list or, in
Pipeline mode, from the ``input.resources`` list of each pipeline step. Both
sources yield plain mappings that go through the same extraction routine; each
source carries the rule used to classify its patches.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from crossplane_docs.document_model.yaml_values import (
    as_mapping,
    as_sequence,
    as_string,
    lookup_path,
)

from .composition_models import ManagedResource, PatchInfo, PipelineStep

logger = logging.getLogger(__name__)

PIPELINE_MODE = "Pipeline"
DIRECT_COPY = "Direct copy"
DIRECT_COPY_PATCH_TYPES = frozenset({"FromCompositeFieldPath", "ToCompositeFieldPath"})

PatchClassifier = Callable[[Mapping[str, Any]], str]


def classify_transformation(patch: Mapping[str, Any]) -> str:
    """Describe how a ``spec.resources`` patch transforms its value.

    A ``combine.string`` format wins; FromCompositeFieldPath and
    ToCompositeFieldPath patches are a direct copy; any other patch is
    described by its type.
    """
    combine_string = lookup_path(patch.get("combine"), "string")
    if isinstance(combine_string, Mapping):
        return as_string(combine_string.get("fmt"))

    patch_type = as_string(patch.get("type"))
    if patch_type in DIRECT_COPY_PATCH_TYPES:
        return DIRECT_COPY
    return patch_type


def classify_function_input_transformation(patch: Mapping[str, Any]) -> str:
    """Describe how a patch from a pipeline function input transforms its value.

    The patch type is not consulted: a combine yields its format string (empty
    without one), otherwise any patch with a source path is a direct copy.
    """
    combine = patch.get("combine")
    if isinstance(combine, Mapping):
        return as_string(lookup_path(combine, "string.fmt"))
    if as_string(patch.get("fromFieldPath")):
        return DIRECT_COPY
    return ""


@dataclass(frozen=True)
class ResourceSource:
    """Where resource mappings are found and how their patches are classified."""

    name: str
    resource_maps: Callable[[Mapping[str, Any]], Iterator[Mapping[str, Any]]]
    classify: PatchClassifier


def pipeline_resource_maps(spec: Mapping[str, Any]) -> Iterator[Mapping[str, Any]]:
    """Yield resource mappings found under each pipeline step's ``input.resources``."""
    for step in as_sequence(spec.get("pipeline")):
        step_input = as_mapping(as_mapping(step).get("input"))
        for resource in as_sequence(step_input.get("resources")):
            if isinstance(resource, Mapping):
                yield resource


def static_resource_maps(spec: Mapping[str, Any]) -> Iterator[Mapping[str, Any]]:
    """Yield resource mappings from ``spec.resources``."""
    for resource in as_sequence(spec.get("resources")):
        if isinstance(resource, Mapping):
            yield resource


PIPELINE_SOURCE = ResourceSource(
    name="pipeline",
    resource_maps=pipeline_resource_maps,
    classify=classify_function_input_transformation,
)
STATIC_SOURCE = ResourceSource(
    name="resources",
    resource_maps=static_resource_maps,
    classify=classify_transformation,
)


def resolve_resource_source(spec: Mapping[str, Any]) -> ResourceSource:
    """Pick the resource source matching the composition mode."""
    if as_string(spec.get("mode")) == PIPELINE_MODE and as_sequence(spec.get("pipeline")):
        return PIPELINE_SOURCE
    return STATIC_SOURCE


def extract_managed_resources(
    spec: Mapping[str, Any], *, show_patches: bool = True
) -> list[ManagedResource]:
    """Return the managed resources declared by a composition ``spec``, in source order."""
    source = resolve_resource_source(spec)
    resources = [
        _to_managed_resource(resource, source.classify, show_patches=show_patches)
        for resource in source.resource_maps(spec)
    ]
    logger.debug("Discovered %d managed resource(s) via %s", len(resources), source.name)
    return resources


def _to_managed_resource(
    resource: Mapping[str, Any], classify: PatchClassifier, *, show_patches: bool
) -> ManagedResource:
    base = resource.get("base")
    return ManagedResource(
        name=as_string(resource.get("name")),
        kind=as_string(lookup_path(base, "kind")),
        api_version=as_string(lookup_path(base, "apiVersion")),
        patches=(
            tuple(extract_patches(resource.get("patches"), classify=classify))
            if show_patches
            else ()
        ),
    )


def extract_patches(
    raw_patches: Any, *, classify: PatchClassifier = classify_transformation
) -> list[PatchInfo]:
    """Map patch declarations to PatchInfo rows, dropping ones without any field path."""
    patches: list[PatchInfo] = []
    for patch in as_sequence(raw_patches):
        if not isinstance(patch, Mapping):
            continue
        info = PatchInfo(
            source_field=as_string(patch.get("fromFieldPath")),
            target_field=as_string(patch.get("toFieldPath")),
            transformation=classify(patch),
        )
        if info.source_field or info.target_field:
            patches.append(info)
    return patches


def extract_pipeline_steps(spec: Mapping[str, Any]) -> list[PipelineStep]:
    """List the function steps of a Pipeline-mode composition."""
    if as_string(spec.get("mode")) != PIPELINE_MODE:
        return []
    return [
        PipelineStep(
            step=as_string(step.get("step")),
            function_name=as_string(lookup_path(step, "functionRef.name")),
        )
        for step in as_sequence(spec.get("pipeline"))
        if isinstance(step, Mapping)
    ]


def sort_resources(resources: Iterable[ManagedResource]) -> list[ManagedResource]:
    """Order managed resources by name."""
    return sorted(resources, key=lambda resource: resource.name)
