"""Composition documentation entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from crossplane_docs.document_model.yaml_values import as_mapping, as_string, lookup_path

UNKNOWN_NAME = "unknown"


@dataclass(frozen=True)
class PatchInfo:
    """One field mapping from the composite resource onto a managed resource."""

    source_field: str
    target_field: str
    transformation: str


@dataclass(frozen=True)
class ManagedResource:
    """Managed resource created by a composition."""

    name: str
    kind: str
    api_version: str
    patches: tuple[PatchInfo, ...] = ()


@dataclass(frozen=True)
class PipelineStep:
    """Composition function step declared in Pipeline mode."""

    step: str
    function_name: str


@dataclass(frozen=True)
class CompositionDocument:
    """Parsed Composition header plus its raw ``spec`` mapping."""

    name: str
    composite_api_version: str
    composite_kind: str
    mode: str
    spec: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> CompositionDocument:
        """Build the document model from a parsed manifest."""
        spec = as_mapping(raw.get("spec"))
        return cls(
            name=as_string(lookup_path(raw, "metadata.name")) or UNKNOWN_NAME,
            composite_api_version=as_string(lookup_path(spec, "compositeTypeRef.apiVersion")),
            composite_kind=as_string(lookup_path(spec, "compositeTypeRef.kind")),
            mode=as_string(spec.get("mode")),
            spec=spec,
        )
