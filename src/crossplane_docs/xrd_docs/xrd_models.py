"""CompositeResourceDefinition entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from crossplane_docs.document_model.yaml_values import (
    as_bool,
    as_mapping,
    as_sequence,
    as_string,
    lookup_path,
)
from crossplane_docs.schema_fields.schema_models import SchemaNode


@dataclass(frozen=True)
class XRDNames:
    """Kind and plural names of a composite resource or its claim."""

    kind: str
    plural: str
    singular: str = ""

    @classmethod
    def from_mapping(cls, raw: Any) -> XRDNames:
        names = as_mapping(raw)
        return cls(
            kind=as_string(names.get("kind")),
            plural=as_string(names.get("plural")),
            singular=as_string(names.get("singular")),
        )


@dataclass(frozen=True)
class PrinterColumn:
    """Additional printer column shown by ``kubectl get``."""

    name: str
    type: str
    json_path: str


@dataclass(frozen=True)
class XRDVersion:
    """One declared version and its OpenAPI schema."""

    name: str
    served: bool
    referenceable: bool
    schema: SchemaNode
    printer_columns: tuple[PrinterColumn, ...] = ()

    @classmethod
    def from_mapping(cls, raw: Any) -> XRDVersion:
        version = as_mapping(raw)
        return cls(
            name=as_string(version.get("name")),
            served=as_bool(version.get("served")),
            referenceable=as_bool(version.get("referenceable")),
            schema=SchemaNode.from_mapping(lookup_path(version, "schema.openAPIV3Schema")),
            printer_columns=tuple(
                PrinterColumn(
                    name=as_string(column.get("name")),
                    type=as_string(column.get("type")),
                    json_path=as_string(column.get("jsonPath")),
                )
                for column in as_sequence(version.get("additionalPrinterColumns"))
                if isinstance(column, Mapping)
            ),
        )


@dataclass(frozen=True)
class XRDDocument:
    """Parsed CompositeResourceDefinition."""

    name: str
    group: str
    names: XRDNames
    claim_names: XRDNames | None
    versions: tuple[XRDVersion, ...]

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> XRDDocument:
        """Build the document model from a parsed manifest."""
        spec = as_mapping(raw.get("spec"))
        claim_names = spec.get("claimNames")
        return cls(
            name=as_string(lookup_path(raw, "metadata.name")),
            group=as_string(spec.get("group")),
            names=XRDNames.from_mapping(spec.get("names")),
            claim_names=(
                XRDNames.from_mapping(claim_names) if isinstance(claim_names, Mapping) else None
            ),
            versions=tuple(
                XRDVersion.from_mapping(version)
                for version in as_sequence(spec.get("versions"))
                if isinstance(version, Mapping)
            ),
        )
