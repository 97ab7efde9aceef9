"""XRD documentation generation service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from crossplane_docs.schema_fields.field_extraction import (
    extract_fields,
    flatten_fields,
    sort_spec_fields,
    sort_status_fields,
)

from .xrd_models import XRDDocument, XRDVersion
from .xrd_renderer import render_xrd_markdown

logger = logging.getLogger(__name__)

SPEC_SECTION = "spec"
STATUS_SECTION = "status"


class XRDGenerationError(Exception):
    """Raised when an XRD lacks the structure required to document it."""


@dataclass(frozen=True)
class XRDOptions:
    """Rendering options for XRD documentation."""

    show_nested: bool = True


def select_version(versions: Sequence[XRDVersion]) -> XRDVersion:
    """Return the first served version, falling back to the first declared one."""
    if not versions:
        raise XRDGenerationError("no versions found in XRD")
    for version in versions:
        if version.served:
            return version
    return versions[0]


def generate_xrd_documentation(
    manifest: Mapping[str, Any] | XRDDocument, options: XRDOptions | None = None
) -> str:
    """Render markdown documentation for one CompositeResourceDefinition."""
    resolved_options = options or XRDOptions()
    document = manifest if isinstance(manifest, XRDDocument) else XRDDocument.from_mapping(manifest)
    version = select_version(document.versions)
    logger.debug(
        "Documenting %s version %s (served=%s)",
        document.names.kind or "<unnamed>",
        version.name,
        version.served,
    )

    spec_fields = extract_fields(
        version.schema, SPEC_SECTION, show_nested=resolved_options.show_nested
    )
    status_fields = extract_fields(
        version.schema, STATUS_SECTION, show_nested=resolved_options.show_nested
    )
    logger.debug(
        "Extracted %d spec and %d status top-level fields", len(spec_fields), len(status_fields)
    )

    return render_xrd_markdown(
        document,
        version,
        flatten_fields(sort_spec_fields(spec_fields)),
        flatten_fields(sort_status_fields(status_fields)),
    )
