"""Document model exports."""

from .manifest_loader import (
    COMPOSITION_KIND,
    XRD_KIND,
    DocumentKind,
    ManifestError,
    detect_document_kind,
    load_manifest,
)
from .yaml_values import as_bool, as_mapping, as_number, as_sequence, as_string, lookup_path

__all__ = [
    "COMPOSITION_KIND",
    "XRD_KIND",
    "DocumentKind",
    "ManifestError",
    "detect_document_kind",
    "load_manifest",
    "as_bool",
    "as_mapping",
    "as_number",
    "as_sequence",
    "as_string",
    "lookup_path",
]
