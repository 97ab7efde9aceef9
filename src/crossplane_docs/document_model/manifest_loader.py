"""Manifest loading service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from .yaml_values import as_string

logger = logging.getLogger(__name__)

XRD_KIND = "CompositeResourceDefinition"
COMPOSITION_KIND = "Composition"


class ManifestError(Exception):
    """Raised when a manifest file cannot be read or is not a usable document."""


class DocumentKind(str, Enum):
    """Crossplane document kinds that can be documented."""

    XRD = "xrd"
    COMPOSITION = "composition"


def load_manifest(manifest_path: Path | str) -> Mapping[str, Any]:
    """Read and parse one YAML manifest into a mapping."""
    path = Path(manifest_path)
    if not path.is_file():
        raise ManifestError(f"file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"failed to read file: {exc}") from exc

    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ManifestError(f"failed to parse YAML in {path}: {exc}") from exc

    if not isinstance(parsed, Mapping):
        raise ManifestError(f"Manifest root must be a mapping: {path}")

    logger.debug("Loaded manifest %s (kind=%s)", path, as_string(parsed.get("kind")) or "<none>")
    return parsed


def detect_document_kind(document: Mapping[str, Any]) -> DocumentKind:
    """Classify a parsed manifest by its ``kind``."""
    kind = as_string(document.get("kind"))
    if kind == XRD_KIND:
        return DocumentKind.XRD
    if kind == COMPOSITION_KIND:
        return DocumentKind.COMPOSITION
    raise ManifestError(
        f"Unsupported manifest kind '{kind or '<missing>'}'; "
        f"expected {XRD_KIND} or {COMPOSITION_KIND}."
    )
