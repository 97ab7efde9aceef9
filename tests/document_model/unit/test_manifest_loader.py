"""Manifest loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from crossplane_docs.document_model.manifest_loader import (
    DocumentKind,
    ManifestError,
    detect_document_kind,
    load_manifest,
)


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_load_manifest_parses_yaml_mapping(tmp_path: Path) -> None:
    manifest_path = _write_file(
        tmp_path / "xrd.yaml",
        """
apiVersion: apiextensions.crossplane.io/v1
kind: CompositeResourceDefinition
metadata:
  name: xexamples.example.org
""",
    )

    manifest = load_manifest(manifest_path)

    assert manifest["kind"] == "CompositeResourceDefinition"
    assert manifest["metadata"]["name"] == "xexamples.example.org"


def test_load_manifest_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ManifestError, match="file not found"):
        load_manifest(tmp_path / "missing.yaml")


def test_load_manifest_reports_invalid_yaml(tmp_path: Path) -> None:
    manifest_path = _write_file(tmp_path / "broken.yaml", "spec: [unclosed\n")

    with pytest.raises(ManifestError, match="failed to parse YAML"):
        load_manifest(manifest_path)


def test_load_manifest_rejects_non_mapping_root(tmp_path: Path) -> None:
    manifest_path = _write_file(tmp_path / "list.yaml", "- a\n- b\n")

    with pytest.raises(ManifestError, match="must be a mapping"):
        load_manifest(manifest_path)


def test_detect_document_kind_classifies_supported_kinds() -> None:
    assert detect_document_kind({"kind": "CompositeResourceDefinition"}) is DocumentKind.XRD
    assert detect_document_kind({"kind": "Composition"}) is DocumentKind.COMPOSITION


def test_detect_document_kind_rejects_other_kinds() -> None:
    with pytest.raises(ManifestError, match="Unsupported manifest kind 'Deployment'"):
        detect_document_kind({"kind": "Deployment"})
    with pytest.raises(ManifestError, match="<missing>"):
        detect_document_kind({})
