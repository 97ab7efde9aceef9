"""XRD generation service tests."""

from __future__ import annotations

import pytest
from crossplane_docs.xrd_docs.xrd_generator import (
    XRDGenerationError,
    XRDOptions,
    generate_xrd_documentation,
    select_version,
)
from crossplane_docs.xrd_docs.xrd_models import XRDDocument, XRDVersion


def _version(name: str, *, served: bool, spec_properties: dict | None = None) -> dict:
    return {
        "name": name,
        "served": served,
        "schema": {
            "openAPIV3Schema": {
                "type": "object",
                "properties": {
                    "spec": {"type": "object", "properties": spec_properties or {}},
                },
            }
        },
    }


def _manifest(*versions: dict, claim_kind: str | None = None) -> dict:
    spec: dict = {
        "group": "example.org",
        "names": {"kind": "XWidget", "plural": "xwidgets"},
        "versions": list(versions),
    }
    if claim_kind:
        spec["claimNames"] = {"kind": claim_kind, "plural": claim_kind.lower() + "s"}
    return {
        "apiVersion": "apiextensions.crossplane.io/v1",
        "kind": "CompositeResourceDefinition",
        "metadata": {"name": "xwidgets.example.org"},
        "spec": spec,
    }


def test_select_version_prefers_first_served_version() -> None:
    document = XRDDocument.from_mapping(
        _manifest(
            _version("v1alpha1", served=False),
            _version("v1beta1", served=True),
            _version("v1", served=True),
        )
    )

    assert select_version(document.versions).name == "v1beta1"


def test_select_version_falls_back_to_first_declared_version() -> None:
    document = XRDDocument.from_mapping(
        _manifest(_version("v1alpha1", served=False), _version("v1beta1", served=False))
    )

    assert select_version(document.versions).name == "v1alpha1"


def test_select_version_fails_without_versions() -> None:
    with pytest.raises(XRDGenerationError, match="no versions found in XRD"):
        select_version(())


def test_generate_fails_for_xrd_without_versions() -> None:
    with pytest.raises(XRDGenerationError):
        generate_xrd_documentation(_manifest())


def test_generate_documents_the_served_version_schema() -> None:
    markdown = generate_xrd_documentation(
        _manifest(
            _version("v1alpha1", served=False, spec_properties={"oldField": {"type": "string"}}),
            _version("v1beta1", served=True, spec_properties={"newField": {"type": "string"}}),
        )
    )

    assert "**API Version:** v1beta1" in markdown
    assert "newField" in markdown
    assert "oldField" not in markdown


def test_generate_omits_status_section_when_status_is_empty() -> None:
    markdown = generate_xrd_documentation(
        _manifest(_version("v1", served=True, spec_properties={"size": {"type": "integer"}}))
    )

    assert "## Spec Fields" in markdown
    assert "## Status Fields" not in markdown


def test_generate_respects_show_nested_option() -> None:
    spec_properties = {
        "network": {
            "type": "object",
            "properties": {"cidr": {"type": "string"}},
        }
    }
    manifest = _manifest(_version("v1", served=True, spec_properties=spec_properties))

    nested = generate_xrd_documentation(manifest, XRDOptions(show_nested=True))
    flat = generate_xrd_documentation(manifest, XRDOptions(show_nested=False))

    assert "| &nbsp;&nbsp;↳ cidr | string |" in nested
    assert "cidr" not in flat


def test_generate_uses_claim_kind_in_metadata_and_example() -> None:
    markdown = generate_xrd_documentation(
        _manifest(_version("v1", served=True), claim_kind="Widget")
    )

    assert "**Claim Kind:** Widget  " in markdown
    assert "apiVersion: example.org/v1\nkind: Widget\n" in markdown


def test_generate_uses_composite_kind_in_example_without_claim() -> None:
    markdown = generate_xrd_documentation(_manifest(_version("v1", served=True)))

    assert "**Claim Kind:**" not in markdown
    assert "kind: XWidget\nmetadata:\n  name: example\n" in markdown


def test_generate_accepts_a_parsed_document_model() -> None:
    document = XRDDocument(
        name="xwidgets.example.org",
        group="example.org",
        names=XRDDocument.from_mapping(_manifest()).names,
        claim_names=None,
        versions=(XRDVersion.from_mapping(_version("v2", served=True)),),
    )

    assert generate_xrd_documentation(document).startswith("# XWidget\n")
