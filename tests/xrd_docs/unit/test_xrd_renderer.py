"""XRD markdown renderer tests."""

from __future__ import annotations

from crossplane_docs.schema_fields.schema_models import Field, SchemaNode
from crossplane_docs.xrd_docs.xrd_models import PrinterColumn, XRDDocument, XRDNames, XRDVersion
from crossplane_docs.xrd_docs.xrd_renderer import render_xrd_markdown


def _document(claim: bool = False) -> XRDDocument:
    return XRDDocument(
        name="xwidgets.example.org",
        group="example.org",
        names=XRDNames(kind="XWidget", plural="xwidgets"),
        claim_names=XRDNames(kind="Widget", plural="widgets") if claim else None,
        versions=(),
    )


def _version(description: str = "", printer_columns: tuple[PrinterColumn, ...] = ()) -> XRDVersion:
    return XRDVersion(
        name="v1",
        served=True,
        referenceable=True,
        schema=SchemaNode(type="object", description=description),
        printer_columns=printer_columns,
    )


def test_renders_sections_in_order() -> None:
    status = [Field("ready", "boolean", "Ready flag.", False, "", "")]
    markdown = render_xrd_markdown(_document(claim=True), _version("A widget."), [], status)

    headings = [
        "# XWidget",
        "A widget.",
        "**API Group:** example.org  ",
        "## Spec Fields",
        "## Status Fields",
        "## Example",
    ]
    positions = [markdown.index(heading) for heading in headings]
    assert positions == sorted(positions)


def test_spec_rows_render_marks_defaults_and_constraints() -> None:
    fields = [
        Field("size", "integer", "Size.", True, "", "Min: 1"),
        Field("tier", "string", "", False, "gold", "", level=1),
    ]

    markdown = render_xrd_markdown(_document(), _version(), fields, [])

    assert "| Name | Type | Description | Required | Default | Constraints |" in markdown
    assert "|------|------|-------------|----------|---------|-------------|" in markdown
    assert "| size | integer | Size. | ✅ | - | Min: 1 |" in markdown
    assert "| &nbsp;&nbsp;↳ tier | string |  | ❌ | `gold` | - |" in markdown


def test_status_rows_only_show_name_type_and_description() -> None:
    status = [Field("endpoint", "string", "Endpoint.", True, "x", "y", level=2)]

    markdown = render_xrd_markdown(_document(), _version(), [], status)

    assert "| Name | Type | Description |\n|------|------|-------------|" in markdown
    assert "| &nbsp;&nbsp;&nbsp;&nbsp;↳ endpoint | string | Endpoint. |" in markdown


def test_multiline_descriptions_stay_on_one_table_row() -> None:
    fields = [Field("mode", "string", "First line.\nUses a|b syntax.", False, "", "")]

    markdown = render_xrd_markdown(_document(), _version(), fields, [])

    assert "| mode | string | First line. Uses a\\|b syntax. | ❌ | - | - |" in markdown


def test_printer_columns_are_rendered_when_declared() -> None:
    version = _version(printer_columns=(PrinterColumn("READY", "string", ".status.ready"),))

    with_columns = render_xrd_markdown(_document(), version, [], [])
    without_columns = render_xrd_markdown(_document(), _version(), [], [])

    assert "## Printer Columns" in with_columns
    assert "| READY | string | `.status.ready` |" in with_columns
    assert "## Printer Columns" not in without_columns


def test_empty_description_is_skipped() -> None:
    markdown = render_xrd_markdown(_document(), _version(), [], [])

    assert markdown.startswith("# XWidget\n\n**API Group:** example.org  \n")
