"""Markdown writer tests."""

from __future__ import annotations

from pathlib import Path

from crossplane_docs.output_writing.markdown_writer import write_markdown


def test_write_markdown_creates_parent_directories(tmp_path: Path) -> None:
    output_path = tmp_path / "docs" / "api" / "README.md"

    written_path = write_markdown("# XWidget\n", output_path)

    assert written_path == output_path.resolve()
    assert output_path.read_text(encoding="utf-8") == "# XWidget\n"


def test_write_markdown_overwrites_existing_file(tmp_path: Path) -> None:
    output_path = tmp_path / "README.md"
    output_path.write_text("old", encoding="utf-8")

    write_markdown("new", output_path)

    assert output_path.read_text(encoding="utf-8") == "new"
