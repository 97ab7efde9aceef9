"""Markdown file writer service."""

from __future__ import annotations

from pathlib import Path


def write_markdown(markdown: str, output_path: Path | str) -> Path:
    """Write generated markdown to ``output_path`` and return the resolved path."""
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(markdown, encoding="utf-8")
    return destination.resolve()
