"""Markdown table building helpers shared by the XRD and Composition renderers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INDENT_UNIT = "&nbsp;&nbsp;"
INDENT_GLYPH = "↳ "


def indent_name(name: str, level: int) -> str:
    """Prefix a field name with the nesting marker for ``level`` (none at level 0)."""
    if level <= 0:
        return name
    return f"{INDENT_UNIT * level}{INDENT_GLYPH}{name}"


def escape_cell(value: str) -> str:
    """Keep a value on one table row: collapse line breaks and escape pipes."""
    return " ".join(value.split()).replace("|", "\\|")


def render_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> list[str]:
    """Return the lines of a pipe table; cells are emitted as given."""
    lines = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join("-" * (len(header) + 2) for header in headers) + "|",
    ]
    lines.extend("| " + " | ".join(row) + " |" for row in rows)
    return lines
