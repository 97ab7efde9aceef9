"""Markdown rendering helpers exports."""

from .table_cells import INDENT_GLYPH, INDENT_UNIT, escape_cell, indent_name, render_table

__all__ = ["INDENT_GLYPH", "INDENT_UNIT", "escape_cell", "indent_name", "render_table"]
