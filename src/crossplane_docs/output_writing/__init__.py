"""Output writing exports."""

from .markdown_writer import write_markdown

__all__ = ["write_markdown"]
