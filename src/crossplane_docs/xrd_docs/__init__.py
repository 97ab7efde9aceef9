"""XRD documentation exports."""

from .xrd_generator import (
    XRDGenerationError,
    XRDOptions,
    generate_xrd_documentation,
    select_version,
)
from .xrd_models import PrinterColumn, XRDDocument, XRDNames, XRDVersion
from .xrd_renderer import render_xrd_markdown

__all__ = [
    "PrinterColumn",
    "XRDDocument",
    "XRDGenerationError",
    "XRDNames",
    "XRDOptions",
    "XRDVersion",
    "generate_xrd_documentation",
    "render_xrd_markdown",
    "select_version",
]
