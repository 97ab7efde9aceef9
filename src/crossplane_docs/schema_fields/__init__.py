"""Schema field extraction exports."""

from .field_extraction import extract_fields, flatten_fields, sort_spec_fields, sort_status_fields
from .field_formatting import format_constraints, format_default, format_type, format_value
from .schema_models import Field, SchemaNode

__all__ = [
    "Field",
    "SchemaNode",
    "extract_fields",
    "flatten_fields",
    "sort_spec_fields",
    "sort_status_fields",
    "format_constraints",
    "format_default",
    "format_type",
    "format_value",
]
