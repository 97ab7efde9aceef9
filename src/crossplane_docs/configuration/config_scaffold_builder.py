"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = ".crossplane-docs.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration for crossplane-docs.
# Pass it with --config; command line flags override every value below.

xrd:
  # Expand nested object fields into indented rows of the Spec/Status tables.
  show_nested: true

composition:
  # Add a Field Mappings section listing every patch of every managed resource.
  show_patches: true
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with the default values and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
