"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import CompositionSettings, Configuration, XRDSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str | None = None) -> Configuration:
    """Load and validate the configuration file; None yields built-in defaults."""
    if config_path is None:
        return Configuration()

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return Configuration(
        path=path,
        xrd=_parse_xrd_section(parsed.get("xrd")),
        composition=_parse_composition_section(parsed.get("composition")),
    )


def _parse_xrd_section(value: Any) -> XRDSettings:
    section = _optional_mapping(value, "xrd")
    return XRDSettings(
        show_nested=_optional_bool(section.get("show_nested"), "xrd.show_nested", default=True)
    )


def _parse_composition_section(value: Any) -> CompositionSettings:
    section = _optional_mapping(value, "composition")
    return CompositionSettings(
        show_patches=_optional_bool(
            section.get("show_patches"), "composition.show_patches", default=True
        )
    )


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_bool(value: Any, field_name: str, *, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
