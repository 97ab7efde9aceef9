"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class XRDSettings:
    """Defaults for the xrd command."""

    show_nested: bool = True


@dataclass(frozen=True)
class CompositionSettings:
    """Defaults for the composition command."""

    show_patches: bool = True


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None = None
    xrd: XRDSettings = field(default_factory=XRDSettings)
    composition: CompositionSettings = field(default_factory=CompositionSettings)
