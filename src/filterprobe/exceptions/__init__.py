"""Shared exception hierarchy for filterprobe."""

from __future__ import annotations

from .base import FilterProbeError
from .config import ConfigError
from .environment import ToolNotFoundError
from .io import ExtractionError, FetchError
from .library import BuildError, LibraryLoadError, VersionResolutionError

__all__ = [
    "BuildError",
    "ConfigError",
    "ExtractionError",
    "FetchError",
    "FilterProbeError",
    "LibraryLoadError",
    "ToolNotFoundError",
    "VersionResolutionError",
]
