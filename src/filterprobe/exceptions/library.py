"""Filtering library resolution and loading exceptions."""

from __future__ import annotations

from filterprobe.exceptions.base import FilterProbeError


class VersionResolutionError(FilterProbeError, ValueError):
    """Raised when the library version cannot be read from an upstream manifest."""


class BuildError(FilterProbeError, RuntimeError):
    """Raised when an external build or install step exits unsuccessfully."""


class LibraryLoadError(FilterProbeError, RuntimeError):
    """Raised when a built library cannot be loaded or driven."""
