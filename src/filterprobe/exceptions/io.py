"""Fetch and archive exceptions."""

from __future__ import annotations

from filterprobe.exceptions.base import FilterProbeError


class FetchError(FilterProbeError, OSError):
    """Raised when a URL or local file cannot be retrieved."""


class ExtractionError(FilterProbeError, ValueError):
    """Raised when an artifact archive or its manifest cannot be read."""
