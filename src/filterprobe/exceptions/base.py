"""Root exception for filterprobe."""

from __future__ import annotations


class FilterProbeError(Exception):
    """Base class for all errors raised by filterprobe."""
