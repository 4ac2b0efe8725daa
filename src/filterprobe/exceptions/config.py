"""Configuration-related exceptions."""

from __future__ import annotations

from filterprobe.exceptions.base import FilterProbeError


class ConfigError(FilterProbeError, ValueError):
    """Raised when tool configuration or CLI options are invalid."""
