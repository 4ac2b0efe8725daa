"""Configuration loading and normalization for filterprobe.

This package facade re-exports the public names so callers can use
``from filterprobe.config import ...``.
"""

from __future__ import annotations

from filterprobe.config.loader import load_config
from filterprobe.config.model import FilterProbeConfig, ResolverConfig

__all__ = [
    "FilterProbeConfig",
    "ResolverConfig",
    "load_config",
]
