"""Environment-conditioned filter matching and rendering."""

from __future__ import annotations

from .harness import build_environment_flags, match
from .stringify import render

__all__ = ["build_environment_flags", "match", "render"]
