"""Query orchestration package."""

from __future__ import annotations

from typing import Any

__all__ = ["QueryOptions", "query_extension"]


def __getattr__(name: str) -> Any:
    """Lazily expose pipeline APIs to avoid import cycles at package import time."""
    if name in __all__:
        from . import query

        return getattr(query, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
