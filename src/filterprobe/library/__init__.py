"""Resolution, building and loading of the external filtering library."""

from __future__ import annotations

from .loader import Engine, FilterLibrary, NodeFilterLibrary, load_library
from .resolver import LibraryResolver, normalize_version

__all__ = [
    "Engine",
    "FilterLibrary",
    "LibraryResolver",
    "NodeFilterLibrary",
    "load_library",
    "normalize_version",
]
