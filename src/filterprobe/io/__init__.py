"""Shared file and network I/O helpers."""

from .cache import ContentCache, cache_key
from .files import load_json_bytes, write_bytes_atomic

__all__ = ["ContentCache", "cache_key", "load_json_bytes", "write_bytes_atomic"]
