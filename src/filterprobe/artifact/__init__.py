"""Artifact acquisition: release lookup and rule asset extraction."""

from __future__ import annotations

from .extractor import list_tree, pull, scratch_directory
from .releases import latest_artifact_url

__all__ = ["latest_artifact_url", "list_tree", "pull", "scratch_directory"]
