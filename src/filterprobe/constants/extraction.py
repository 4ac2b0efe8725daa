"""Artifact layout conventions for packaged extension builds."""

from __future__ import annotations

MANIFEST_FILENAME: str = "manifest.json"
MANIFEST_VERSION_KEY: str = "version"
RULE_RESOURCES_DIRNAME: str = "rule_resources"
BINARY_RULES_SUFFIX: str = ".dat"
JSON_RULES_SUFFIX: str = ".json"
REGIONAL_PATH_MARKER: str = "lang"
LISTING_MARKER_SUFFIX: str = ":"
LISTING_ROOT_MARKER: str = "."
