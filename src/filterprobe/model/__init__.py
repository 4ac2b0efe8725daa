"""Core data models for filterprobe."""

from .entities import (
    Asset,
    AssetKind,
    AssetReport,
    CosmeticMatch,
    Filter,
    MatchResult,
    MatchTarget,
    QueryReport,
    ReleaseArtifact,
    ScriptInjection,
    UnsupportedAsset,
)

__all__ = [
    "Asset",
    "AssetKind",
    "AssetReport",
    "CosmeticMatch",
    "Filter",
    "MatchResult",
    "MatchTarget",
    "QueryReport",
    "ReleaseArtifact",
    "ScriptInjection",
    "UnsupportedAsset",
]
