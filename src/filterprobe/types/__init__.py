"""Shared type aliases for filterprobe."""

from .report import AssetReportPayload, CosmeticMatchPayload, QueryReportPayload

__all__ = [
    "AssetReportPayload",
    "CosmeticMatchPayload",
    "QueryReportPayload",
]
