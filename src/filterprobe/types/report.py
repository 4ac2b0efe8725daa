"""Typed JSON report payload structures."""

from __future__ import annotations

from typing import NotRequired, TypedDict


class CosmeticMatchPayload(TypedDict):
    """Rendered cosmetic filter and its overriding exception."""

    filter: str
    exception: str | None


class AssetReportPayload(TypedDict):
    """Per-asset section of the JSON report."""

    path: str
    kind: str
    size_kb: int
    status: str
    reason: NotRequired[str]
    network_filters: NotRequired[list[str]]
    cosmetic_filters: NotRequired[list[CosmeticMatchPayload]]


class QueryReportPayload(TypedDict):
    """Top-level JSON report."""

    schema_version: str
    artifact_url: str
    version: str
    url: str
    source_url: str | None
    environment: list[str]
    assets: list[AssetReportPayload]
