"""JSON rendering of a query report."""

from __future__ import annotations

import json

from filterprobe.constants.reporting import REPORT_SCHEMA_VERSION
from filterprobe.matching import render
from filterprobe.model import AssetReport, QueryReport
from filterprobe.types import AssetReportPayload, CosmeticMatchPayload, QueryReportPayload


def build_report_payload(report: QueryReport) -> QueryReportPayload:
    """Convert ``report`` into a JSON-serializable payload."""
    return {
        "schema_version": REPORT_SCHEMA_VERSION,
        "artifact_url": report.artifact_url,
        "version": report.version,
        "url": report.target.url,
        "source_url": report.target.source_url,
        "environment": sorted(report.environment),
        "assets": [_asset_payload(asset) for asset in report.assets],
    }


def render_json(report: QueryReport) -> str:
    return json.dumps(build_report_payload(report), indent=2, sort_keys=True)


def _asset_payload(asset: AssetReport) -> AssetReportPayload:
    payload: AssetReportPayload = {
        "path": asset.path,
        "kind": asset.kind.value,
        "size_kb": asset.size_kb,
        "status": asset.status,
    }
    if asset.reason:
        payload["reason"] = asset.reason
    if asset.result is not None:
        payload["network_filters"] = sorted(render(item) for item in asset.result.network_filters)
        payload["cosmetic_filters"] = [
            CosmeticMatchPayload(
                filter=render(hit.filter),
                exception=render(hit.exception) if hit.exception is not None else None,
            )
            for hit in asset.result.cosmetic_matches
        ]
    return payload
