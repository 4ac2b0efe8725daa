"""End-to-end tests for the query-ext pipeline."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from filterprobe.config import FilterProbeConfig
from filterprobe.constants.reporting import STATUS_MATCHED, STATUS_SKIPPED, STATUS_UNSUPPORTED
from filterprobe.exceptions import ConfigError
from filterprobe.pipeline import QueryOptions, query_extension

RELEASES_URL = "https://api.example.com/releases"
ARTIFACT_URL = "https://dl.example.com/ghostery-chromium-9.9.9.zip"


class StubResolver:
    """Resolver double returning a preloaded library and recording refs."""

    def __init__(self, library) -> None:
        self.library = library
        self.refs: list[str] = []

    def resolve(self, ref: str):
        self.refs.append(ref)
        return self.library


def _config(tmp_path: Path) -> FilterProbeConfig:
    return FilterProbeConfig(cache_dir=tmp_path / "cache", releases_url=RELEASES_URL)


def test_query_matches_one_network_filter(tmp_path: Path, make_artifact, fake_library, tiny_rules) -> None:
    archive = make_artifact(
        {"manifest.json": json.dumps({"version": "9.9.9"}), "rule_resources/ads.dat": tiny_rules}
    )
    resolver = StubResolver(fake_library)

    report = query_extension(
        QueryOptions(url="https://ads.example.com/pixel.gif", artifact=f"file://{archive}", env="chromium"),
        _config(tmp_path),
        resolver=resolver,
    )

    assert resolver.refs == ["tags/v9.9.9"]
    assert report.version == "9.9.9"
    assert len(report.assets) == 1
    asset = report.assets[0]
    assert asset.status == STATUS_MATCHED
    assert asset.result is not None
    assert len(asset.result.network_filters) == 1
    assert asset.result.cosmetic_matches == ()
    assert report.environment == frozenset({"ext_ghostery", "env_chromium", "env_edge"})
    assert list((tmp_path / "cache").glob("*.tmp.d")) == []


def test_query_records_unsupported_and_skipped_assets(
    tmp_path: Path, make_artifact, fake_library, tiny_rules
) -> None:
    archive = make_artifact(
        {
            "manifest.json": json.dumps({"version": "9.9.9"}),
            "rule_resources/ads.dat": tiny_rules,
            "rule_resources/dnr-ads.json": "[]",
            "rule_resources/lang-de.dat": tiny_rules,
        }
    )

    report = query_extension(
        QueryOptions(url="https://ads.example.com/", artifact=f"file://{archive}", skip_regionals=True),
        _config(tmp_path),
        resolver=StubResolver(fake_library),
    )

    statuses = {asset.path: asset.status for asset in report.assets}
    assert statuses == {
        "rule_resources/ads.dat": STATUS_MATCHED,
        "rule_resources/dnr-ads.json": STATUS_UNSUPPORTED,
        "rule_resources/lang-de.dat": STATUS_SKIPPED,
    }
    assert len(fake_library.engines) == 1


def test_query_defaults_to_latest_release(
    tmp_path: Path, make_artifact, counting_session, fake_library, tiny_rules
) -> None:
    archive = make_artifact(
        {"manifest.json": json.dumps({"version": "9.9.9"}), "rule_resources/ads.dat": tiny_rules}
    )
    counting_session.payloads[RELEASES_URL] = json.dumps(
        [{"tag_name": "v9.9.9", "assets": [{"browser_download_url": ARTIFACT_URL}]}]
    ).encode("utf-8")
    counting_session.payloads[ARTIFACT_URL] = archive.read_bytes()

    report = query_extension(
        QueryOptions(url="https://ads.example.com/"),
        _config(tmp_path),
        session=counting_session,
        resolver=StubResolver(fake_library),
    )

    assert report.artifact_url == ARTIFACT_URL
    assert counting_session.calls == [RELEASES_URL, ARTIFACT_URL]


def test_query_requires_target_url(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="target URL"):
        query_extension(QueryOptions(url=""), _config(tmp_path))


def test_query_logs_loading_only_for_binary_assets(
    tmp_path: Path, make_artifact, fake_library, tiny_rules, caplog: pytest.LogCaptureFixture
) -> None:
    archive = make_artifact(
        {
            "manifest.json": json.dumps({"version": "9.9.9"}),
            "rule_resources/ads.dat": tiny_rules,
            "rule_resources/dnr-ads.json": "[]",
        }
    )

    with caplog.at_level(logging.INFO, logger="filterprobe.pipeline.query"):
        query_extension(
            QueryOptions(url="https://ads.example.com/", artifact=f"file://{archive}"),
            _config(tmp_path),
            resolver=StubResolver(fake_library),
        )

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith('loading "rule_resources/ads.dat"') for message in messages)
    assert not any(message.startswith('loading "rule_resources/dnr-ads.json"') for message in messages)
    assert any(message.startswith('skipping "rule_resources/dnr-ads.json"') for message in messages)
    assert not any(message.startswith("matched ") for message in messages)
