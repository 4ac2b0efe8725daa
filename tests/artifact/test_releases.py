"""Tests for locating the newest published extension build."""

from __future__ import annotations

import json

import pytest

from filterprobe.artifact import latest_artifact_url
from filterprobe.exceptions import ConfigError, FetchError

RELEASES_URL = "https://api.example.com/releases"


def _listing(*releases: dict[str, object]) -> bytes:
    return json.dumps(list(releases)).encode("utf-8")


def test_latest_artifact_url_picks_marker_asset(counting_session) -> None:
    counting_session.payloads[RELEASES_URL] = _listing(
        {
            "tag_name": "v10.4.3",
            "assets": [
                {"browser_download_url": "https://dl.example.com/ghostery-firefox.zip"},
                {"browser_download_url": "https://dl.example.com/ghostery-chromium.zip"},
            ],
        },
        {"tag_name": "v10.4.2", "assets": []},
    )

    url = latest_artifact_url(releases_url=RELEASES_URL, marker="ghostery-chromium", session=counting_session)

    assert url == "https://dl.example.com/ghostery-chromium.zip"


def test_latest_artifact_url_is_never_cached(counting_session) -> None:
    counting_session.payloads[RELEASES_URL] = _listing(
        {"tag_name": "v1", "assets": [{"browser_download_url": "https://dl.example.com/ghostery-chromium.zip"}]}
    )

    latest_artifact_url(releases_url=RELEASES_URL, marker="ghostery-chromium", session=counting_session)
    latest_artifact_url(releases_url=RELEASES_URL, marker="ghostery-chromium", session=counting_session)

    assert counting_session.calls == [RELEASES_URL, RELEASES_URL]


def test_latest_artifact_url_without_marker_asset(counting_session) -> None:
    counting_session.payloads[RELEASES_URL] = _listing(
        {"tag_name": "v10.4.3", "assets": [{"browser_download_url": "https://dl.example.com/ghostery-firefox.zip"}]}
    )

    with pytest.raises(ConfigError, match='release of "v10.4.3"'):
        latest_artifact_url(releases_url=RELEASES_URL, marker="ghostery-chromium", session=counting_session)


def test_latest_artifact_url_empty_listing(counting_session) -> None:
    counting_session.payloads[RELEASES_URL] = _listing()

    with pytest.raises(ConfigError, match="No releases"):
        latest_artifact_url(releases_url=RELEASES_URL, marker="ghostery-chromium", session=counting_session)


def test_latest_artifact_url_http_failure(counting_session) -> None:
    with pytest.raises(FetchError):
        latest_artifact_url(releases_url=RELEASES_URL, marker="ghostery-chromium", session=counting_session)
