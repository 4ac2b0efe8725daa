"""Locate the newest published extension build when no artifact is given."""

from __future__ import annotations

import logging
from typing import Any

import requests

from filterprobe.exceptions import ConfigError, FetchError

logger = logging.getLogger(__name__)


def latest_artifact_url(
    *,
    releases_url: str,
    marker: str,
    session: Any,
    timeout: float | None = None,
) -> str:
    """Return the download URL of the ``marker`` build in the newest release.

    The release listing is always fetched fresh; it is the one request that
    bypasses the content cache.
    """
    try:
        response = session.get(releases_url, timeout=timeout)
        response.raise_for_status()
        releases = response.json()
    except requests.RequestException as exc:
        raise FetchError(f"Failed to fetch release listing {releases_url}: {exc}") from exc
    except ValueError as exc:
        raise FetchError(f"Release listing {releases_url} is not valid JSON: {exc}") from exc

    if not isinstance(releases, list) or not releases or not isinstance(releases[0], dict):
        raise ConfigError(f"No releases are listed at {releases_url}")

    latest = releases[0]
    tag_name = latest.get("tag_name", "<unknown>")
    logger.warning('looking for the "%s" build of "%s"...', marker, tag_name)

    for asset in latest.get("assets") or []:
        download_url = asset.get("browser_download_url") if isinstance(asset, dict) else None
        if isinstance(download_url, str) and marker in download_url:
            return download_url

    raise ConfigError(f'Failed to locate the "{marker}" artifact in the release of "{tag_name}"')
