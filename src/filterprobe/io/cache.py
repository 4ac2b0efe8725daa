"""Content-addressed byte cache for everything fetched over the network.

Entries are keyed by the MD5 digest of the source URL and never expire:
once a URL has been downloaded, later runs reuse the stored bytes even
when the upstream file has changed since. There is no locking; concurrent
runs against the same cache directory are unsafe.
"""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Any

import requests

from filterprobe.constants.branding import HTTP_USER_AGENT
from filterprobe.constants.cache import CACHE_WRITE_TMP_SUFFIX, LOCAL_FILE_SCHEME
from filterprobe.exceptions import FetchError
from filterprobe.io.files import write_bytes_atomic

logger = logging.getLogger(__name__)


def cache_key(url: str) -> str:
    """Return the stable cache key for ``url``."""
    return hashlib.md5(url.encode("utf-8")).hexdigest()


class ContentCache:
    """Memoizing fetcher backed by a directory of hash-named files."""

    def __init__(
        self,
        cache_dir: Path,
        *,
        session: Any | None = None,
        timeout: float | None = None,
    ) -> None:
        self.cache_dir = cache_dir
        self._session = session
        self._timeout = timeout

    @property
    def session(self) -> Any:
        if self._session is None:
            self._session = requests.Session()
            self._session.headers["User-Agent"] = HTTP_USER_AGENT
        return self._session

    def path_for(self, url: str) -> Path:
        """Return where the bytes for ``url`` are (or would be) stored."""
        return self.cache_dir / cache_key(url)

    def fetch(self, url: str) -> bytes:
        """Return the bytes behind ``url``, downloading them at most once."""
        if url.startswith(LOCAL_FILE_SCHEME):
            local_path = Path(url[len(LOCAL_FILE_SCHEME) :])
            try:
                return local_path.read_bytes()
            except OSError as exc:
                raise FetchError(f"Cannot read local file {local_path}: {exc}") from exc

        path = self.path_for(url)
        if path.is_file():
            logger.debug("cache hit for %s (%s)", url, path.name)
            return path.read_bytes()

        logger.debug("cache miss for %s, downloading", url)
        try:
            response = self.session.get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise FetchError(f"Failed to fetch {url}: {exc}") from exc

        payload = response.content
        write_bytes_atomic(
            path=path,
            payload=payload,
            temp_prefix=f".{path.name}.",
            temp_suffix=CACHE_WRITE_TMP_SUFFIX,
        )
        return payload
