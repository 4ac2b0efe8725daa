"""Content cache and scratch directory naming."""

from __future__ import annotations

LOCAL_FILE_SCHEME: str = "file://"
CACHE_WRITE_TMP_SUFFIX: str = ".part"
SCRATCH_DIR_PREFIX: str = "artifact-"
SCRATCH_DIR_SUFFIX: str = ".tmp.d"
