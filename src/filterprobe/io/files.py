"""Byte and JSON helpers with atomic persistence."""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path


def load_json_bytes(data: bytes | str) -> object:
    """Parse JSON from raw bytes or already-decoded text."""
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    return json.loads(data)


def write_bytes_atomic(
    *,
    path: Path,
    payload: bytes,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Persist bytes atomically by writing to a temp file then renaming."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(payload)
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    assert temp_name is not None
    os.replace(temp_name, path)
