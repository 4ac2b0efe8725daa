"""Pull rule assets and the declared version out of a packaged extension build."""

from __future__ import annotations

import io
import json
import logging
import shutil
import tempfile
import zipfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path, PurePosixPath

from filterprobe.constants.cache import SCRATCH_DIR_PREFIX, SCRATCH_DIR_SUFFIX
from filterprobe.constants.extraction import (
    BINARY_RULES_SUFFIX,
    JSON_RULES_SUFFIX,
    LISTING_MARKER_SUFFIX,
    LISTING_ROOT_MARKER,
    MANIFEST_FILENAME,
    MANIFEST_VERSION_KEY,
    RULE_RESOURCES_DIRNAME,
)
from filterprobe.exceptions import ExtractionError
from filterprobe.io.cache import ContentCache
from filterprobe.model import Asset, AssetKind, ReleaseArtifact

logger = logging.getLogger(__name__)


@contextmanager
def scratch_directory(parent: Path) -> Iterator[Path]:
    """Create a uniquely named directory under ``parent`` and always remove it."""
    parent.mkdir(parents=True, exist_ok=True)
    path = Path(tempfile.mkdtemp(prefix=SCRATCH_DIR_PREFIX, suffix=SCRATCH_DIR_SUFFIX, dir=parent))
    try:
        yield path
    finally:
        shutil.rmtree(path)
        logger.debug("removed scratch directory %s", path)


def list_tree(root: Path) -> list[str]:
    """Return an ``ls -R`` style listing of ``root``.

    Each directory contributes a marker line (``.:``, ``./sub:``) followed by
    its sorted entry names; subdirectories follow their parent depth-first.
    Dot-entries are left out, as ``ls`` does without ``-a``.
    """
    lines: list[str] = []

    def visit(relative: PurePosixPath) -> None:
        entries = sorted(
            (entry for entry in (root / relative).iterdir() if not entry.name.startswith(".")),
            key=lambda entry: entry.name,
        )
        marker = LISTING_ROOT_MARKER if relative == PurePosixPath(".") else f"./{relative.as_posix()}"
        lines.append(f"{marker}{LISTING_MARKER_SUFFIX}")
        lines.extend(entry.name for entry in entries)
        for entry in entries:
            if entry.is_dir() and not entry.is_symlink():
                visit(relative / entry.name)

    visit(PurePosixPath("."))
    return lines


def pull(url: str, *, cache: ContentCache) -> ReleaseArtifact:
    """Download (or reuse) the artifact at ``url`` and collect its rule assets."""
    archive = cache.fetch(url)
    with scratch_directory(cache.cache_dir) as workdir:
        _extract(archive, workdir, url)
        version, assets = _collect(workdir)

    if not version:
        raise ExtractionError(f'No "{MANIFEST_FILENAME}" with a version was found in {url}')

    logger.info("artifact %s declares version %s with %d rule assets", url, version, len(assets))
    return ReleaseArtifact(version=version, assets=tuple(assets))


def _extract(archive: bytes, workdir: Path, url: str) -> None:
    try:
        with zipfile.ZipFile(io.BytesIO(archive)) as bundle:
            bundle.extractall(workdir)
    except (zipfile.BadZipFile, OSError, RuntimeError, EOFError) as exc:
        raise ExtractionError(f"Failed to extract artifact {url}: {exc}") from exc


def _collect(workdir: Path) -> tuple[str, list[Asset]]:
    """Walk the listing, tracking the directory the current entries live in."""
    version = ""
    assets: list[Asset] = []
    prefix = workdir
    for name in list_tree(workdir):
        if not name:
            continue
        if name.endswith(LISTING_MARKER_SUFFIX):
            prefix = workdir / name[: -len(LISTING_MARKER_SUFFIX)]
            continue

        path = prefix / name
        if not path.is_file():
            continue

        if name == MANIFEST_FILENAME:
            version = _read_manifest_version(path, workdir)
            continue

        if prefix.name != RULE_RESOURCES_DIRNAME:
            continue

        relative = path.relative_to(workdir).as_posix()
        if name.endswith(BINARY_RULES_SUFFIX):
            assets.append(Asset(path=relative, kind=AssetKind.RULES_BINARY, data=path.read_bytes()))
        elif name.endswith(JSON_RULES_SUFFIX):
            assets.append(
                Asset(path=relative, kind=AssetKind.RULES_JSON, data=path.read_text(encoding="utf-8", errors="replace"))
            )

    return version, assets


def _read_manifest_version(path: Path, workdir: Path) -> str:
    relative = path.relative_to(workdir).as_posix()
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ExtractionError(f"Invalid manifest {relative}: {exc}") from exc

    version = payload.get(MANIFEST_VERSION_KEY) if isinstance(payload, dict) else None
    if not isinstance(version, str):
        raise ExtractionError(f'Manifest {relative} does not declare a string "{MANIFEST_VERSION_KEY}"')
    return version
