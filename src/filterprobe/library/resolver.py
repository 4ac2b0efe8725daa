"""Resolve the exact filtering library build an extension release was made with.

The resolver reads the library dependency from the extension's
``package.json`` at a given ref, then loads a prebuilt copy from the cache
or clones, checks out, builds and installs that version from source.

The source checkout under ``<cache_root>/adblocker`` is shared between
versions. Resolving two versions concurrently against one cache root can
race a checkout against a build; only one resolution should run at a time.
"""

from __future__ import annotations

import json
import logging
import re
import shutil
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TypeAlias

from filterprobe.config import ResolverConfig
from filterprobe.constants.library import (
    DIST_DIRNAME,
    GIT_COMMAND,
    LIBRARY_DIR_TEMPLATE,
    LIBRARY_STAGING_SUFFIX,
    LIBRARY_TAG_TEMPLATE,
    PACKAGE_DESCRIPTOR,
    SOURCE_CHECKOUT_DIRNAME,
)
from filterprobe.exceptions import BuildError, VersionResolutionError
from filterprobe.io import ContentCache, load_json_bytes
from filterprobe.library.loader import FilterLibrary, load_library
from filterprobe.library.tools import require_tool, run_command

logger = logging.getLogger(__name__)

_NON_VERSION_CHARS = re.compile(r"[^\d.]")

CommandRunner: TypeAlias = Callable[[Sequence[str], Path], object]
LibraryLoader: TypeAlias = Callable[[Path, str], FilterLibrary]


def normalize_version(spec: str) -> str:
    """Strip every character that is not a digit or a period."""
    return _NON_VERSION_CHARS.sub("", spec)


class LibraryResolver:
    """Turns an extension ref into a loaded library instance."""

    def __init__(
        self,
        config: ResolverConfig,
        cache: ContentCache,
        *,
        runner: CommandRunner = run_command,
        loader: LibraryLoader = load_library,
        which: Callable[[str], str] = require_tool,
    ) -> None:
        self.config = config
        self._cache = cache
        self._runner = runner
        self._loader = loader
        self._which = which
        self._loaded: dict[str, FilterLibrary] = {}

    def resolve(self, ref: str) -> FilterLibrary:
        """Return the library build matching the dependency declared at ``ref``."""
        version = self.library_version(ref)
        if version in self._loaded:
            return self._loaded[version]

        library_dir = self.library_dir(version)
        if library_dir.is_dir():
            logger.info("using cached library %s from %s", version, library_dir)
        else:
            logger.warning("library %s is not cached, building from source...", version)
            self._build(version, library_dir)

        library = self._loader(library_dir, version)
        self._loaded[version] = library
        return library

    def library_version(self, ref: str) -> str:
        """Read and normalize the library version pinned by the extension at ``ref``."""
        manifest_url = self.config.manifest_url_template.format(ref=ref)
        raw = self._cache.fetch(manifest_url)
        try:
            manifest = load_json_bytes(raw)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise VersionResolutionError(f"Invalid package manifest at {manifest_url}: {exc}") from exc

        dependencies = manifest.get("dependencies") if isinstance(manifest, dict) else None
        declared = dependencies.get(self.config.dependency) if isinstance(dependencies, dict) else None
        if not isinstance(declared, str):
            raise VersionResolutionError(
                f'Cannot find "{self.config.dependency}" in the "{PACKAGE_DESCRIPTOR}" file at {manifest_url}'
            )

        version = normalize_version(declared)
        if not version.strip("."):
            raise VersionResolutionError(
                f'Dependency "{self.config.dependency}" at {manifest_url} has no usable version: {declared!r}'
            )
        logger.debug("extension ref %s pins %s %s", ref, self.config.dependency, version)
        return version

    def library_dir(self, version: str) -> Path:
        return self.config.cache_root / LIBRARY_DIR_TEMPLATE.format(version=version)

    @property
    def source_dir(self) -> Path:
        return self.config.cache_root / SOURCE_CHECKOUT_DIRNAME

    def _build(self, version: str, library_dir: Path) -> None:
        """Build ``version`` from source and move the result into ``library_dir``."""
        git = self._which(GIT_COMMAND)
        self.config.cache_root.mkdir(parents=True, exist_ok=True)

        source_dir = self.source_dir
        if not source_dir.is_dir():
            self._runner([git, "clone", self.config.repo_url, str(source_dir)], self.config.cache_root)
        self._runner([git, "checkout", LIBRARY_TAG_TEMPLATE.format(version=version)], source_dir)
        for command in self.config.build_commands:
            self._runner(command, source_dir)

        package_dir = source_dir / self.config.package_dir
        if not (package_dir / PACKAGE_DESCRIPTOR).is_file() or not (package_dir / DIST_DIRNAME).is_dir():
            raise BuildError(
                f"Build of {version} did not produce {PACKAGE_DESCRIPTOR} and {DIST_DIRNAME}/ in {package_dir}"
            )

        staging_dir = library_dir.with_name(library_dir.name + LIBRARY_STAGING_SUFFIX)
        if staging_dir.exists():
            shutil.rmtree(staging_dir)
        staging_dir.mkdir(parents=True)
        try:
            shutil.copy2(package_dir / PACKAGE_DESCRIPTOR, staging_dir / PACKAGE_DESCRIPTOR)
            shutil.copytree(package_dir / DIST_DIRNAME, staging_dir / DIST_DIRNAME)
            self._runner(self.config.install_command, staging_dir)
        except Exception:
            shutil.rmtree(staging_dir)
            raise
        staging_dir.rename(library_dir)
        logger.info("built library %s into %s", version, library_dir)
