"""Config data model for filterprobe."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from filterprobe.constants.config import (
    DEFAULT_ARTIFACT_MARKER,
    DEFAULT_BUILD_COMMANDS,
    DEFAULT_CACHE_DIR,
    DEFAULT_INSTALL_COMMAND,
    DEFAULT_LIBRARY_DEPENDENCY,
    DEFAULT_LIBRARY_PACKAGE_DIR,
    DEFAULT_LIBRARY_REPO_URL,
    DEFAULT_MANIFEST_URL_TEMPLATE,
    DEFAULT_RELEASES_URL,
)


@dataclass(frozen=True)
class ResolverConfig:
    """Everything the library resolver needs, passed explicitly.

    Paths are absolute; the resolver never consults the working directory.
    """

    cache_root: Path
    manifest_url_template: str = DEFAULT_MANIFEST_URL_TEMPLATE
    dependency: str = DEFAULT_LIBRARY_DEPENDENCY
    repo_url: str = DEFAULT_LIBRARY_REPO_URL
    package_dir: str = DEFAULT_LIBRARY_PACKAGE_DIR
    build_commands: tuple[tuple[str, ...], ...] = DEFAULT_BUILD_COMMANDS
    install_command: tuple[str, ...] = DEFAULT_INSTALL_COMMAND


@dataclass(frozen=True)
class FilterProbeConfig:
    """Resolved tool config."""

    cache_dir: Path = Path(DEFAULT_CACHE_DIR)
    releases_url: str = DEFAULT_RELEASES_URL
    artifact_marker: str = DEFAULT_ARTIFACT_MARKER
    manifest_url_template: str = DEFAULT_MANIFEST_URL_TEMPLATE
    library_repo_url: str = DEFAULT_LIBRARY_REPO_URL
    library_dependency: str = DEFAULT_LIBRARY_DEPENDENCY
    library_package_dir: str = DEFAULT_LIBRARY_PACKAGE_DIR
    build_commands: tuple[tuple[str, ...], ...] = DEFAULT_BUILD_COMMANDS
    install_command: tuple[str, ...] = DEFAULT_INSTALL_COMMAND
    http_timeout: float | None = None

    def resolver_config(self) -> ResolverConfig:
        """Project the library-related settings into a ``ResolverConfig``."""
        return ResolverConfig(
            cache_root=self.cache_dir.resolve(),
            manifest_url_template=self.manifest_url_template,
            dependency=self.library_dependency,
            repo_url=self.library_repo_url,
            package_dir=self.library_package_dir,
            build_commands=self.build_commands,
            install_command=self.install_command,
        )
