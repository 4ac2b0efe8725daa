"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "filterprobe.yaml"
DEFAULT_CACHE_DIR: str = ".cache"

DEFAULT_RELEASES_URL: str = "https://api.github.com/repos/ghostery/ghostery-extension/releases"
DEFAULT_ARTIFACT_MARKER: str = "ghostery-chromium"
DEFAULT_MANIFEST_URL_TEMPLATE: str = (
    "https://raw.githubusercontent.com/ghostery/ghostery-extension/refs/{ref}/package.json"
)

DEFAULT_LIBRARY_REPO_URL: str = "https://github.com/ghostery/adblocker.git"
DEFAULT_LIBRARY_DEPENDENCY: str = "@ghostery/adblocker"
DEFAULT_LIBRARY_PACKAGE_DIR: str = "packages/adblocker"
DEFAULT_BUILD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("yarn",),
    ("yarn", "clean"),
    ("yarn", "build"),
)
DEFAULT_INSTALL_COMMAND: tuple[str, ...] = ("npm", "install")

CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset(
    {
        "cache_dir",
        "releases_url",
        "artifact_marker",
        "manifest_url_template",
        "library_repo_url",
        "library_dependency",
        "library_package_dir",
        "build_commands",
        "install_command",
        "http_timeout",
    }
)

EXIT_OK: int = 0
EXIT_FAILURE: int = 1
EXIT_CONFIG_ERROR: int = 2
