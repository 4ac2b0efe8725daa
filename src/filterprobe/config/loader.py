"""Config loading and normalization for filterprobe."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from filterprobe.config.model import FilterProbeConfig
from filterprobe.constants.config import (
    CONFIG_ALLOWED_KEYS,
    CONFIG_FILENAME,
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
from filterprobe.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> FilterProbeConfig:
    """Load and validate tool config from ``filterprobe.yaml`` or an explicit path.

    Relative ``cache_dir`` values are anchored at ``root``.
    """
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return FilterProbeConfig(cache_dir=root / DEFAULT_CACHE_DIR)

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in CONFIG_ALLOWED_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    manifest_url_template = _ensure_string(
        raw.get("manifest_url_template", DEFAULT_MANIFEST_URL_TEMPLATE), "manifest_url_template"
    )
    if "{ref}" not in manifest_url_template:
        raise ConfigError("manifest_url_template must contain a {ref} placeholder")

    http_timeout = raw.get("http_timeout")
    if http_timeout is not None and (
        isinstance(http_timeout, bool) or not isinstance(http_timeout, (int, float)) or http_timeout <= 0
    ):
        raise ConfigError("http_timeout must be a positive number")

    cache_dir = Path(_ensure_string(raw.get("cache_dir", DEFAULT_CACHE_DIR), "cache_dir"))
    if not cache_dir.is_absolute():
        cache_dir = root / cache_dir

    return FilterProbeConfig(
        cache_dir=cache_dir,
        releases_url=_ensure_string(raw.get("releases_url", DEFAULT_RELEASES_URL), "releases_url"),
        artifact_marker=_ensure_string(raw.get("artifact_marker", DEFAULT_ARTIFACT_MARKER), "artifact_marker"),
        manifest_url_template=manifest_url_template,
        library_repo_url=_ensure_string(raw.get("library_repo_url", DEFAULT_LIBRARY_REPO_URL), "library_repo_url"),
        library_dependency=_ensure_string(
            raw.get("library_dependency", DEFAULT_LIBRARY_DEPENDENCY), "library_dependency"
        ),
        library_package_dir=_ensure_string(
            raw.get("library_package_dir", DEFAULT_LIBRARY_PACKAGE_DIR), "library_package_dir"
        ),
        build_commands=tuple(
            _ensure_command(command, f"build_commands[{index}]")
            for index, command in enumerate(
                _ensure_list(raw.get("build_commands", [list(c) for c in DEFAULT_BUILD_COMMANDS]), "build_commands")
            )
        ),
        install_command=_ensure_command(raw.get("install_command", list(DEFAULT_INSTALL_COMMAND)), "install_command"),
        http_timeout=float(http_timeout) if http_timeout is not None else None,
    )


def _ensure_string(value: Any, key: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key} must be a non-empty string")
    return value.strip()


def _ensure_list(value: Any, key: str) -> list[Any]:
    if not isinstance(value, list):
        raise ConfigError(f"{key} must be a list")
    return value


def _ensure_command(value: Any, key: str) -> tuple[str, ...]:
    """Validate a command as a non-empty list of argv strings."""
    items = _ensure_list(value, key)
    if not items:
        raise ConfigError(f"{key} must not be empty")
    for item in items:
        if not isinstance(item, str) or not item.strip():
            raise ConfigError(f"{key} must contain only non-empty strings")
    return tuple(item.strip() for item in items)
