"""Tests for config loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from filterprobe.config import FilterProbeConfig, load_config
from filterprobe.constants.config import DEFAULT_BUILD_COMMANDS, DEFAULT_RELEASES_URL
from filterprobe.exceptions import ConfigError


def test_load_config_defaults_without_file(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config.cache_dir == tmp_path.resolve() / ".cache"
    assert config.releases_url == DEFAULT_RELEASES_URL
    assert config.build_commands == DEFAULT_BUILD_COMMANDS
    assert config.http_timeout is None


def test_load_config_reads_yaml(tmp_path: Path) -> None:
    (tmp_path / "filterprobe.yaml").write_text(
        "\n".join(
            [
                "cache_dir: store",
                "http_timeout: 30",
                "artifact_marker: ghostery-firefox",
                "build_commands:",
                "  - [yarn, install, --frozen-lockfile]",
                "  - [yarn, build]",
                "install_command: [npm, ci]",
            ]
        ),
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.cache_dir == tmp_path.resolve() / "store"
    assert config.http_timeout == 30.0
    assert config.artifact_marker == "ghostery-firefox"
    assert config.build_commands == (("yarn", "install", "--frozen-lockfile"), ("yarn", "build"))
    assert config.install_command == ("npm", "ci")


def test_load_config_explicit_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("- a\n- b\n", "must be a YAML mapping"),
        ("cache_directory: x\n", "Unknown config key"),
        ("http_timeout: -1\n", "positive number"),
        ("http_timeout: true\n", "positive number"),
        ("install_command: []\n", "must not be empty"),
        ("build_commands: yarn\n", "must be a list"),
        ("manifest_url_template: https://example.com/package.json\n", "{ref}"),
        ("releases_url: ''\n", "non-empty string"),
        ("cache_dir: [unclosed\n", "Invalid YAML"),
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, content: str, message: str) -> None:
    path = tmp_path / "filterprobe.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        load_config(tmp_path)


def test_resolver_config_projection(tmp_path: Path) -> None:
    config = FilterProbeConfig(cache_dir=tmp_path / "cache", library_dependency="@scope/lib")

    resolver_config = config.resolver_config()

    assert resolver_config.cache_root == (tmp_path / "cache").resolve()
    assert resolver_config.dependency == "@scope/lib"
