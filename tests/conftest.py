"""Shared pytest fixtures: fake HTTP session, fake filtering library, artifact builder."""

from __future__ import annotations

import io
import json
import zipfile
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest
import requests

from filterprobe.model import CosmeticMatch, Filter, ScriptInjection


class FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, content: bytes, status_code: int = 200) -> None:
        self.content = content
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self) -> Any:
        return json.loads(self.content.decode("utf-8"))


@dataclass
class CountingSession:
    """Serves canned payloads by URL and records every request made."""

    payloads: dict[str, bytes] = field(default_factory=dict)
    status_codes: dict[str, int] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)
    headers: dict[str, str] = field(default_factory=dict)

    def get(self, url: str, timeout: float | None = None) -> FakeResponse:
        self.calls.append(url)
        if url not in self.payloads:
            return FakeResponse(b"", status_code=self.status_codes.get(url, 404))
        return FakeResponse(self.payloads[url], status_code=self.status_codes.get(url, 200))


class FakeEngine:
    """Engine over a JSON rule table: ``{"network": [...], "cosmetic": [...]}``."""

    def __init__(self, rules: Mapping[str, Any]) -> None:
        self.rules = rules
        self.flags: frozenset[str] = frozenset()

    def update_env(self, flags: frozenset[str]) -> None:
        self.flags = frozenset(flags)


class FakeLibrary:
    """In-memory ``FilterLibrary`` matching by substring of the request URL."""

    def __init__(self, version: str = "0.0.0") -> None:
        self.version = version
        self.engines: list[FakeEngine] = []
        self.cosmetic_options: list[dict[str, bool]] = []

    def deserialize_engine(self, data: bytes) -> FakeEngine:
        engine = FakeEngine(json.loads(data.decode("utf-8")))
        self.engines.append(engine)
        return engine

    def build_request(self, url: str, source_url: str | None = None) -> dict[str, str | None]:
        return {"url": url, "sourceUrl": source_url}

    def match_network(self, engine: FakeEngine, request: dict[str, str | None]) -> Iterable[Filter]:
        url = request["url"] or ""
        for rule in engine.rules.get("network", []):
            if rule["pattern"] in url and rule.get("env", "ext_ghostery") in engine.flags:
                yield Filter(kind="network", text=rule["text"])

    def match_cosmetic(
        self,
        engine: FakeEngine,
        request: dict[str, str | None],
        options: Mapping[str, bool],
    ) -> Iterable[CosmeticMatch]:
        self.cosmetic_options.append(dict(options))
        url = request["url"] or ""
        for rule in engine.rules.get("cosmetic", []):
            if rule["hostname"] not in url:
                continue
            script = rule.get("script")
            yield CosmeticMatch(
                filter=Filter(
                    kind="cosmetic",
                    text=rule["text"],
                    script=ScriptInjection(script["name"], tuple(script["args"])) if script else None,
                    has_domains=bool(rule.get("has_domains", False)),
                ),
                exception=Filter(kind="cosmetic", text=rule["exception"]) if rule.get("exception") else None,
            )


@pytest.fixture
def counting_session() -> CountingSession:
    """Return a fresh fake HTTP session."""
    return CountingSession()


@pytest.fixture
def fake_library() -> FakeLibrary:
    """Return an in-memory filtering library."""
    return FakeLibrary(version="9.9.9")


@pytest.fixture
def tiny_rules() -> bytes:
    """Serialized engine with one network filter and one cosmetic filter."""
    return json.dumps(
        {
            "network": [{"pattern": "ads.example.com", "text": "||ads.example.com^"}],
            "cosmetic": [{"hostname": "news.example.org", "text": "news.example.org##.banner"}],
        }
    ).encode("utf-8")


@pytest.fixture
def make_artifact(tmp_path: Path) -> Callable[..., Path]:
    """Return a builder that writes a zipped extension build and returns its path."""

    def _make(
        files: Mapping[str, bytes | str],
        *,
        name: str = "ghostery-chromium.zip",
    ) -> Path:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w") as bundle:
            for member, content in files.items():
                bundle.writestr(member, content)
        path = tmp_path / name
        path.write_bytes(buffer.getvalue())
        return path

    return _make
