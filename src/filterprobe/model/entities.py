"""Dataclasses shared across extraction, matching and reporting."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from filterprobe.constants.extraction import REGIONAL_PATH_MARKER


class AssetKind(Enum):
    """Rule asset formats shipped inside an extension build."""

    RULES_BINARY = "rules-binary"
    RULES_JSON = "rules-json"


@dataclass(frozen=True)
class Asset:
    """A rule file pulled out of an artifact's ``rule_resources`` directory."""

    path: str
    kind: AssetKind
    data: bytes | str

    @property
    def size_kb(self) -> int:
        return len(self.data) // 1024

    @property
    def is_regional(self) -> bool:
        return REGIONAL_PATH_MARKER in self.path


@dataclass(frozen=True)
class ReleaseArtifact:
    """Version and rule assets of one packaged extension build, in walk order."""

    version: str
    assets: tuple[Asset, ...] = ()


@dataclass(frozen=True)
class MatchTarget:
    """URL being tested and the optional page it was requested from."""

    url: str
    source_url: str | None = None


@dataclass(frozen=True)
class ScriptInjection:
    """Parsed ``+js()`` scriptlet call."""

    name: str
    args: tuple[str, ...] = ()


@dataclass(frozen=True)
class Filter:
    """Library-neutral description of a matched filter."""

    kind: str
    text: str
    script: ScriptInjection | None = None
    has_domains: bool = False

    @property
    def is_cosmetic(self) -> bool:
        return self.kind == "cosmetic"


@dataclass(frozen=True)
class CosmeticMatch:
    """A cosmetic filter hit and the exception overriding it, if any."""

    filter: Filter
    exception: Filter | None = None


@dataclass(frozen=True)
class MatchResult:
    """Network and cosmetic matches for one engine."""

    network_filters: frozenset[Filter] = frozenset()
    cosmetic_matches: tuple[CosmeticMatch, ...] = ()


@dataclass(frozen=True)
class UnsupportedAsset:
    """Marker result for assets the harness has no matcher for."""

    path: str
    reason: str


@dataclass(frozen=True)
class AssetReport:
    """Outcome of processing one asset during a query."""

    path: str
    kind: AssetKind
    size_kb: int
    status: str
    result: MatchResult | None = None
    reason: str = ""


@dataclass(frozen=True)
class QueryReport:
    """Everything produced by a single ``query-ext`` run."""

    artifact_url: str
    version: str
    target: MatchTarget
    environment: frozenset[str]
    assets: tuple[AssetReport, ...] = field(default_factory=tuple)
