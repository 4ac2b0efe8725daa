"""End-to-end ``query-ext`` orchestration.

The ``query_extension`` function remains the primary entry point used by
the CLI; it wires the content cache, artifact extractor, library resolver
and match harness together in a single sequential pass.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests

from filterprobe.artifact import latest_artifact_url, pull
from filterprobe.config import FilterProbeConfig
from filterprobe.constants.branding import HTTP_USER_AGENT
from filterprobe.constants.library import EXTENSION_REF_TEMPLATE
from filterprobe.constants.reporting import STATUS_MATCHED, STATUS_SKIPPED, STATUS_UNSUPPORTED
from filterprobe.exceptions import ConfigError
from filterprobe.io import ContentCache
from filterprobe.library import FilterLibrary, LibraryResolver
from filterprobe.matching import build_environment_flags, match
from filterprobe.model import Asset, AssetKind, AssetReport, MatchResult, MatchTarget, QueryReport, UnsupportedAsset

logger = logging.getLogger(__name__)

REGIONAL_SKIP_REASON: str = "regional asset skipped by --skip-regionals"


@dataclass(frozen=True)
class QueryOptions:
    """Options of one ``query-ext`` invocation."""

    url: str
    artifact: str | None = None
    source_url: str | None = None
    env: str = ""
    skip_regionals: bool = False


def query_extension(
    options: QueryOptions,
    config: FilterProbeConfig,
    *,
    session: Any | None = None,
    resolver: LibraryResolver | None = None,
) -> QueryReport:
    """Pull the artifact, load its library version and match every rule asset."""
    if not options.url:
        raise ConfigError("The target URL was not given")

    if session is None:
        session = requests.Session()
        session.headers["User-Agent"] = HTTP_USER_AGENT

    config.cache_dir.mkdir(parents=True, exist_ok=True)
    cache = ContentCache(config.cache_dir, session=session, timeout=config.http_timeout)

    artifact_url = options.artifact
    if artifact_url is None:
        logger.warning("retrieving the latest version as the artifact url was not specified...")
        artifact_url = latest_artifact_url(
            releases_url=config.releases_url,
            marker=config.artifact_marker,
            session=session,
            timeout=config.http_timeout,
        )

    logger.warning("pulling engines from artifact %s...", artifact_url)
    artifact = pull(artifact_url, cache=cache)

    logger.warning("loading the corresponding version of the filtering library...")
    if resolver is None:
        resolver = LibraryResolver(config.resolver_config(), cache)
    library = resolver.resolve(EXTENSION_REF_TEMPLATE.format(version=artifact.version))

    target = MatchTarget(url=options.url, source_url=options.source_url)
    reports = tuple(_process_asset(asset, library, target, options) for asset in artifact.assets)

    return QueryReport(
        artifact_url=artifact_url,
        version=artifact.version,
        target=target,
        environment=build_environment_flags(options.env),
        assets=reports,
    )


def _process_asset(
    asset: Asset,
    library: FilterLibrary,
    target: MatchTarget,
    options: QueryOptions,
) -> AssetReport:
    if options.skip_regionals and asset.is_regional:
        logger.info('skipping regional asset "%s"', asset.path)
        return AssetReport(
            path=asset.path,
            kind=asset.kind,
            size_kb=asset.size_kb,
            status=STATUS_SKIPPED,
            reason=REGIONAL_SKIP_REASON,
        )

    if asset.kind is AssetKind.RULES_BINARY:
        logger.warning('loading "%s"... ~%dKB', asset.path, asset.size_kb)
    outcome = match(library, asset, target, options.env)
    if isinstance(outcome, UnsupportedAsset):
        logger.warning('skipping "%s": %s', outcome.path, outcome.reason)
        return AssetReport(
            path=asset.path,
            kind=asset.kind,
            size_kb=asset.size_kb,
            status=STATUS_UNSUPPORTED,
            reason=outcome.reason,
        )

    return _matched_report(asset, outcome)


def _matched_report(asset: Asset, result: MatchResult) -> AssetReport:
    logger.debug(
        "matched %d network filters and %d cosmetic filters",
        len(result.network_filters),
        len(result.cosmetic_matches),
    )
    return AssetReport(
        path=asset.path,
        kind=asset.kind,
        size_kb=asset.size_kb,
        status=STATUS_MATCHED,
        result=result,
    )
