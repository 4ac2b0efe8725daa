"""Run network and cosmetic matching for one rule asset."""

from __future__ import annotations

import logging

from filterprobe.constants.environment import BASE_FLAGS, COSMETIC_MATCH_OPTIONS, ENV_TOKEN_FLAGS
from filterprobe.library import FilterLibrary
from filterprobe.model import Asset, AssetKind, MatchResult, MatchTarget, UnsupportedAsset

logger = logging.getLogger(__name__)

# TODO: match declarative (DNR) rule assets once the library exposes a DNR matcher.
UNSUPPORTED_REASONS: dict[AssetKind, str] = {
    AssetKind.RULES_JSON: "declarative (DNR) rule matching is not implemented",
}


def build_environment_flags(env_token: str) -> frozenset[str]:
    """Map an env token string such as ``"firefox-mobile"`` to capability flags."""
    flags = set(BASE_FLAGS)
    for token, token_flags in ENV_TOKEN_FLAGS.items():
        if token in env_token:
            flags.update(token_flags)
    return frozenset(flags)


def match(
    library: FilterLibrary,
    asset: Asset,
    target: MatchTarget,
    env_token: str,
) -> MatchResult | UnsupportedAsset:
    """Deserialize ``asset`` with ``library`` and match ``target`` against it."""
    reason = UNSUPPORTED_REASONS.get(asset.kind)
    if reason is not None:
        return UnsupportedAsset(path=asset.path, reason=reason)

    flags = build_environment_flags(env_token)
    data = asset.data if isinstance(asset.data, bytes) else asset.data.encode("utf-8")
    engine = library.deserialize_engine(data)
    engine.update_env(flags)

    request = library.build_request(target.url, target.source_url)
    network_filters = frozenset(library.match_network(engine, request))
    cosmetic_matches = tuple(library.match_cosmetic(engine, request, COSMETIC_MATCH_OPTIONS))
    logger.debug(
        "%s: %d network / %d cosmetic matches under %s",
        asset.path,
        len(network_filters),
        len(cosmetic_matches),
        sorted(flags),
    )
    return MatchResult(network_filters=network_filters, cosmetic_matches=cosmetic_matches)
