"""Environment capability flags understood by the filtering engine."""

from __future__ import annotations

EXT_GHOSTERY: str = "ext_ghostery"
ENV_CHROMIUM: str = "env_chromium"
ENV_EDGE: str = "env_edge"
ENV_FIREFOX: str = "env_firefox"
ENV_MOBILE: str = "env_mobile"
CAP_REPLACE_MODIFIER: str = "cap_replace_modifier"
CAP_HTML_FILTERING: str = "cap_html_filtering"

BASE_FLAGS: tuple[str, ...] = (EXT_GHOSTERY,)

# Substring token -> flags it switches on. Tokens are independent.
ENV_TOKEN_FLAGS: dict[str, tuple[str, ...]] = {
    "chromium": (ENV_CHROMIUM, ENV_EDGE),
    "firefox": (ENV_FIREFOX, CAP_REPLACE_MODIFIER, CAP_HTML_FILTERING),
    "mobile": (ENV_MOBILE,),
}

COSMETIC_MATCH_OPTIONS: dict[str, bool] = {
    "getExtendedRules": False,
    "getPureHasRules": True,
    "getRulesFromHostname": True,
    "getInjectionRules": True,
}
