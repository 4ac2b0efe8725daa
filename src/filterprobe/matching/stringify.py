"""Render matched filters the way they would appear in a filter list."""

from __future__ import annotations

from urllib.parse import unquote

from filterprobe.model import Filter

HOSTNAMES_PLACEHOLDER: str = "<hostnames>"


def render(filter_: Filter) -> str:
    """Return the canonical text of ``filter_``.

    Scriptlet injections are rebuilt from their parsed call. Domain-scoped
    ones get a ``<hostnames>`` placeholder and percent-decoded arguments.
    """
    script = filter_.script
    if not filter_.is_cosmetic or script is None:
        return filter_.text

    if not filter_.has_domains:
        return f"##+js({', '.join((script.name, *script.args))})"
    decoded = (unquote(arg) for arg in script.args)
    return f"{HOSTNAMES_PLACEHOLDER}##+js({', '.join((script.name, *decoded))})"
