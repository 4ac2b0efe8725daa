"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "FILTERPROBE"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ FILTERPROBE",
    "     // offline filter matching for extension builds",
)
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} extension filter debugger"))
HTTP_USER_AGENT: str = "filterprobe/query-ext"
