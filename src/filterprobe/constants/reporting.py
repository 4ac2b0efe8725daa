"""Reporting constants."""

from __future__ import annotations

REPORT_SCHEMA_VERSION: str = "1.0.0"
OUTPUT_FORMAT_TEXT: str = "text"
OUTPUT_FORMAT_JSON: str = "json"
VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({OUTPUT_FORMAT_TEXT, OUTPUT_FORMAT_JSON})

ANSI_RESET: str = "\033[0m"
ANSI_RED: str = "\033[31m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_DIM: str = "\033[2m"

STATUS_MATCHED: str = "matched"
STATUS_UNSUPPORTED: str = "unsupported"
STATUS_SKIPPED: str = "skipped"
