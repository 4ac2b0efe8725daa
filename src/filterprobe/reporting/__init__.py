"""Reporting package for filterprobe outputs."""

from __future__ import annotations

from typing import Any

__all__ = ["StdoutReporter", "build_report_payload", "render_json"]


def __getattr__(name: str) -> Any:
    """Lazily expose reporting APIs to avoid import cycles at package import time."""
    if name == "StdoutReporter":
        from .stdout import StdoutReporter

        return StdoutReporter
    if name in {"build_report_payload", "render_json"}:
        from .json_report import build_report_payload, render_json

        exports = {
            "build_report_payload": build_report_payload,
            "render_json": render_json,
        }
        return exports[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
