"""Plain-text stdout reporter for query results."""

from __future__ import annotations

from filterprobe.constants.reporting import (
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    STATUS_MATCHED,
)
from filterprobe.matching import render
from filterprobe.model import AssetReport, QueryReport


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class StdoutReporter:
    """Formats a query report as ``+``/``-`` filter lines per asset."""

    def __init__(self, report: QueryReport, *, color: bool = True, verbose: bool = False) -> None:
        self._report = report
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        lines: list[str] = []
        if self._verbose:
            lines.extend(self._render_header())
        for asset in self._report.assets:
            lines.extend(self._render_asset(asset))
        return "\n".join(lines)

    def _render_header(self) -> list[str]:
        r = self._report
        header = [
            f"[info] artifact {r.artifact_url} (version {r.version})",
            f"[info] environment {', '.join(sorted(r.environment))}",
            f"[info] target {r.target.url}",
        ]
        if r.target.source_url:
            header.append(f"[info] source {r.target.source_url}")
        return [self._paint(line, ANSI_DIM) for line in header]

    def _render_asset(self, asset: AssetReport) -> list[str]:
        if asset.status != STATUS_MATCHED or asset.result is None:
            if not self._verbose:
                return []
            return [self._paint(f"[info] {asset.path}: {asset.status} ({asset.reason})", ANSI_YELLOW)]

        result = asset.result
        lines = [
            f"[info] matched {len(result.network_filters)} network filters and "
            f"{len(result.cosmetic_matches)} cosmetic filters"
        ]
        if self._verbose:
            lines[0] = f"{lines[0]} in {asset.path}"
        for text in sorted(render(item) for item in result.network_filters):
            lines.append(self._paint(f"+ {text}", ANSI_GREEN))
        for hit in result.cosmetic_matches:
            lines.append(self._paint(f"+ {render(hit.filter)}", ANSI_GREEN))
            if hit.exception is not None:
                lines.append(self._paint(f"- {render(hit.exception)}", ANSI_RED))
        return lines

    def _paint(self, text: str, color: str) -> str:
        return _colorize(text, color) if self._color else text
