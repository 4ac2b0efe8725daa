"""Host environment exceptions."""

from __future__ import annotations

from filterprobe.exceptions.base import FilterProbeError


class ToolNotFoundError(FilterProbeError, RuntimeError):
    """Raised when a required external command is not on PATH."""

    def __init__(self, command: str) -> None:
        super().__init__(f'Cannot find the command "{command}"!')
        self.command = command
