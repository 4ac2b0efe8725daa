"""External command helpers."""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from filterprobe.exceptions import BuildError, ToolNotFoundError

logger = logging.getLogger(__name__)

STDERR_TAIL_CHARS: int = 2000


def require_tool(command: str) -> str:
    """Return the absolute path of ``command`` or raise ``ToolNotFoundError``."""
    located = shutil.which(command)
    if located is None:
        raise ToolNotFoundError(command)
    return located


def run_command(args: Sequence[str], cwd: Path) -> str:
    """Run ``args`` in ``cwd`` and return stdout; non-zero exit raises ``BuildError``."""
    logger.info("running `%s` in %s", " ".join(args), cwd)
    try:
        result = subprocess.run(
            list(args),
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise ToolNotFoundError(args[0]) from exc

    if result.returncode != 0:
        raise BuildError(
            f"`{' '.join(args)}` exited with {result.returncode}: {result.stderr[-STDERR_TAIL_CHARS:].strip()}"
        )
    return result.stdout
