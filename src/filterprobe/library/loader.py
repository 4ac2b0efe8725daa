"""Plugin interface over a built copy of the filtering library.

The harness only talks to :class:`FilterLibrary`; how a library is loaded
is decided here. The default implementation drives the library's ESM build
through a short-lived ``node`` process per match call.
"""

from __future__ import annotations

import base64
import json
import logging
import subprocess
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Protocol

from filterprobe.constants.library import (
    BRIDGE_MODE_COSMETIC,
    BRIDGE_MODE_NETWORK,
    BRIDGE_SCRIPT,
    LIBRARY_ENTRY_POINT,
    NODE_COMMAND,
)
from filterprobe.exceptions import LibraryLoadError
from filterprobe.library.tools import require_tool
from filterprobe.model import CosmeticMatch, Filter, ScriptInjection

logger = logging.getLogger(__name__)


class Engine(Protocol):
    """Deserialized engine owned by a library instance."""

    def update_env(self, flags: frozenset[str]) -> None: ...


class FilterLibrary(Protocol):
    """Operations the match harness needs from a loaded library."""

    version: str

    def deserialize_engine(self, data: bytes) -> Engine: ...

    def build_request(self, url: str, source_url: str | None = None) -> Any: ...

    def match_network(self, engine: Engine, request: Any) -> Iterable[Filter]: ...

    def match_cosmetic(self, engine: Engine, request: Any, options: Mapping[str, bool]) -> Iterable[CosmeticMatch]: ...


class NodeEngine:
    """Serialized engine bytes plus the environment applied to them."""

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.flags: frozenset[str] = frozenset()

    def update_env(self, flags: frozenset[str]) -> None:
        self.flags = frozenset(flags)


class NodeFilterLibrary:
    """``FilterLibrary`` backed by ``node`` importing the built entry point."""

    def __init__(self, entry_point: Path, node: str, version: str = "") -> None:
        self.entry_point = entry_point
        self.version = version
        self._node = node

    def deserialize_engine(self, data: bytes) -> NodeEngine:
        return NodeEngine(bytes(data))

    def build_request(self, url: str, source_url: str | None = None) -> dict[str, str]:
        request = {"url": url}
        if source_url is not None:
            request["sourceUrl"] = source_url
        return request

    def match_network(self, engine: NodeEngine, request: dict[str, str]) -> list[Filter]:
        described = self._run(BRIDGE_MODE_NETWORK, engine, request, {})
        return [_to_filter(item) for item in described]

    def match_cosmetic(
        self,
        engine: NodeEngine,
        request: dict[str, str],
        options: Mapping[str, bool],
    ) -> list[CosmeticMatch]:
        described = self._run(BRIDGE_MODE_COSMETIC, engine, request, dict(options))
        return [
            CosmeticMatch(
                filter=_to_filter(item["filter"]),
                exception=_to_filter(item["exception"]) if item.get("exception") else None,
            )
            for item in described
        ]

    def _run(
        self,
        mode: str,
        engine: NodeEngine,
        request: dict[str, str],
        options: dict[str, bool],
    ) -> list[dict[str, Any]]:
        job = {
            "entry": str(self.entry_point),
            "engine": base64.b64encode(engine.data).decode("ascii"),
            "env": sorted(engine.flags),
            "request": request,
            "mode": mode,
            "options": options,
        }
        result = subprocess.run(
            [self._node, "--input-type=module", "-e", BRIDGE_SCRIPT],
            input=json.dumps(job),
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            raise LibraryLoadError(f"Library bridge failed ({mode}): {result.stderr.strip()}")
        try:
            payload = json.loads(result.stdout)
        except json.JSONDecodeError as exc:
            raise LibraryLoadError(f"Library bridge returned invalid JSON ({mode}): {exc}") from exc
        if not isinstance(payload, list):
            raise LibraryLoadError(f"Library bridge returned {type(payload).__name__}, expected a list")
        return payload


def load_library(path: Path, version: str = "") -> NodeFilterLibrary:
    """Load the library build assembled in ``path``."""
    entry_point = path / LIBRARY_ENTRY_POINT
    if not entry_point.is_file():
        raise LibraryLoadError(f"Library entry point not found: {entry_point}")
    node = require_tool(NODE_COMMAND)
    logger.debug("loaded library %s from %s", version or "<unversioned>", entry_point)
    return NodeFilterLibrary(entry_point.resolve(), node, version=version)


def _to_filter(item: Mapping[str, Any]) -> Filter:
    script = item.get("script")
    return Filter(
        kind=str(item.get("kind", "network")),
        text=str(item.get("text", "")),
        script=(
            ScriptInjection(name=str(script["name"]), args=tuple(str(arg) for arg in script.get("args", [])))
            if isinstance(script, dict)
            else None
        ),
        has_domains=bool(item.get("has_domains", False)),
    )
