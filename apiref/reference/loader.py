from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger

from apiref.core.exceptions import DocumentLoadError


def load_symbol_records(path: Path) -> list[dict[str, Any]]:
    """Read extractor output and return the raw symbol records it holds.

    Accepted layouts:
    - a JSON list of nodes
    - ``{"nodes": [...]}``
    - ``{"nodes": {"<module specifier>": [...], ...}}`` (flattened in key order)

    Records are returned unvalidated; validation happens per record when
    pages are rendered so one bad record does not hide the rest.
    """
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise DocumentLoadError(f"Cannot read symbol records from {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DocumentLoadError(f"Invalid JSON in {path}: {exc}") from exc

    nodes = payload.get("nodes") if isinstance(payload, dict) else payload
    if isinstance(nodes, dict):
        flattened: list[Any] = []
        for specifier, module_nodes in nodes.items():
            if not isinstance(module_nodes, list):
                raise DocumentLoadError(
                    f"Expected a list of nodes for module '{specifier}' in {path}"
                )
            flattened.extend(module_nodes)
        nodes = flattened
    if not isinstance(nodes, list):
        raise DocumentLoadError(
            f"Expected a list of symbol records in {path}, got {type(nodes).__name__}"
        )

    logger.debug(f"Loaded {len(nodes)} symbol records from {path}")
    return nodes
