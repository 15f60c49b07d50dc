"""Deterministic CLI output helpers."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Iterable

from ..core.models import Document, HttpMethod

SCHEMA_VERSION = "v1"


def document_stats(document: Document) -> dict[str, int]:
    """Count paths, operations and component schemas in a document."""
    paths = document.get("paths")
    paths = paths if isinstance(paths, Mapping) else {}
    operations = sum(
        1
        for entry in paths.values()
        if isinstance(entry, Mapping)
        for method in HttpMethod
        if entry.get(method.value) is not None
    )
    components = document.get("components")
    schemas = components.get("schemas") if isinstance(components, Mapping) else None
    return {
        "paths": len(paths),
        "operations": operations,
        "schemas": len(schemas) if isinstance(schemas, Mapping) else 0,
    }


def emit_output(
    *,
    command: str,
    payload: dict,
    json_output: bool,
    output_sink=print,
    human_lines: Iterable[str] = (),
) -> None:
    """Emit either a JSON envelope or human-readable lines."""
    if not json_output:
        for line in human_lines:
            output_sink(line)
        return

    envelope = {"schema_version": SCHEMA_VERSION, "command": command, "data": payload}
    output_sink(json.dumps(envelope, sort_keys=True, separators=(",", ":"), ensure_ascii=True))
