"""Reading and writing OpenAPI documents as JSON or YAML."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .core.models import Document
from .errors import DocumentDecodeError, IOFailure

_YAML_SUFFIXES = {".yaml", ".yml"}


def format_for_path(path: Path) -> str:
    """Infer ``json`` or ``yaml`` from a file suffix (JSON by default)."""
    return "yaml" if path.suffix.lower() in _YAML_SUFFIXES else "json"


def load_document(path: Path) -> Document:
    """Load a document from a JSON or YAML file.

    Raises:
        IOFailure: if the file cannot be read
        DocumentDecodeError: if the content cannot be decoded into a mapping
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise IOFailure(f"Cannot read {path}: {exc}") from exc

    return parse_document(text, format_for_path(path), source=str(path))


def parse_document(text: str, fmt: str, *, source: str = "<string>") -> Document:
    try:
        if fmt == "yaml":
            document: Any = yaml.safe_load(text)
        else:
            document = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DocumentDecodeError(source, str(exc)) from exc

    if not isinstance(document, dict):
        raise DocumentDecodeError(source, "does not contain a document object")
    return document


def dump_document(document: Document, fmt: str) -> str:
    """Render a document, preserving key order."""
    if fmt == "yaml":
        return yaml.safe_dump(dict(document), sort_keys=False, allow_unicode=True)
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def write_document(document: Document, path: Path, fmt: str) -> None:
    try:
        path.write_text(dump_document(document, fmt), encoding="utf-8")
    except OSError as exc:
        raise IOFailure(f"Cannot write {path}: {exc}") from exc
