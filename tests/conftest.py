"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from tests.helpers import pet_store_document


_OPENAPI_ENV_VARS = (
    "OPENAPI_POSTPROCESS_PROPERTY_VISITORS",
    "OPENAPI_POSTPROCESS_DROP_TAGS",
    "OPENAPI_POSTPROCESS_DROP_DEPRECATED",
    "OPENAPI_POSTPROCESS_OUTPUT_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep settings overrides from the developer's shell out of tests."""
    for name in _OPENAPI_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def document() -> dict[str, Any]:
    return pet_store_document()


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Factory writing JSON payloads into the test directory."""
    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload))
        return path

    return _write
