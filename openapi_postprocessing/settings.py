"""Post-processing settings."""

from __future__ import annotations

from dataclasses import dataclass
import json
import os
from pathlib import Path
from typing import Any, Optional

from .errors import ValidationError


DEFAULT_PROPERTY_VISITORS = ("length1-all-of-to-one-of", "move-nullable-to-one-of")
_ALLOWED_OUTPUT_FORMATS = {"json", "yaml"}
_DEFAULT_OUTPUT_FORMAT = "json"
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}

_ENV_PREFIX = "OPENAPI_POSTPROCESS_"


@dataclass(frozen=True)
class Settings:
    property_visitors: tuple[str, ...] = DEFAULT_PROPERTY_VISITORS
    drop_deprecated: bool = False
    drop_tags: tuple[str, ...] = ()
    drop_paths: tuple[str, ...] = ()
    drop_methods: tuple[str, ...] = ()
    output_format: str = _DEFAULT_OUTPUT_FORMAT


def load_settings(path: Optional[Path]) -> Settings:
    """Load settings from JSON config file, with environment variable overrides.

    Priority order:
    1. Environment variables (for appropriate settings)
    2. JSON config file
    3. Defaults

    Args:
        path: Path to JSON config file, or None to use defaults only

    Returns:
        Settings object with resolved values

    Raises:
        ValidationError: if the file or a value is invalid
    """
    json_settings: dict[str, Any] = {}
    if path and path.exists():
        try:
            json_settings = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Invalid settings file {path}: {exc}") from exc
        if not isinstance(json_settings, dict):
            raise ValidationError(f"Settings file {path} must contain a JSON object")

    property_visitors = _env_list("PROPERTY_VISITORS")
    if property_visitors is None:
        property_visitors = _as_names(
            json_settings.get("property_visitors", DEFAULT_PROPERTY_VISITORS),
            "property_visitors",
        )

    drop_tags = _env_list("DROP_TAGS")
    if drop_tags is None:
        drop_tags = _as_names(json_settings.get("drop_tags", ()), "drop_tags")

    drop_deprecated = _env_bool("DROP_DEPRECATED")
    if drop_deprecated is None:
        drop_deprecated = json_settings.get("drop_deprecated", False)
        if not isinstance(drop_deprecated, bool):
            raise ValidationError("drop_deprecated must be a boolean")

    output_format = os.getenv(_ENV_PREFIX + "OUTPUT_FORMAT") or json_settings.get(
        "output_format", _DEFAULT_OUTPUT_FORMAT
    )
    output_format = validate_output_format(output_format)

    return Settings(
        property_visitors=property_visitors,
        drop_deprecated=drop_deprecated,
        drop_tags=drop_tags,
        drop_paths=_as_names(json_settings.get("drop_paths", ()), "drop_paths"),
        drop_methods=_as_names(json_settings.get("drop_methods", ()), "drop_methods"),
        output_format=output_format,
    )


def default_config_path() -> Path:
    return Path.home() / ".config" / "openapi-postprocessing" / "settings.json"


def validate_output_format(value: Any) -> str:
    if value not in _ALLOWED_OUTPUT_FORMATS:
        raise ValidationError(f"Unsupported output format: {value}")
    return value


def _as_names(value: Any, key: str) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        raise ValidationError(f"{key} must be a list of strings")
    return tuple(value)


def _env_list(name: str) -> Optional[tuple[str, ...]]:
    raw = os.getenv(_ENV_PREFIX + name)
    if raw is None:
        return None
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def _env_bool(name: str) -> Optional[bool]:
    raw = os.getenv(_ENV_PREFIX + name)
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValidationError(f"{_ENV_PREFIX + name} must be a boolean, got {raw!r}")
