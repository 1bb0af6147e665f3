"""Configuration models and loading utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .files import CURRENT_DIR, DEFAULT_PRINT_WIDTH
from .formatters import FormatKind

JSON_SUFFIXES = {".json"}


class WriteOptions(BaseModel):
    """Formatting options for one artifact write."""

    model_config = ConfigDict(extra="forbid")

    format_kind: FormatKind = Field(default=FormatKind.JSON)
    print_width: int = Field(default=DEFAULT_PRINT_WIDTH, ge=1)


class WriterConfig(BaseModel):
    """Runtime configuration for artifact_writer commands."""

    model_config = ConfigDict(extra="forbid")

    out_dir: str = Field(default=CURRENT_DIR)
    options: WriteOptions = Field(default_factory=WriteOptions)


def infer_format_kind(file_name: str) -> FormatKind:
    if Path(file_name).suffix.lower() in JSON_SUFFIXES:
        return FormatKind.JSON
    return FormatKind.SOURCE


def _set_nested_value(target: dict[str, Any], dotted_key: str, value: Any) -> None:
    keys = dotted_key.split(".")
    cursor = target
    for key in keys[:-1]:
        current = cursor.get(key)
        if not isinstance(current, dict):
            current = {}
            cursor[key] = current
        cursor = current
    cursor[keys[-1]] = value


def load_config(config_path: Path, overrides: dict[str, Any] | None = None) -> WriterConfig:
    """Load YAML config and apply dotted-key overrides before validation."""

    raw: dict[str, Any] = {}
    if config_path.exists():
        with config_path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle) or {}
            if not isinstance(loaded, dict):
                raise ValueError(f"Config root must be a mapping, got: {type(loaded)!r}")
            raw = loaded

    for key, value in (overrides or {}).items():
        if value is not None:
            _set_nested_value(raw, key, value)

    try:
        return WriterConfig.model_validate(raw)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc
