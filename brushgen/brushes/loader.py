"""Brush definition file parsing and validation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping, Sequence

import yaml

from brushgen.brushes.constants import THEME_KEYS
from brushgen.brushes.models import BrushRecord, BrushValidationError, ThemeValues
from brushgen.brushes.names import split_name
from brushgen.errors import BrushGenError, ErrorCode

_YAML_SUFFIXES = {".yaml", ".yml"}


def load_brush_file(path: Path) -> list[BrushRecord]:
    """Load and validate the brush definition file, keeping file order."""
    if not path.exists() or not path.is_file():
        raise BrushGenError(ErrorCode.INPUT_NOT_FOUND, path=path)
    try:
        content = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise BrushGenError(
            ErrorCode.INPUT_UNREADABLE, path=path, details={"original": str(exc)}
        ) from exc

    data = _parse_document(content, path)
    return parse_brushes(data, source=str(path))


def parse_brushes(data: object, *, source: str = "<input>") -> list[BrushRecord]:
    """Turn a decoded document into brush records."""
    if data is None:
        raise BrushValidationError(f"{source}: Did not find brushes from source file")
    if not isinstance(data, list):
        raise BrushValidationError(f"{source}: expected a list of brushes")
    if not data:
        raise BrushValidationError(f"{source}: Did not find brushes from source file")

    return [_parse_brush(entry, f"{source}[{index}]") for index, entry in enumerate(data)]


def _parse_document(content: str, path: Path) -> object:
    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise BrushValidationError(f"Invalid YAML in {path}: {exc}") from exc
    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise BrushValidationError(f"Invalid JSON in {path}: {exc}") from exc


def _parse_brush(entry: object, context: str) -> BrushRecord:
    if not isinstance(entry, dict):
        raise BrushValidationError(f"{context}: expected a brush object")

    name = _required_str(entry, "name", context)
    # Names are validated here so malformed ones fail before any output is written.
    split_name(name)

    theme_values = entry.get("themeValues")
    if not isinstance(theme_values, dict):
        raise BrushValidationError(f"{context}: 'themeValues' must be an object")

    return BrushRecord(
        name=name,
        theme_values=ThemeValues(
            **{key: _required_str(theme_values, key, f"{context}.themeValues") for key in THEME_KEYS}
        ),
        alternate_keys=_optional_str_list(entry, "alternateKeys", context),
        obsolete_keys=_optional_str_list(entry, "obsoleteKeys", context),
    )


def _required_str(data: Mapping[str, object], key: str, context: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise BrushValidationError(f"{context}: field {key!r} must be a non-empty string")
    return value


def _optional_str_list(data: Mapping[str, object], key: str, context: str) -> tuple[str, ...]:
    raw = data.get(key)
    if raw is None:
        return ()
    if not isinstance(raw, Sequence) or isinstance(raw, str):
        raise BrushValidationError(f"{context}: field {key!r} must be a list of strings")
    for item in raw:
        if not isinstance(item, str) or not item.strip():
            raise BrushValidationError(f"{context}: field {key!r} must contain non-empty strings")
    return tuple(raw)
