"""Generator settings with optional brushgen.yaml overrides."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from brushgen.brushes.constants import IGNORED_BRUSH_NAME
from brushgen.errors import BrushGenError, ErrorCode

SETTINGS_FILE_NAME = "brushgen.yaml"


class GeneratorSettings:
    """Typed access to generator settings keyed as ``section/name``."""

    def __init__(self, values: Mapping[str, Any] | None = None, *, working_dir: Path | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})
        self._working_dir = (working_dir or Path.cwd()).resolve()

    @classmethod
    def load(cls, working_dir: Path | None = None) -> GeneratorSettings:
        """Read ``brushgen.yaml`` from ``working_dir`` if it exists."""
        base = (working_dir or Path.cwd()).resolve()
        path = base / SETTINGS_FILE_NAME
        if not path.exists():
            return cls(working_dir=base)
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
            raise BrushGenError(
                ErrorCode.CONFIG_INVALID, path=path, details={"original": str(exc)}
            ) from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise BrushGenError(ErrorCode.CONFIG_INVALID, path=path)
        return cls(_flatten(data), working_dir=base)

    def value(self, key: str, default: str) -> str:
        raw = self._values.get(key)
        if raw is None:
            return default
        cleaned = str(raw).strip()
        return cleaned or default

    @property
    def working_dir(self) -> Path:
        return self._working_dir

    # -- input --

    @property
    def input_path(self) -> Path:
        return self._working_dir / self.value("input/path", "ThemeColors.json")

    @property
    def obsolete_template_path(self) -> Path:
        return self._working_dir / self.value(
            "input/obsolete_template", "MaterialDesignTheme.ObsoleteBrushes.xaml"
        )

    # -- output --

    @property
    def project_dir(self) -> str:
        return self.value("output/project_dir", "MaterialDesignThemes.Wpf")

    @property
    def themes_dir(self) -> str:
        return self.value("output/themes_dir", "Themes")

    @property
    def dictionary_prefix(self) -> str:
        return self.value("output/dictionary_prefix", "MaterialDesignTheme")

    @property
    def theme_class_file(self) -> str:
        return self.value("output/theme_class_file", "Theme.g.cs")

    # -- brushes --

    @property
    def ignored_brush_name(self) -> str:
        return self.value("brushes/ignored_name", IGNORED_BRUSH_NAME)


def _flatten(data: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    flat: dict[str, Any] = {}
    for key, value in data.items():
        name = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(_flatten(value, f"{name}/"))
        else:
            flat[name] = value
    return flat
