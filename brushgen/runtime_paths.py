"""Repository root discovery and generated file locations."""

from __future__ import annotations

from pathlib import Path

from brushgen.config.settings import GeneratorSettings
from brushgen.errors import BrushGenError, ErrorCode

REPO_MARKER = ".git"


def find_repo_root(start: Path | None = None) -> Path | None:
    """Return the nearest directory at or above ``start`` holding a ``.git`` directory."""
    current: Path | None = (start or Path.cwd()).resolve()
    while current is not None:
        if (current / REPO_MARKER).is_dir():
            return current
        parent = current.parent
        current = parent if parent != current else None
    return None


def require_repo_root(start: Path | None = None) -> Path:
    root = find_repo_root(start)
    if root is None:
        raise BrushGenError(
            ErrorCode.REPO_ROOT_NOT_FOUND,
            details={"start": str((start or Path.cwd()).resolve())},
        )
    return root


def project_root(repo_root: Path, settings: GeneratorSettings) -> Path:
    return repo_root / settings.project_dir


def theme_dictionary_path(repo_root: Path, settings: GeneratorSettings, theme: str) -> Path:
    """Resolve ``<project>/Themes/<prefix>.<Theme>.xaml``."""
    file_name = f"{settings.dictionary_prefix}.{theme}.xaml"
    return project_root(repo_root, settings) / settings.themes_dir / file_name


def obsolete_dictionary_path(repo_root: Path, settings: GeneratorSettings) -> Path:
    return theme_dictionary_path(repo_root, settings, "ObsoleteBrushes")


def theme_class_path(repo_root: Path, settings: GeneratorSettings) -> Path:
    return project_root(repo_root, settings) / settings.theme_class_file
