"""Full regeneration of every brush resource file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from brushgen.brushes.constants import THEME_DISPLAY_NAMES
from brushgen.brushes.dictionaries import render_theme_dictionary
from brushgen.brushes.loader import load_brush_file
from brushgen.brushes.models import BrushRecord
from brushgen.brushes.obsolete import (
    has_insert_marker,
    load_template,
    obsolete_bindings,
    render_obsolete_dictionary,
)
from brushgen.brushes.theme_class import render_theme_class
from brushgen.brushes.tree import TreeItem, build_brush_tree
from brushgen.config.settings import GeneratorSettings
from brushgen.errors import BrushGenError, ErrorCode
from brushgen.runtime_paths import (
    obsolete_dictionary_path,
    require_repo_root,
    theme_class_path,
    theme_dictionary_path,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GenerationResult:
    repo_root: Path
    brush_count: int = 0
    ignored_count: int = 0
    obsolete_count: int = 0
    written: list[Path] = field(default_factory=list)


class BrushGenerator:
    """Loads the brush definitions and rewrites all generated files."""

    def __init__(self, settings: GeneratorSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> GeneratorSettings:
        return self._settings

    def load(self) -> list[BrushRecord]:
        """Load brushes sorted by name."""
        brushes = load_brush_file(self._settings.input_path)
        # Ordinal, not culture-aware: "TextBox" sorts before "Textblock" so the
        # generated files do not depend on the locale of the build machine.
        return sorted(brushes, key=lambda brush: brush.name)

    def visible_brushes(self, brushes: list[BrushRecord]) -> list[BrushRecord]:
        """Brushes that take part in the accessor class and obsolete aliases."""
        ignored = self._settings.ignored_brush_name
        return [brush for brush in brushes if brush.name != ignored]

    def generate(self) -> GenerationResult:
        brushes = self.load()
        visible = self.visible_brushes(brushes)
        tree = build_brush_tree(visible)
        logger.info(
            "loaded %d brushes from %s (%d ignored)",
            len(brushes),
            self._settings.input_path,
            len(brushes) - len(visible),
        )

        repo_root = require_repo_root(self._settings.working_dir)
        logger.info("repo root %s", repo_root)
        result = GenerationResult(
            repo_root=repo_root,
            brush_count=len(brushes),
            ignored_count=len(brushes) - len(visible),
        )

        # The theme dictionaries get every brush, the ignored one included.
        for theme in THEME_DISPLAY_NAMES:
            path = theme_dictionary_path(repo_root, self._settings, theme)
            self._write(path, render_theme_dictionary(theme, brushes), result)

        result.obsolete_count = self._write_obsolete_dictionary(visible, repo_root, result)
        self._write_theme_class(tree, repo_root, result)
        return result

    def _write_obsolete_dictionary(
        self, brushes: list[BrushRecord], repo_root: Path, result: GenerationResult
    ) -> int:
        template_path = self._settings.obsolete_template_path
        template = load_template(template_path)
        if not has_insert_marker(template):
            logger.warning("no insert marker in %s; writing it unchanged", template_path)
        self._write(
            obsolete_dictionary_path(repo_root, self._settings),
            render_obsolete_dictionary(brushes, template),
            result,
        )
        return len(obsolete_bindings(brushes))

    def _write_theme_class(
        self, tree: TreeItem[BrushRecord], repo_root: Path, result: GenerationResult
    ) -> None:
        self._write(theme_class_path(repo_root, self._settings), render_theme_class(tree), result)

    @staticmethod
    def _write(path: Path, content: str, result: GenerationResult) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8", newline="\n") as handle:
                handle.write(content)
        except OSError as exc:
            raise BrushGenError(
                ErrorCode.OUTPUT_WRITE_FAILED, path=path, details={"original": str(exc)}
            ) from exc
        result.written.append(path)
        logger.info("wrote %s", path)
