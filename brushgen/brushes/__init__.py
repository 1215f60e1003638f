"""Brush model, tree and document renderers."""

from brushgen.brushes.constants import IGNORED_BRUSH_NAME
from brushgen.brushes.models import BrushRecord, BrushValidationError, ThemeValues, UnknownThemeError
from brushgen.brushes.names import BrushNameError
from brushgen.brushes.tree import TreeItem, build_brush_tree

__all__ = [
    "IGNORED_BRUSH_NAME",
    "BrushNameError",
    "BrushRecord",
    "BrushValidationError",
    "ThemeValues",
    "TreeItem",
    "UnknownThemeError",
    "build_brush_tree",
]
