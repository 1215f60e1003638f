"""Generated ``Theme`` accessor class rendering."""

from __future__ import annotations

from brushgen.brushes.constants import INDENT, THEME_CLASS_FOOTER, THEME_CLASS_HEADER
from brushgen.brushes.models import BrushRecord
from brushgen.brushes.tree import TreeItem


def render_theme_class(tree: TreeItem[BrushRecord]) -> str:
    lines: list[str] = [THEME_CLASS_HEADER]
    _write_tree_item(tree, lines, 0)
    lines.append(THEME_CLASS_FOOTER)
    return "".join(lines)


def _write_tree_item(item: TreeItem[BrushRecord], lines: list[str], indent_level: int) -> None:
    # The root contributes members only; every other node becomes a nested class.
    indent = INDENT * indent_level
    if not item.is_root:
        lines.append(f"{indent}public class {item.name}\n")
        lines.append(f"{indent}{{\n")

    for brush in item.values:
        lines.append(f"{indent}{INDENT}public Color {brush.property_name} {{ get; set; }}\n")
        lines.append("\n")

    for child in item.children:
        lines.append(f"{indent}{INDENT}public {child.name} {child.name}s {{ get; set; }} = new();\n")
        lines.append("\n")

    for child in item.children:
        _write_tree_item(child, lines, indent_level + 1)

    if not item.is_root:
        lines.append(f"{indent}}}\n")
        lines.append("\n")
