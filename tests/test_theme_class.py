"""Tests for the generated Theme accessor class."""

from __future__ import annotations

from brushgen.brushes.constants import THEME_CLASS_HEADER
from brushgen.brushes.models import BrushRecord, ThemeValues
from brushgen.brushes.theme_class import render_theme_class
from brushgen.brushes.tree import build_brush_tree


def _brush(name: str) -> BrushRecord:
    return BrushRecord(name=name, theme_values=ThemeValues(light="#FFFFFF", dark="#000000"))


def test_nested_classes_mirror_tree() -> None:
    tree = build_brush_tree(
        [
            _brush("MaterialDesign.Brush.A.B.Leaf1"),
            _brush("MaterialDesign.Brush.A.B.Leaf2"),
            _brush("MaterialDesign.Brush.A.Leaf3"),
            _brush("MaterialDesign.Brush.Root"),
        ]
    )

    assert render_theme_class(tree) == THEME_CLASS_HEADER + (
        "    public Color Root { get; set; }\n"
        "\n"
        "    public A As { get; set; } = new();\n"
        "\n"
        "    public class A\n"
        "    {\n"
        "        public Color Leaf3 { get; set; }\n"
        "\n"
        "        public B Bs { get; set; } = new();\n"
        "\n"
        "        public class B\n"
        "        {\n"
        "            public Color Leaf1 { get; set; }\n"
        "\n"
        "            public Color Leaf2 { get; set; }\n"
        "\n"
        "        }\n"
        "\n"
        "    }\n"
        "\n"
        "}\n"
    )


def test_preamble_marks_file_generated() -> None:
    document = render_theme_class(build_brush_tree([]))

    assert document.startswith("/// <summary>\n/// This file is auto-generated by brushgen.\n")
    assert "namespace MaterialDesignThemes.Wpf;\n" in document
    assert document.endswith("partial class Theme\n{\n}\n")


def test_sibling_properties_precede_nested_declarations() -> None:
    tree = build_brush_tree(
        [
            _brush("MaterialDesign.Brush.Button.Background"),
            _brush("MaterialDesign.Brush.Card.Background"),
        ]
    )

    lines = render_theme_class(tree).splitlines()

    buttons = lines.index("    public Button Buttons { get; set; } = new();")
    cards = lines.index("    public Card Cards { get; set; } = new();")
    button_class = lines.index("    public class Button")
    card_class = lines.index("    public class Card")
    assert buttons < cards < button_class < card_class


def test_rendering_is_repeatable() -> None:
    brushes = [_brush("MaterialDesign.Brush.A.Leaf"), _brush("MaterialDesign.Brush.B.C.Leaf")]

    assert render_theme_class(build_brush_tree(brushes)) == render_theme_class(build_brush_tree(brushes))
