"""Tests for brush name derivation."""

from __future__ import annotations

import pytest

from brushgen.brushes import names
from brushgen.brushes.models import BrushRecord, ThemeValues
from brushgen.brushes.names import BrushNameError


def test_derives_parts_from_button_background() -> None:
    name = "MaterialDesign.Brush.Button.Background"

    assert names.property_name(name) == "Background"
    assert names.container_parts(name) == ["Button"]
    assert names.container_type_name(name) == "Button"
    assert names.name_without_prefix(name) == "Button.Background"


def test_deep_name_keeps_segment_order_and_case() -> None:
    name = "MaterialDesign.Brush.DataGrid.columnHeader.Foreground"

    assert names.container_parts(name) == ["DataGrid", "columnHeader"]
    assert names.container_type_name(name) == "DataGrid.columnHeader"
    assert names.property_name(name) == "Foreground"


def test_three_segment_name_has_no_container() -> None:
    name = "MaterialDesign.Brush.Background"

    assert names.container_parts(name) == []
    assert names.container_type_name(name) == ""
    assert names.property_name(name) == "Background"


@pytest.mark.parametrize("bad_name", ["", "Background", "MaterialDesign.Brush", "A..B", "A.B."])
def test_malformed_names_fail_fast(bad_name: str) -> None:
    with pytest.raises(BrushNameError):
        names.container_parts(bad_name)


def test_name_without_prefix_rejects_foreign_prefix() -> None:
    with pytest.raises(BrushNameError):
        names.name_without_prefix("Other.Brush.Button.Background")


def test_name_without_prefix_accepts_custom_prefix() -> None:
    assert names.name_without_prefix("NS.Brush.A.Leaf", prefix="NS.Brush.") == "A.Leaf"


def test_brush_record_properties_follow_name() -> None:
    brush = BrushRecord(
        name="MaterialDesign.Brush.Card.Border",
        theme_values=ThemeValues(light="#FFFFFF", dark="#000000"),
    )

    assert brush.property_name == "Border"
    assert brush.container_parts == ["Card"]
    assert brush.container_type_name == "Card"
    assert brush.name_without_prefix == "Card.Border"
