"""Light/dark resource dictionary rendering."""

from __future__ import annotations

from typing import Iterable, Iterator

from brushgen.brushes.constants import RESOURCE_DICTIONARY_FOOTER, RESOURCE_DICTIONARY_HEADER
from brushgen.brushes.models import BrushRecord


def theme_dictionary_bindings(theme: str, brushes: Iterable[BrushRecord]) -> Iterator[tuple[str, str]]:
    """Yield ``(key, value)`` for every brush and each of its alternate keys."""
    for brush in brushes:
        value = brush.theme_values[theme]
        yield brush.name, value
        for alternate in brush.alternate_keys:
            yield alternate, value


def render_binding(key: str, value: str) -> str:
    if value.startswith("#"):
        return f'  <SolidColorBrush x:Key="{key}" Color="{value}" po:Freeze="True" />\n'
    return render_static_resource(key, value)


def render_static_resource(key: str, resource_key: str) -> str:
    return f'  <colors:StaticResource x:Key="{key}" ResourceKey="{resource_key}" />\n'


def render_theme_dictionary(theme: str, brushes: Iterable[BrushRecord]) -> str:
    """Render the resource dictionary for one theme.

    The caller passes every brush, including the ignored one: its theme
    values still belong in both dictionaries.
    """
    lines = [RESOURCE_DICTIONARY_HEADER]
    for key, value in theme_dictionary_bindings(theme, brushes):
        lines.append(render_binding(key, value))
    lines.append("\n")
    lines.append(RESOURCE_DICTIONARY_FOOTER)
    return "".join(lines)
