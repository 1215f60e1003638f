"""Brush generator constants."""

from __future__ import annotations

BRUSH_PREFIX = "MaterialDesign.Brush."
IGNORED_BRUSH_NAME = "MaterialDesign.Brush.Ignored"
MIN_NAME_SEGMENTS = 3

THEME_KEYS: tuple[str, ...] = (
    "light",
    "dark",
)

# File name suffixes, in the order the dictionaries are written.
THEME_DISPLAY_NAMES: tuple[str, ...] = (
    "Light",
    "Dark",
)

INSERT_MARKER = "<!-- INSERT HERE -->"

RESOURCE_DICTIONARY_HEADER = """\
<ResourceDictionary xmlns="http://schemas.microsoft.com/winfx/2006/xaml/presentation"
                    xmlns:x="http://schemas.microsoft.com/winfx/2006/xaml"
                    xmlns:po="http://schemas.microsoft.com/winfx/2006/xaml/presentation/options"
                    xmlns:colors="clr-namespace:MaterialDesignColors;assembly=MaterialDesignColors">
  <ResourceDictionary.MergedDictionaries>
    <ResourceDictionary Source="./Internal/MaterialDesignTheme.BaseThemeColors.xaml" />
  </ResourceDictionary.MergedDictionaries>
"""

RESOURCE_DICTIONARY_FOOTER = "</ResourceDictionary>\n"

THEME_CLASS_HEADER = """\
/// <summary>
/// This file is auto-generated by brushgen.
/// </summary>
using System.Windows.Media;

namespace MaterialDesignThemes.Wpf;

partial class Theme
{
"""

THEME_CLASS_FOOTER = "}\n"

INDENT = "    "
