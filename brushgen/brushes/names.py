"""Structural facts derived from dotted brush names.

A brush name looks like ``MaterialDesign.Brush.Button.Background``: a
namespace, the ``Brush`` category, zero or more container segments, and a
leaf. Everything here is a pure function of the name string.
"""

from __future__ import annotations

from brushgen.brushes.constants import BRUSH_PREFIX, MIN_NAME_SEGMENTS


class BrushNameError(ValueError):
    """Raised when a brush name cannot be split into its parts."""


def split_name(name: str) -> list[str]:
    """Split a brush name into its segments, failing on malformed names."""
    if not isinstance(name, str) or not name:
        raise BrushNameError(f"Brush name must be a non-empty string, got {name!r}")
    parts = name.split(".")
    if len(parts) < MIN_NAME_SEGMENTS:
        raise BrushNameError(
            f"Brush name {name!r} needs at least {MIN_NAME_SEGMENTS} dot-separated segments"
        )
    if any(not part for part in parts):
        raise BrushNameError(f"Brush name {name!r} contains an empty segment")
    return parts


def property_name(name: str) -> str:
    return split_name(name)[-1]


def container_parts(name: str) -> list[str]:
    """Segments between the namespace/category pair and the leaf."""
    return split_name(name)[2:-1]


def container_type_name(name: str) -> str:
    return ".".join(container_parts(name))


def name_without_prefix(name: str, prefix: str = BRUSH_PREFIX) -> str:
    if not name.startswith(prefix):
        raise BrushNameError(f"Brush name {name!r} does not start with {prefix!r}")
    return name[len(prefix):]
