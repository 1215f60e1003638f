"""Brush record models."""

from __future__ import annotations

from dataclasses import dataclass

from brushgen.brushes import names


class BrushValidationError(ValueError):
    """Raised when the brush definition file fails validation."""


class UnknownThemeError(ValueError):
    """Raised when a theme value is requested for an unknown theme."""


@dataclass(frozen=True, slots=True)
class ThemeValues:
    """Per-theme values of a brush: a ``#`` color literal or a resource key."""

    light: str
    dark: str

    def __getitem__(self, theme: str) -> str:
        key = theme.lower()
        if key == "light":
            return self.light
        if key == "dark":
            return self.dark
        raise UnknownThemeError(f"Unknown theme: {theme}")


@dataclass(frozen=True, slots=True)
class BrushRecord:
    """One named brush from the definition file."""

    name: str
    theme_values: ThemeValues
    alternate_keys: tuple[str, ...] = ()
    obsolete_keys: tuple[str, ...] = ()

    @property
    def property_name(self) -> str:
        return names.property_name(self.name)

    @property
    def name_without_prefix(self) -> str:
        return names.name_without_prefix(self.name)

    @property
    def container_parts(self) -> list[str]:
        return names.container_parts(self.name)

    @property
    def container_type_name(self) -> str:
        return names.container_type_name(self.name)
