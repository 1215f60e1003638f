"""Error codes and error handling utilities for brushgen."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any

from brushgen.brushes.models import BrushValidationError, UnknownThemeError
from brushgen.brushes.names import BrushNameError


class ErrorCode(Enum):
    """Standardized error codes for a generation run."""

    # Input errors
    INPUT_NOT_FOUND = auto()
    INPUT_UNREADABLE = auto()
    INPUT_INVALID = auto()
    BRUSH_NAME_INVALID = auto()
    THEME_UNKNOWN = auto()

    # Repository / output errors
    REPO_ROOT_NOT_FOUND = auto()
    TEMPLATE_NOT_FOUND = auto()
    OUTPUT_WRITE_FAILED = auto()

    # Configuration errors
    CONFIG_INVALID = auto()

    OPERATION_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INPUT_NOT_FOUND: "The brush definition file was not found.",
    ErrorCode.INPUT_UNREADABLE: "The brush definition file could not be read.",
    ErrorCode.INPUT_INVALID: "The brush definition file does not have the expected shape.",
    ErrorCode.BRUSH_NAME_INVALID: "A brush name is malformed.",
    ErrorCode.THEME_UNKNOWN: "An unknown theme was requested.",

    ErrorCode.REPO_ROOT_NOT_FOUND: "Failed to find the repo root.",
    ErrorCode.TEMPLATE_NOT_FOUND: "The obsolete brushes template could not be read.",
    ErrorCode.OUTPUT_WRITE_FAILED: "Failed to write a generated file.",

    ErrorCode.CONFIG_INVALID: "brushgen.yaml is invalid.",

    ErrorCode.OPERATION_FAILED: "Generation failed. See details for more information.",
}

ERROR_SUGGESTIONS: dict[ErrorCode, str] = {
    ErrorCode.INPUT_NOT_FOUND: "Run the generator from the directory that holds ThemeColors.json.",
    ErrorCode.INPUT_INVALID: "Each entry needs a name and themeValues with light and dark.",
    ErrorCode.BRUSH_NAME_INVALID: "Brush names look like MaterialDesign.Brush.<Group>.<Name>.",
    ErrorCode.REPO_ROOT_NOT_FOUND: "Run the generator from inside the git checkout.",
    ErrorCode.TEMPLATE_NOT_FOUND: "Keep MaterialDesignTheme.ObsoleteBrushes.xaml next to the input.",
    ErrorCode.OUTPUT_WRITE_FAILED: "Check that the generated files are not read-only.",
    ErrorCode.CONFIG_INVALID: "brushgen.yaml must be a YAML mapping.",
}


@dataclass
class BrushGenError(Exception):
    """Base exception for brushgen with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion:
            self.suggestion = ERROR_SUGGESTIONS.get(self.code, "")

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nFile: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
            "suggestion": self.suggestion,
        }


def classify_exception(exc: Exception, path: Path | None = None) -> BrushGenError:
    """Classify a generic exception into a BrushGenError with appropriate code."""
    if isinstance(exc, BrushGenError):
        return exc
    details = {"original": str(exc)}

    if isinstance(exc, FileNotFoundError):
        return BrushGenError(ErrorCode.INPUT_NOT_FOUND, path=path, details=details)
    if isinstance(exc, (PermissionError, UnicodeDecodeError)):
        return BrushGenError(ErrorCode.INPUT_UNREADABLE, path=path, details=details)
    if isinstance(exc, OSError):
        return BrushGenError(ErrorCode.OUTPUT_WRITE_FAILED, path=path, details=details)

    if isinstance(exc, BrushNameError):
        return BrushGenError(ErrorCode.BRUSH_NAME_INVALID, message=str(exc), path=path)
    if isinstance(exc, BrushValidationError):
        return BrushGenError(ErrorCode.INPUT_INVALID, message=str(exc), path=path)
    if isinstance(exc, UnknownThemeError):
        return BrushGenError(ErrorCode.THEME_UNKNOWN, message=str(exc), path=path)

    return BrushGenError(
        ErrorCode.OPERATION_FAILED,
        message=f"{type(exc).__name__}: {exc}",
        path=path,
        details=details,
    )


def format_error_for_user(error: BrushGenError | Exception) -> str:
    """Format an error for the console with an actionable suggestion."""
    if isinstance(error, BrushGenError):
        parts = [error.message]
        if error.path:
            parts.append(f" ({error.path})")
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\nHint: {error.suggestion}")
        return "".join(parts)

    return format_error_for_user(classify_exception(error))
