"""Command entry point: configure logging and run one full regeneration."""

from __future__ import annotations

import logging
from pathlib import Path
import sys

from brushgen.brushes.service import BrushGenerator
from brushgen.config.settings import GeneratorSettings
from brushgen.errors import BrushGenError, classify_exception, format_error_for_user


def _configure_logger() -> logging.Logger:
    logger = logging.getLogger("brushgen")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def run_generator(working_dir: Path | None = None) -> int:
    """Regenerate every brush resource file. Returns the process exit code."""
    logger = _configure_logger()
    try:
        settings = GeneratorSettings.load(working_dir)
        result = BrushGenerator(settings).generate()
    except (BrushGenError, OSError, ValueError) as exc:
        error = classify_exception(exc)
        logger.error("generation failed: %s", format_error_for_user(error))
        logger.error("error context: %s", error.to_dict())
        return 1

    logger.info(
        "generated %d files for %d brushes (%d obsolete aliases)",
        len(result.written),
        result.brush_count,
        result.obsolete_count,
    )
    return 0
