"""Obsolete brush alias dictionary rendering."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from brushgen.brushes.constants import INSERT_MARKER
from brushgen.brushes.dictionaries import render_static_resource
from brushgen.brushes.models import BrushRecord
from brushgen.errors import BrushGenError, ErrorCode

_INSERT_MARKER_RE = re.compile(
    r"^[ \t]*" + re.escape(INSERT_MARKER) + r"[ \t]*(?:\r?\n|\Z)",
    re.MULTILINE,
)


def obsolete_bindings(brushes: Iterable[BrushRecord]) -> list[tuple[str, str]]:
    """Pair each obsolete key with the canonical name it now points to."""
    return [
        (obsolete_key, brush.name)
        for brush in brushes
        for obsolete_key in brush.obsolete_keys
    ]


def has_insert_marker(template: str) -> bool:
    return _INSERT_MARKER_RE.search(template) is not None


def render_obsolete_dictionary(brushes: Iterable[BrushRecord], template: str) -> str:
    """Replace the first marker line of ``template`` with the alias bindings."""
    block = "".join(
        render_static_resource(obsolete_key, name) for obsolete_key, name in obsolete_bindings(brushes)
    )

    # A callable replacement keeps backslashes in brush names literal; the
    # block takes the line ending of the marker line it replaces.
    def _replace(match: re.Match[str]) -> str:
        if match.group(0).endswith("\r\n"):
            return block.replace("\n", "\r\n")
        return block

    return _INSERT_MARKER_RE.sub(_replace, template, count=1)


def load_template(path: Path) -> str:
    """Read the template keeping its line endings as they are on disk."""
    try:
        with path.open(encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise BrushGenError(
            ErrorCode.TEMPLATE_NOT_FOUND, path=path, details={"original": str(exc)}
        ) from exc
