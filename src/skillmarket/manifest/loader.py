"""Read ``plugin.json`` and ``marketplace.json`` from disk."""

from __future__ import annotations

import json
from pathlib import Path

from skillmarket.constants.discovery import CURRENT_DIR_PREFIX
from skillmarket.constants.validation import MKT001, MKT002
from skillmarket.exceptions import ManifestError
from skillmarket.io import load_json_file


def load_manifest(path: Path) -> object:
    """Load a manifest, raising :class:`ManifestError` when missing or malformed."""
    if not path.is_file():
        raise ManifestError(f"Manifest not found: {path}", code=MKT001, path=path)
    try:
        return load_json_file(path)
    except json.JSONDecodeError as exc:
        raise ManifestError(
            f"Invalid JSON syntax in {path.name}: {exc.msg}",
            code=MKT002,
            path=path,
            line=exc.lineno,
            column=exc.colno,
        ) from exc
    except UnicodeDecodeError as exc:
        raise ManifestError(f"Manifest is not valid UTF-8: {path}", code=MKT002, path=path) from exc


def strip_current_dir(source: str) -> str:
    """Drop a leading ``./`` so *source* can be joined onto the repository root."""
    return source.removeprefix(CURRENT_DIR_PREFIX)


def relative_source(path: Path, root: Path) -> str:
    """Render *path* the way manifests list entries: ``./`` plus a POSIX relative path."""
    try:
        return CURRENT_DIR_PREFIX + path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()
