"""Manifest loading exceptions."""

from __future__ import annotations

from pathlib import Path

from skillmarket.exceptions.base import SkillmarketError


class ManifestError(SkillmarketError, ValueError):
    """Raised when a manifest file is missing or is not valid JSON."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        path: Path,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.path = path
        self.line = line
        self.column = column
