"""Index generation exceptions."""

from __future__ import annotations

from skillmarket.exceptions.base import SkillmarketError


class ReadmeMarkerError(SkillmarketError, ValueError):
    """Raised when the README lacks the BEGIN/END index markers."""
