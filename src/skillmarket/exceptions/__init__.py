"""Shared exception hierarchy for Skillmarket."""

from __future__ import annotations

from .base import SkillmarketError
from .config import ConfigError
from .index import ReadmeMarkerError
from .manifest import ManifestError
from .parsing import FrontmatterError

__all__ = [
    "ConfigError",
    "FrontmatterError",
    "ManifestError",
    "ReadmeMarkerError",
    "SkillmarketError",
]
