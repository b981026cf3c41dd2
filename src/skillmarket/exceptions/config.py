"""Configuration-related exceptions."""

from __future__ import annotations

from skillmarket.exceptions.base import SkillmarketError


class ConfigError(SkillmarketError, ValueError):
    """Raised when tool configuration is invalid."""
