"""Configuration loading, validation, and normalization for Skillmarket.

This package facade re-exports the public names so callers can use
``from skillmarket.config import ...``.
"""

from __future__ import annotations

from skillmarket.config.loader import load_config
from skillmarket.config.model import SkillmarketConfig
from skillmarket.config.validator import _suggest_key, validate_config_file

__all__ = [
    "SkillmarketConfig",
    "_suggest_key",
    "load_config",
    "validate_config_file",
]
