"""Base exception for Skillmarket."""

from __future__ import annotations


class SkillmarketError(Exception):
    """Base class for all Skillmarket errors."""
