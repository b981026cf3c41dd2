"""Parsing-related exceptions."""

from __future__ import annotations

from skillmarket.exceptions.base import SkillmarketError


class FrontmatterError(SkillmarketError, ValueError):
    """Raised when a Markdown file's YAML frontmatter cannot be parsed."""
