"""Core data models for Skillmarket."""

from .entities import (
    MarketplaceManifest,
    MarketplacePlugin,
    ParsedDocument,
    PluginManifest,
    SkillIndex,
    ValidatedEntry,
    ValidationReport,
)

__all__ = [
    "MarketplaceManifest",
    "MarketplacePlugin",
    "ParsedDocument",
    "PluginManifest",
    "SkillIndex",
    "ValidatedEntry",
    "ValidationReport",
]
