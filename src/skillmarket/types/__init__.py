"""Shared type aliases for Skillmarket."""

from .common import AgentsMode, EntryKind, IssueLevel, JsonObject, JsonScalar, JsonValue

__all__ = [
    "AgentsMode",
    "EntryKind",
    "IssueLevel",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
]
