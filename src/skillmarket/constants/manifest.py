"""Constants for manifest loading and entry requirements."""

from __future__ import annotations

PLUGIN_SCHEMA_FILENAME: str = "plugin.schema.json"
MARKETPLACE_SCHEMA_FILENAME: str = "marketplace.schema.json"

AGENTS_MODE_LIST: str = "list"
AGENTS_MODE_DIRECTORY: str = "directory"

SKILL_REQUIRED_FIELDS: tuple[str, ...] = ("name", "description")
AGENT_REQUIRED_FIELDS: tuple[str, ...] = ("name", "description", "model")

# ``source`` values in marketplace.json that refer to the repository itself.
ROOT_PLUGIN_SOURCES: frozenset[str] = frozenset({".", "./"})
