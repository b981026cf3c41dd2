"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "skillmarket.yaml"

DEFAULT_PLUGIN_MANIFEST: str = ".claude-plugin/plugin.json"
DEFAULT_MARKETPLACE_MANIFEST: str = ".claude-plugin/marketplace.json"
DEFAULT_SKILLS_DIR: str = "skills"
DEFAULT_AGENTS_DIR: str = "agents"
DEFAULT_README_PATH: str = "README.md"

DEFAULT_AGENT_MODELS: tuple[str, ...] = ("haiku", "sonnet", "opus")
