"""Config data model for Skillmarket."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillmarket.constants.config import (
    DEFAULT_AGENT_MODELS,
    DEFAULT_AGENTS_DIR,
    DEFAULT_MARKETPLACE_MANIFEST,
    DEFAULT_PLUGIN_MANIFEST,
    DEFAULT_README_PATH,
    DEFAULT_SKILLS_DIR,
)
from skillmarket.types.config import IndexConfig


@dataclass(frozen=True)
class SkillmarketConfig:
    """Resolved tool config. Paths are relative to the repository root."""

    plugin_manifest: str = DEFAULT_PLUGIN_MANIFEST
    marketplace_manifest: str = DEFAULT_MARKETPLACE_MANIFEST
    skills_dir: str = DEFAULT_SKILLS_DIR
    agents_dir: str = DEFAULT_AGENTS_DIR
    readme_path: str = DEFAULT_README_PATH
    agent_models: tuple[str, ...] = DEFAULT_AGENT_MODELS
    index: IndexConfig = IndexConfig()

    def plugin_manifest_path(self, root: Path) -> Path:
        return root / self.plugin_manifest

    def marketplace_manifest_path(self, root: Path) -> Path:
        return root / self.marketplace_manifest

    def skills_path(self, root: Path) -> Path:
        return root / self.skills_dir

    def agents_path(self, root: Path) -> Path:
        return root / self.agents_dir

    def readme(self, root: Path) -> Path:
        return root / self.readme_path
