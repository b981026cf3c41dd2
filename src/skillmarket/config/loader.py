"""Config loading and normalization for Skillmarket."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from skillmarket.config.model import SkillmarketConfig
from skillmarket.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_AGENT_MODELS,
    DEFAULT_AGENTS_DIR,
    DEFAULT_MARKETPLACE_MANIFEST,
    DEFAULT_PLUGIN_MANIFEST,
    DEFAULT_README_PATH,
    DEFAULT_SKILLS_DIR,
)
from skillmarket.constants.index import DEFAULT_INDEX_PREAMBLE, DEFAULT_INDEX_TITLE
from skillmarket.exceptions import ConfigError
from skillmarket.types.config import DEFAULT_CATEGORIES, IndexCategory, IndexConfig

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> SkillmarketConfig:
    """Load and validate config from ``skillmarket.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("No %s at %s; using defaults", CONFIG_FILENAME, root)
        return SkillmarketConfig()

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Unreadable config file at {path}: {exc}") from exc

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    index_raw = raw.get("index", {})
    if index_raw is None:
        index_raw = {}
    if not isinstance(index_raw, dict):
        raise ConfigError("index must be a mapping")

    agent_models = tuple(
        model.strip().lower()
        for model in _ensure_string_list(raw.get("agent_models", list(DEFAULT_AGENT_MODELS)), "agent_models")
        if model.strip()
    )
    if not agent_models:
        raise ConfigError("agent_models must list at least one model")

    return SkillmarketConfig(
        plugin_manifest=_ensure_path_string(raw.get("plugin_manifest", DEFAULT_PLUGIN_MANIFEST), "plugin_manifest"),
        marketplace_manifest=_ensure_path_string(
            raw.get("marketplace_manifest", DEFAULT_MARKETPLACE_MANIFEST), "marketplace_manifest"
        ),
        skills_dir=_ensure_path_string(raw.get("skills_dir", DEFAULT_SKILLS_DIR), "skills_dir"),
        agents_dir=_ensure_path_string(raw.get("agents_dir", DEFAULT_AGENTS_DIR), "agents_dir"),
        readme_path=_ensure_path_string(raw.get("readme_path", DEFAULT_README_PATH), "readme_path"),
        agent_models=agent_models,
        index=_build_index_config(index_raw),
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _ensure_path_string(value: Any, key_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    return value.strip()


def _build_index_config(raw: dict[str, Any]) -> IndexConfig:
    """Build an IndexConfig from the raw ``index`` YAML block."""
    title = raw.get("title", DEFAULT_INDEX_TITLE)
    if not isinstance(title, str) or not title.strip():
        raise ConfigError("index.title must be a non-empty string")

    preamble = raw.get("preamble", DEFAULT_INDEX_PREAMBLE)
    if not isinstance(preamble, str):
        raise ConfigError("index.preamble must be a string")

    categories_raw = raw.get("categories")
    if categories_raw is None:
        return IndexConfig(title=title.strip(), preamble=preamble.strip(), categories=DEFAULT_CATEGORIES)
    if not isinstance(categories_raw, list):
        raise ConfigError("index.categories must be a list of mappings")

    categories: list[IndexCategory] = []
    seen: set[str] = set()
    for position, item in enumerate(categories_raw):
        if not isinstance(item, dict):
            raise ConfigError(f"index.categories[{position}] must be a mapping")
        name = item.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ConfigError(f"index.categories[{position}].name must be a non-empty string")
        name = name.strip()
        if name in seen:
            raise ConfigError(f"index.categories has duplicate name {name!r}")
        seen.add(name)
        patterns = tuple(
            pattern.strip()
            for pattern in _ensure_string_list(item.get("patterns"), f"index.categories[{position}].patterns")
            if pattern.strip()
        )
        if not patterns:
            raise ConfigError(f"index.categories[{position}].patterns must list at least one glob")
        categories.append(IndexCategory(name=name, patterns=patterns))

    return IndexConfig(title=title.strip(), preamble=preamble.strip(), categories=tuple(categories))
