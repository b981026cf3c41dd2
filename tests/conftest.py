"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

import json
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def basic_repo_root(fixtures_root: Path) -> Path:
    """Return the primary fixture marketplace repository path."""
    return fixtures_root / "repos" / "basic"


@pytest.fixture()
def basic_repo_copy(basic_repo_root: Path, tmp_path: Path) -> Path:
    """Writable copy of the basic fixture repository."""
    target = tmp_path / "basic"
    shutil.copytree(basic_repo_root, target)
    return target


def _frontmatter_doc(frontmatter: dict[str, Any] | None, body: str = "# Document\n") -> str:
    """Render a Markdown document with YAML frontmatter."""
    if frontmatter is None:
        return body
    return "---\n" + yaml.safe_dump(frontmatter, sort_keys=False) + "---\n" + body


@pytest.fixture()
def make_repo(tmp_path: Path) -> Callable[..., Path]:
    """Build a marketplace repository under ``tmp_path``.

    ``skills`` maps skill folders to frontmatter, ``agents`` maps agent paths
    (without ``.md``) to frontmatter, and ``files`` writes raw text. Unless
    ``plugin`` is given, ``plugin.json`` registers exactly the skills and agents.
    """

    def _make(
        *,
        plugin: dict[str, Any] | None = None,
        marketplace: dict[str, Any] | None = None,
        skills: dict[str, dict[str, Any] | None] | None = None,
        agents: dict[str, dict[str, Any] | None] | None = None,
        files: dict[str, str] | None = None,
    ) -> Path:
        root = tmp_path / "repo"
        manifest_dir = root / ".claude-plugin"
        manifest_dir.mkdir(parents=True, exist_ok=True)
        skills = skills or {}
        agents = agents or {}

        for folder, frontmatter in skills.items():
            skill_dir = root / folder
            skill_dir.mkdir(parents=True, exist_ok=True)
            (skill_dir / "SKILL.md").write_text(_frontmatter_doc(frontmatter), encoding="utf-8")
        for entry, frontmatter in agents.items():
            agent_file = root / f"{entry}.md"
            agent_file.parent.mkdir(parents=True, exist_ok=True)
            agent_file.write_text(_frontmatter_doc(frontmatter), encoding="utf-8")
        for relative, content in (files or {}).items():
            target = root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")

        if plugin is None:
            plugin = {
                "version": "1.0.0",
                "skills": [f"./{folder}" for folder in skills],
                "agents": [f"./{entry}" for entry in agents],
            }
        if marketplace is None:
            marketplace = {"name": "demo", "plugins": [{"name": "demo", "source": "./"}]}

        (manifest_dir / "plugin.json").write_text(json.dumps(plugin, indent=2), encoding="utf-8")
        (manifest_dir / "marketplace.json").write_text(json.dumps(marketplace, indent=2), encoding="utf-8")
        return root

    return _make
