"""File discovery helpers for skills and agents on disk."""

from __future__ import annotations

from pathlib import Path

from skillmarket.constants.discovery import AGENT_FILE_SUFFIX, CURRENT_DIR_PREFIX, SKILL_MARKDOWN_FILENAME


def discover_skill_files(skills_dir: Path, root: Path) -> list[Path]:
    """Return every ``SKILL.md`` below *skills_dir*, sorted by root-relative path."""
    if not skills_dir.is_dir():
        return []
    resolved_root = root.resolve()
    discovered = {path.resolve() for path in skills_dir.rglob(SKILL_MARKDOWN_FILENAME) if path.is_file()}
    return sorted(discovered, key=lambda path: stable_path_key(path, resolved_root))


def discover_agent_files(agents_dir: Path) -> list[Path]:
    """Return top-level ``*.md`` files in *agents_dir*, sorted by name."""
    if not agents_dir.is_dir():
        return []
    return sorted(path for path in agents_dir.glob(f"*{AGENT_FILE_SUFFIX}") if path.is_file())


def normalize_source(source: str) -> str:
    """Canonical form of a manifest entry for set membership checks."""
    normalized = source.strip().replace("\\", "/").removeprefix(CURRENT_DIR_PREFIX).rstrip("/")
    return normalized.removesuffix(AGENT_FILE_SUFFIX)


def agent_file_for_source(source: str, root: Path) -> Path:
    """Resolve a list-mode agent entry; ``.md`` is appended unless already present."""
    clean = source.removeprefix(CURRENT_DIR_PREFIX)
    if not clean.endswith(AGENT_FILE_SUFFIX):
        clean = f"{clean}{AGENT_FILE_SUFFIX}"
    return root / clean


def display_path(path: Path, root: Path) -> str:
    """Render a message-friendly path relative to *root* when possible."""
    return stable_path_key(path, root)


def stable_path_key(file_path: Path, root: Path) -> str:
    """Return a deterministic path key relative to *root* when possible."""
    try:
        return file_path.relative_to(root).as_posix()
    except ValueError:
        return file_path.as_posix()
