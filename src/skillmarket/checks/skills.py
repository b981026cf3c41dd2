"""Checks for skills registered in ``plugin.json``."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from skillmarket.checks.discovery import discover_skill_files, display_path, normalize_source
from skillmarket.checks.entries import EntryCheck, check_entry_file, to_validated_entry
from skillmarket.constants.discovery import SKILL_MARKDOWN_FILENAME
from skillmarket.constants.validation import MKT004, MKT101
from skillmarket.exceptions.validation import ValidationError
from skillmarket.manifest import relative_source, strip_current_dir
from skillmarket.model import PluginManifest, ValidatedEntry

logger = logging.getLogger(__name__)


@dataclass
class SkillCheckResult:
    entries: list[ValidatedEntry] = field(default_factory=list)
    checks: list[EntryCheck] = field(default_factory=list)
    issues: list[ValidationError] = field(default_factory=list)


def skill_file_for_source(source: str, root: Path) -> Path:
    """Skills are registered by folder; the document lives at ``<folder>/SKILL.md``."""
    return root / strip_current_dir(source) / SKILL_MARKDOWN_FILENAME


def check_registered_skills(manifest: PluginManifest, root: Path) -> SkillCheckResult:
    """Check that every registered skill folder has a valid ``SKILL.md``."""
    result = SkillCheckResult()
    for source in manifest.skills:
        skill_file = skill_file_for_source(source, root)
        if not skill_file.is_file():
            result.issues.append(
                ValidationError(
                    code=MKT004,
                    path=display_path(skill_file, root),
                    field="skills",
                    message=f"missing {SKILL_MARKDOWN_FILENAME} for: {source}",
                    hint=f"expected: {skill_file}",
                )
            )
            continue

        check = check_entry_file(skill_file, kind="skill", root=root)
        result.checks.append(check)
        result.issues.extend(check.issues)
        if check.ok:
            result.entries.append(to_validated_entry(check, kind="skill", source=source, root=root))
            logger.debug("OK: %s (%s)", check.name, source)
    return result


def find_unregistered_skills(manifest: PluginManifest, skills_dir: Path, root: Path) -> list[ValidationError]:
    """Warn about ``SKILL.md`` files on disk that ``plugin.json`` does not list."""
    registered = {normalize_source(source) for source in manifest.skills}
    warnings: list[ValidationError] = []
    for skill_file in discover_skill_files(skills_dir, root):
        source = relative_source(skill_file.parent, root)
        if normalize_source(source) in registered:
            continue
        warnings.append(
            ValidationError(
                code=MKT101,
                path=display_path(skill_file, root),
                field="skills",
                message=f"skill not in plugin.json: {source}",
                level="warning",
            )
        )
    return warnings
