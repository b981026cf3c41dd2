"""Frontmatter requirements shared by skill and agent files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from skillmarket.checks.discovery import display_path
from skillmarket.constants.discovery import ENTRY_NAME_PATTERN
from skillmarket.constants.manifest import AGENT_REQUIRED_FIELDS, SKILL_REQUIRED_FIELDS
from skillmarket.constants.validation import MKT007, MKT008, MKT009, MKT010
from skillmarket.exceptions import FrontmatterError
from skillmarket.exceptions.validation import ValidationError
from skillmarket.model import ValidatedEntry
from skillmarket.parsers import parse_frontmatter_file
from skillmarket.types import EntryKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntryCheck:
    """Result of checking one skill or agent file."""

    path: Path
    name: str | None
    issues: tuple[ValidationError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.issues


def check_entry_file(
    path: Path,
    *,
    kind: EntryKind,
    root: Path,
    agent_models: tuple[str, ...] = (),
) -> EntryCheck:
    """Parse *path* and check the frontmatter keys required for *kind*."""
    shown = display_path(path, root)
    try:
        parsed = parse_frontmatter_file(path)
    except FrontmatterError as exc:
        return EntryCheck(
            path=path,
            name=None,
            issues=(ValidationError(code=MKT007, path=shown, field="", message=str(exc)),),
        )

    frontmatter = parsed.frontmatter or {}
    required = SKILL_REQUIRED_FIELDS if kind == "skill" else AGENT_REQUIRED_FIELDS
    issues: list[ValidationError] = []

    for key in required:
        if frontmatter.get(key) is None:
            issues.append(
                ValidationError(
                    code=MKT008,
                    path=shown,
                    field=key,
                    message=f"{kind} frontmatter is missing required field `{key}`",
                )
            )

    name: str | None = None
    raw_name = frontmatter.get("name")
    if raw_name is not None:
        if isinstance(raw_name, str) and ENTRY_NAME_PATTERN.match(raw_name.strip()):
            name = raw_name.strip()
        else:
            issues.append(
                ValidationError(
                    code=MKT009,
                    path=shown,
                    field="name",
                    message=f"invalid {kind} name {raw_name!r}",
                    hint="use lowercase letters and digits separated by single hyphens",
                )
            )

    description = frontmatter.get("description")
    if description is not None and (not isinstance(description, str) or not description.strip()):
        issues.append(
            ValidationError(
                code=MKT009,
                path=shown,
                field="description",
                message=f"{kind} description must be a non-empty string",
            )
        )

    if kind == "agent":
        model = frontmatter.get("model")
        if model is not None and (not isinstance(model, str) or model.strip() not in agent_models):
            issues.append(
                ValidationError(
                    code=MKT009,
                    path=shown,
                    field="model",
                    message=f"invalid agent model {model!r}",
                    hint=f"expected one of: {', '.join(agent_models)}",
                )
            )

    if issues:
        logger.debug("%s %s failed %d check(s)", kind, shown, len(issues))
    return EntryCheck(path=path, name=name, issues=tuple(issues))


def to_validated_entry(check: EntryCheck, *, kind: EntryKind, source: str, root: Path) -> ValidatedEntry:
    assert check.name is not None
    return ValidatedEntry(kind=kind, source=source, name=check.name, path=display_path(check.path, root))


def find_duplicate_names(checks: list[EntryCheck], *, kind: EntryKind, root: Path) -> list[ValidationError]:
    """Report every name declared by more than one file of the same kind."""
    paths_by_name: dict[str, list[str]] = {}
    for check in checks:
        if check.name is None:
            continue
        paths_by_name.setdefault(check.name, []).append(display_path(check.path, root))

    issues: list[ValidationError] = []
    for name, paths in sorted(paths_by_name.items()):
        unique_paths = sorted(set(paths))
        if len(unique_paths) <= 1:
            continue
        issues.append(
            ValidationError(
                code=MKT010,
                path=unique_paths[0],
                field="name",
                message=f"duplicate {kind} name `{name}` declared by {len(unique_paths)} files",
                hint=", ".join(unique_paths),
            )
        )
    return issues
