"""Checks for agents registered in ``plugin.json``.

``agents`` is either a list of entries (each resolving to ``<entry>.md``)
or a single directory path, in which case every ``*.md`` file directly
inside that directory is an agent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from skillmarket.checks.discovery import (
    agent_file_for_source,
    discover_agent_files,
    display_path,
    normalize_source,
)
from skillmarket.checks.entries import EntryCheck, check_entry_file, to_validated_entry
from skillmarket.constants.validation import MKT005, MKT006, MKT102
from skillmarket.exceptions.validation import ValidationError
from skillmarket.manifest import relative_source, strip_current_dir
from skillmarket.model import PluginManifest, ValidatedEntry

logger = logging.getLogger(__name__)


@dataclass
class AgentCheckResult:
    entries: list[ValidatedEntry] = field(default_factory=list)
    checks: list[EntryCheck] = field(default_factory=list)
    issues: list[ValidationError] = field(default_factory=list)
    registered: int = 0


def check_registered_agents(
    manifest: PluginManifest,
    root: Path,
    *,
    agent_models: tuple[str, ...],
) -> AgentCheckResult:
    """Check every registered agent file, in list or directory mode."""
    if isinstance(manifest.agents, str):
        return _check_agent_directory(manifest.agents, root, agent_models=agent_models)

    result = AgentCheckResult(registered=len(manifest.agents))
    for source in manifest.agents:
        agent_file = agent_file_for_source(source, root)
        if not agent_file.is_file():
            result.issues.append(
                ValidationError(
                    code=MKT005,
                    path=display_path(agent_file, root),
                    field="agents",
                    message=f"missing agent file for: {source}",
                    hint=f"expected: {agent_file}",
                )
            )
            continue
        _record(result, agent_file, source, root, agent_models)
    return result


def _check_agent_directory(source: str, root: Path, *, agent_models: tuple[str, ...]) -> AgentCheckResult:
    agents_dir = root / strip_current_dir(source)
    if not agents_dir.is_dir():
        return AgentCheckResult(
            issues=[
                ValidationError(
                    code=MKT006,
                    path=display_path(agents_dir, root),
                    field="agents",
                    message=f"missing agents directory: {source}",
                    hint=f"expected: {agents_dir}",
                )
            ]
        )

    agent_files = discover_agent_files(agents_dir)
    result = AgentCheckResult(registered=len(agent_files))
    for agent_file in agent_files:
        _record(result, agent_file, relative_source(agent_file, root), root, agent_models)
    return result


def _record(
    result: AgentCheckResult,
    agent_file: Path,
    source: str,
    root: Path,
    agent_models: tuple[str, ...],
) -> None:
    check = check_entry_file(agent_file, kind="agent", root=root, agent_models=agent_models)
    result.checks.append(check)
    result.issues.extend(check.issues)
    if check.ok:
        result.entries.append(to_validated_entry(check, kind="agent", source=source, root=root))
        logger.debug("OK: %s (%s)", check.name, source)


def find_unregistered_agents(manifest: PluginManifest, agents_dir: Path, root: Path) -> list[ValidationError]:
    """Warn about agent files on disk missing from a list-mode ``agents`` entry.

    Directory mode includes every file automatically, so nothing is reported.
    """
    if isinstance(manifest.agents, str):
        return []
    registered = {normalize_source(source) for source in manifest.agents}
    warnings: list[ValidationError] = []
    for agent_file in discover_agent_files(agents_dir):
        source = relative_source(agent_file, root)
        if normalize_source(source) in registered:
            continue
        warnings.append(
            ValidationError(
                code=MKT102,
                path=display_path(agent_file, root),
                field="agents",
                message=f"agent file not in plugin.json: {agent_file.stem}",
                level="warning",
            )
        )
    return warnings
