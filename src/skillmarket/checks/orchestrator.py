"""End-to-end marketplace validation.

``validate_marketplace`` is the entry point behind ``skillmarket validate``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from skillmarket.checks.agents import check_registered_agents, find_unregistered_agents
from skillmarket.checks.discovery import display_path
from skillmarket.checks.entries import find_duplicate_names
from skillmarket.checks.skills import check_registered_skills, find_unregistered_skills
from skillmarket.config import SkillmarketConfig
from skillmarket.constants.manifest import (
    MARKETPLACE_SCHEMA_FILENAME,
    PLUGIN_SCHEMA_FILENAME,
    ROOT_PLUGIN_SOURCES,
)
from skillmarket.constants.validation import MKT103
from skillmarket.exceptions import ConfigError, ManifestError
from skillmarket.exceptions.validation import ValidationError, sort_errors
from skillmarket.manifest import load_manifest, validate_against_schema
from skillmarket.model import MarketplaceManifest, PluginManifest, ValidationReport

logger = logging.getLogger(__name__)


def validate_marketplace(root: Path, *, config: SkillmarketConfig | None = None) -> ValidationReport:
    """Validate manifests, registered entries, and files on disk under *root*."""
    root = root.resolve()
    if not root.is_dir():
        raise ConfigError(f"Repository root does not exist or is not a directory: {root}")
    config = config or SkillmarketConfig()

    marketplace_path = config.marketplace_manifest_path(root)
    plugin_path = config.plugin_manifest_path(root)

    try:
        marketplace_payload = load_manifest(marketplace_path)
        plugin_payload = load_manifest(plugin_path)
    except ManifestError as exc:
        logger.warning("Stopping validation: %s", exc)
        return ValidationReport(root=root, issues=(_manifest_issue(exc, root),))

    issues: list[ValidationError] = []
    marketplace_issues = validate_against_schema(
        marketplace_payload,
        MARKETPLACE_SCHEMA_FILENAME,
        path=display_path(marketplace_path, root),
    )
    plugin_issues = validate_against_schema(
        plugin_payload,
        PLUGIN_SCHEMA_FILENAME,
        path=display_path(plugin_path, root),
    )
    issues.extend(marketplace_issues)
    if plugin_issues:
        logger.warning("Stopping validation: %s does not match the plugin schema", plugin_path.name)
        return ValidationReport(root=root, issues=tuple(sort_errors([*issues, *plugin_issues])))

    assert isinstance(plugin_payload, dict)
    manifest = PluginManifest.from_payload(plugin_payload)

    skills = check_registered_skills(manifest, root)
    agents = check_registered_agents(manifest, root, agent_models=config.agent_models)
    issues.extend(skills.issues)
    issues.extend(agents.issues)
    issues.extend(find_duplicate_names(skills.checks, kind="skill", root=root))
    issues.extend(find_duplicate_names(agents.checks, kind="agent", root=root))
    issues.extend(find_unregistered_skills(manifest, config.skills_path(root), root))
    issues.extend(find_unregistered_agents(manifest, config.agents_path(root), root))

    if not marketplace_issues:
        assert isinstance(marketplace_payload, dict)
        marketplace = MarketplaceManifest.from_payload(marketplace_payload)
        issues.extend(
            check_version_consistency(manifest, marketplace, path=display_path(marketplace_path, root))
        )

    report = ValidationReport(
        root=root,
        issues=tuple(sort_errors(issues)),
        skills=tuple(skills.entries),
        agents=tuple(agents.entries),
        plugin_version=manifest.version,
        skills_registered=len(manifest.skills),
        agents_registered=agents.registered,
        agents_mode=manifest.agents_mode,
        agents_source=manifest.agents if isinstance(manifest.agents, str) else None,
    )
    logger.info(
        "Validated %d skill(s) and %d agent(s): %d error(s), %d warning(s)",
        len(report.skills),
        len(report.agents),
        len(report.errors),
        len(report.warnings),
    )
    return report


def check_version_consistency(
    manifest: PluginManifest,
    marketplace: MarketplaceManifest,
    *,
    path: str,
) -> list[ValidationError]:
    """Warn when a marketplace entry for this repository pins a different version."""
    warnings: list[ValidationError] = []
    for position, plugin in enumerate(marketplace.plugins):
        if not isinstance(plugin.source, str) or plugin.version is None:
            continue
        if plugin.source.strip() not in ROOT_PLUGIN_SOURCES:
            continue
        if plugin.version == manifest.version:
            continue
        warnings.append(
            ValidationError(
                code=MKT103,
                path=path,
                field=f"/plugins/{position}/version",
                message=(
                    f"marketplace version {plugin.version!r} for plugin `{plugin.name}` "
                    f"differs from plugin.json version {manifest.version!r}"
                ),
                level="warning",
            )
        )
    return warnings


def _manifest_issue(exc: ManifestError, root: Path) -> ValidationError:
    return ValidationError(
        code=exc.code,
        path=display_path(exc.path, root),
        field="",
        message=str(exc),
        line=exc.line,
        column=exc.column,
    )
