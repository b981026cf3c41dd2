"""Build the compressed skills index from ``plugin.json``."""

from __future__ import annotations

import logging
from fnmatch import fnmatchcase
from pathlib import Path

from skillmarket.checks.discovery import agent_file_for_source, discover_agent_files
from skillmarket.checks.skills import skill_file_for_source
from skillmarket.config import SkillmarketConfig
from skillmarket.constants.discovery import CURRENT_DIR_PREFIX
from skillmarket.constants.index import INDEX_AGENTS_CATEGORY, INDEX_FLOW_TEMPLATE, INDEX_ROUTE_LINE
from skillmarket.constants.manifest import PLUGIN_SCHEMA_FILENAME
from skillmarket.constants.validation import MKT003
from skillmarket.exceptions import FrontmatterError, ManifestError
from skillmarket.manifest import load_manifest, strip_current_dir, validate_against_schema
from skillmarket.model import PluginManifest, SkillIndex
from skillmarket.parsers import parse_frontmatter_file
from skillmarket.types.config import IndexCategory

logger = logging.getLogger(__name__)


def build_index(root: Path, *, config: SkillmarketConfig | None = None) -> SkillIndex:
    """Resolve skill and agent names and route skills into index categories."""
    root = root.resolve()
    config = config or SkillmarketConfig()
    plugin_path = config.plugin_manifest_path(root)

    payload = load_manifest(plugin_path)
    schema_issues = validate_against_schema(payload, PLUGIN_SCHEMA_FILENAME, path=str(plugin_path))
    if schema_issues:
        raise ManifestError(schema_issues[0].format(), code=MKT003, path=plugin_path)
    assert isinstance(payload, dict)
    manifest = PluginManifest.from_payload(payload)

    routed: dict[str, list[str]] = {category.name: [] for category in config.index.categories}
    unrouted: list[str] = []
    for source in manifest.skills:
        name = _declared_name(skill_file_for_source(source, root))
        if name is None:
            continue
        category = route_source(source, config.index.categories)
        if category is None:
            logger.debug("Skill %s (%s) matches no index category", name, source)
            unrouted.append(name)
            continue
        routed[category].append(name)

    return SkillIndex(
        title=config.index.title,
        preamble=config.index.preamble,
        categories=tuple((category.name, tuple(routed[category.name])) for category in config.index.categories),
        agents=tuple(_agent_names(manifest, root)),
        unrouted=tuple(unrouted),
    )


def route_source(source: str, categories: tuple[IndexCategory, ...]) -> str | None:
    """Return the first category whose glob matches the ``./``-prefixed *source*."""
    candidate = CURRENT_DIR_PREFIX + strip_current_dir(source.strip()).rstrip("/")
    for category in categories:
        if any(fnmatchcase(candidate, pattern) for pattern in category.patterns):
            return category.name
    return None


def render_index(index: SkillIndex) -> str:
    """Render the pipe-delimited compressed index block."""
    lines = [
        f"[{index.title}]|{index.preamble}",
        "|" + INDEX_FLOW_TEMPLATE.format(title=index.title),
        INDEX_ROUTE_LINE,
    ]
    lines.extend(_render_bucket(name, names) for name, names in index.categories)
    lines.append(_render_bucket(INDEX_AGENTS_CATEGORY, index.agents))
    return "\n".join(lines)


def _render_bucket(name: str, names: tuple[str, ...]) -> str:
    return f"|{name}:{{{','.join(names)}}}"


def _agent_names(manifest: PluginManifest, root: Path) -> list[str]:
    if isinstance(manifest.agents, str):
        agent_files = discover_agent_files(root / strip_current_dir(manifest.agents))
    else:
        agent_files = [agent_file_for_source(source, root) for source in manifest.agents]
    names = (_declared_name(path) for path in agent_files)
    return [name for name in names if name is not None]


def _declared_name(path: Path) -> str | None:
    """Return the frontmatter ``name`` of *path*, or ``None`` when unavailable."""
    if not path.is_file():
        logger.warning("Skipping missing file: %s", path)
        return None
    try:
        parsed = parse_frontmatter_file(path)
    except FrontmatterError as exc:
        logger.warning("Skipping %s: %s", path, exc)
        return None
    name = (parsed.frontmatter or {}).get("name")
    if not isinstance(name, str) or not name.strip():
        logger.warning("Skipping %s: frontmatter has no name", path)
        return None
    return name.strip()
