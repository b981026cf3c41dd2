"""Frozen dataclasses for parsed documents, manifests, and reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from skillmarket.constants.manifest import AGENTS_MODE_DIRECTORY, AGENTS_MODE_LIST
from skillmarket.constants.reporting import SCHEMA_VERSION
from skillmarket.exceptions.validation import ValidationError
from skillmarket.types import AgentsMode, EntryKind, JsonObject


@dataclass(frozen=True)
class ParsedDocument:
    """A Markdown file split into YAML frontmatter and body."""

    file_path: Path
    raw_text: str
    frontmatter: dict[str, Any] | None
    body: str
    body_start_line: int


@dataclass(frozen=True)
class PluginManifest:
    """Typed view of ``plugin.json``."""

    version: str
    skills: tuple[str, ...] = ()
    agents: tuple[str, ...] | str = ()
    name: str | None = None

    @property
    def agents_mode(self) -> AgentsMode:
        """``directory`` when ``agents`` names a folder, ``list`` otherwise."""
        return AGENTS_MODE_DIRECTORY if isinstance(self.agents, str) else AGENTS_MODE_LIST

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> PluginManifest:
        """Build from a schema-checked JSON payload."""
        agents_raw = payload.get("agents", [])
        agents: tuple[str, ...] | str = agents_raw if isinstance(agents_raw, str) else tuple(agents_raw)
        name = payload.get("name")
        return cls(
            version=str(payload.get("version", "")),
            skills=tuple(payload.get("skills", [])),
            agents=agents,
            name=name if isinstance(name, str) else None,
        )


@dataclass(frozen=True)
class MarketplacePlugin:
    """One plugin entry in ``marketplace.json``.

    ``source`` is a repository-relative path or an object naming a remote source.
    """

    name: str
    source: str | dict[str, Any]
    version: str | None = None


@dataclass(frozen=True)
class MarketplaceManifest:
    """Typed view of ``marketplace.json``."""

    name: str
    plugins: tuple[MarketplacePlugin, ...] = ()

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> MarketplaceManifest:
        plugins = tuple(
            MarketplacePlugin(
                name=str(item["name"]),
                source=item["source"] if isinstance(item["source"], dict) else str(item["source"]),
                version=item.get("version") if isinstance(item.get("version"), str) else None,
            )
            for item in payload.get("plugins", [])
        )
        return cls(name=str(payload.get("name", "")), plugins=plugins)


@dataclass(frozen=True)
class ValidatedEntry:
    """A registered skill or agent whose file and frontmatter passed checks."""

    kind: EntryKind
    source: str
    name: str
    path: str

    def to_dict(self) -> JsonObject:
        return {"kind": self.kind, "source": self.source, "name": self.name, "path": self.path}


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of a full marketplace validation run."""

    root: Path
    issues: tuple[ValidationError, ...] = ()
    skills: tuple[ValidatedEntry, ...] = ()
    agents: tuple[ValidatedEntry, ...] = ()
    plugin_version: str | None = None
    skills_registered: int = 0
    agents_registered: int = 0
    agents_mode: AgentsMode = AGENTS_MODE_LIST
    agents_source: str | None = None

    @property
    def errors(self) -> tuple[ValidationError, ...]:
        return tuple(issue for issue in self.issues if issue.is_error)

    @property
    def warnings(self) -> tuple[ValidationError, ...]:
        return tuple(issue for issue in self.issues if not issue.is_error)

    @property
    def passed(self) -> bool:
        return not self.errors

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def to_dict(self) -> JsonObject:
        """Serialize for the JSON report artifact."""
        return {
            "schema_version": SCHEMA_VERSION,
            "root": str(self.root),
            "passed": self.passed,
            "plugin_version": self.plugin_version,
            "skills_registered": self.skills_registered,
            "agents_registered": self.agents_registered,
            "agents_mode": self.agents_mode,
            "error_count": len(self.errors),
            "warning_count": len(self.warnings),
            "skills": [entry.to_dict() for entry in self.skills],
            "agents": [entry.to_dict() for entry in self.agents],
            "issues": [issue.to_dict() for issue in self.issues],
        }


@dataclass(frozen=True)
class SkillIndex:
    """Skill names routed into index categories, plus agent names."""

    title: str
    preamble: str
    categories: tuple[tuple[str, tuple[str, ...]], ...] = ()
    agents: tuple[str, ...] = ()
    unrouted: tuple[str, ...] = field(default=(), compare=False)
