"""Tests for compressed index building and rendering."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from skillmarket.config import SkillmarketConfig
from skillmarket.constants.validation import MKT001, MKT003
from skillmarket.exceptions import ManifestError
from skillmarket.index import build_index, render_index, route_source
from skillmarket.model import SkillIndex
from skillmarket.types.config import DEFAULT_CATEGORIES, IndexCategory, IndexConfig

EXPECTED_BASIC_INDEX = "\n".join(
    [
        "[dotnet-skills]|IMPORTANT: Prefer retrieval-led reasoning over pretraining for any .NET work.",
        "|flow:{skim repo patterns -> consult dotnet-skills by name -> implement smallest-change -> note conflicts}",
        "|route:",
        "|csharp:{csharp-coding-standards}",
        "|aspnetcore-web:{}",
        "|data:{}",
        "|di-config:{}",
        "|quality-gates:{crap-analysis}",
        "|testing:{xunit-patterns}",
        "|dotnet:{}",
        "|meta:{marketplace-publishing}",
        "|agents:{dotnet-architect,perf-analyst}",
    ]
)


def test_render_basic_fixture_index(basic_repo_root: Path) -> None:
    assert render_index(build_index(basic_repo_root)) == EXPECTED_BASIC_INDEX


def test_build_index_routes_in_manifest_order(basic_repo_root: Path) -> None:
    index = build_index(basic_repo_root)

    assert dict(index.categories)["testing"] == ("xunit-patterns",)
    assert index.agents == ("dotnet-architect", "perf-analyst")
    assert index.unrouted == ()


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        pytest.param("./skills/csharp/records", "csharp", id="csharp"),
        pytest.param("skills/csharp/records", "csharp", id="no-dot-prefix"),
        pytest.param("./skills/csharp/records/", "csharp", id="trailing-slash"),
        pytest.param("./skills/aspire/hosting", "aspnetcore-web", id="aspire"),
        pytest.param("./skills/microsoft-extensions/options", "di-config", id="di-config"),
        pytest.param("./skills/dotnet/slopwatch", "quality-gates", id="first-match-wins"),
        pytest.param("./skills/dotnet/sdk", "dotnet", id="dotnet"),
        pytest.param("./skills/playwright/ci", "testing", id="playwright"),
        pytest.param("./skills/unknown/thing", None, id="unrouted"),
    ],
)
def test_route_source_default_categories(source: str, expected: str | None) -> None:
    assert route_source(source, DEFAULT_CATEGORIES) == expected


def test_route_source_is_case_sensitive() -> None:
    categories = (IndexCategory(name="csharp", patterns=("./skills/csharp/*",)),)

    assert route_source("./skills/CSharp/records", categories) is None


def test_unrouted_skills_are_dropped(make_repo: Callable[..., Path], caplog: pytest.LogCaptureFixture) -> None:
    root = make_repo(
        skills={
            "skills/csharp/records": {"name": "records", "description": "Records."},
            "skills/misc/other": {"name": "other", "description": "Other."},
        }
    )

    with caplog.at_level(logging.DEBUG, logger="skillmarket.index.builder"):
        index = build_index(root)

    assert index.unrouted == ("other",)
    assert "other" not in render_index(index)
    assert "matches no index category" in caplog.text


def test_missing_and_unparseable_entries_are_skipped(
    make_repo: Callable[..., Path], caplog: pytest.LogCaptureFixture
) -> None:
    root = make_repo(
        plugin={
            "version": "1.0.0",
            "skills": ["./skills/csharp/ghost", "./skills/csharp/broken", "./skills/csharp/ok"],
            "agents": ["./agents/missing"],
        },
        skills={"skills/csharp/ok": {"name": "ok-skill", "description": "Fine."}},
        files={"skills/csharp/broken/SKILL.md": "---\nname: [broken\n---\n"},
    )

    with caplog.at_level(logging.WARNING, logger="skillmarket.index.builder"):
        index = build_index(root)

    assert dict(index.categories)["csharp"] == ("ok-skill",)
    assert index.agents == ()
    assert "Skipping missing file" in caplog.text


def test_directory_mode_agents_are_sorted(make_repo: Callable[..., Path]) -> None:
    root = make_repo(
        plugin={"version": "1.0.0", "skills": [], "agents": "./agents"},
        agents={
            "agents/zeta": {"name": "zeta", "description": "Z.", "model": "haiku"},
            "agents/alpha": {"name": "alpha", "description": "A.", "model": "haiku"},
        },
    )

    assert build_index(root).agents == ("alpha", "zeta")


def test_configured_title_and_categories(make_repo: Callable[..., Path]) -> None:
    root = make_repo(skills={"skills/web/forms": {"name": "forms", "description": "Forms."}})
    config = SkillmarketConfig(
        index=IndexConfig(
            title="web-skills",
            preamble="Use these first.",
            categories=(IndexCategory(name="web", patterns=("./skills/web/*",)),),
        )
    )

    rendered = render_index(build_index(root, config=config))

    assert rendered.splitlines() == [
        "[web-skills]|Use these first.",
        "|flow:{skim repo patterns -> consult web-skills by name -> implement smallest-change -> note conflicts}",
        "|route:",
        "|web:{forms}",
        "|agents:{}",
    ]


def test_missing_plugin_manifest_raises(tmp_path: Path) -> None:
    with pytest.raises(ManifestError) as excinfo:
        build_index(tmp_path)

    assert excinfo.value.code == MKT001


def test_plugin_schema_violation_raises(make_repo: Callable[..., Path]) -> None:
    root = make_repo(plugin={"version": "1.0.0"})

    with pytest.raises(ManifestError) as excinfo:
        build_index(root)

    assert excinfo.value.code == MKT003


def test_render_empty_index() -> None:
    index = SkillIndex(title="t", preamble="p")

    assert render_index(index).splitlines()[-1] == "|agents:{}"
