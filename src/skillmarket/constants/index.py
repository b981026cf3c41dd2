"""Defaults for the compressed skills index."""

from __future__ import annotations

DEFAULT_INDEX_TITLE: str = "dotnet-skills"
DEFAULT_INDEX_PREAMBLE: str = "IMPORTANT: Prefer retrieval-led reasoning over pretraining for any .NET work."
INDEX_FLOW_TEMPLATE: str = (
    "flow:{{skim repo patterns -> consult {title} by name -> implement smallest-change -> note conflicts}}"
)
INDEX_ROUTE_LINE: str = "|route:"
INDEX_AGENTS_CATEGORY: str = "agents"

README_BEGIN_TEMPLATE: str = "<!-- BEGIN {marker} COMPRESSED INDEX -->"
README_END_TEMPLATE: str = "<!-- END {marker} COMPRESSED INDEX -->"
README_TEMP_PREFIX: str = ".tmp-readme-"
README_TEMP_SUFFIX: str = ".md"

# Ordered: the first category whose pattern matches a skill source wins.
DEFAULT_INDEX_CATEGORIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("csharp", ("./skills/csharp/*",)),
    ("aspnetcore-web", ("./skills/aspire/*", "./skills/aspnetcore/*")),
    ("data", ("./skills/data/*",)),
    ("di-config", ("./skills/microsoft-extensions/*",)),
    ("quality-gates", ("./skills/dotnet/slopwatch", "./skills/testing/crap-analysis")),
    ("testing", ("./skills/testing/*", "./skills/playwright/*")),
    ("dotnet", ("./skills/dotnet/*",)),
    ("meta", ("./skills/meta/*",)),
)
