"""Constants for skill and agent file discovery."""

from __future__ import annotations

import re
from re import Pattern

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
AGENT_FILE_SUFFIX: str = ".md"
CURRENT_DIR_PREFIX: str = "./"

# Lowercase words joined by single hyphens, e.g. ``csharp-coding-standards``.
ENTRY_NAME_PATTERN: Pattern[str] = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
