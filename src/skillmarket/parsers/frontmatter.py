"""Parser for Markdown files with YAML frontmatter."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from skillmarket.constants.parsing import (
    BYTE_ORDER_MARK,
    FRONTMATTER_ALT_DELIMITER,
    FRONTMATTER_DELIMITER,
)
from skillmarket.exceptions import FrontmatterError
from skillmarket.model import ParsedDocument


def parse_frontmatter_file(path: Path) -> ParsedDocument:
    """Parse a skill or agent Markdown file into frontmatter and body."""
    try:
        raw_text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise FrontmatterError(f"File is not valid UTF-8: {path}") from exc
    return parse_frontmatter_text(raw_text, path)


def parse_frontmatter_text(raw_text: str, path: Path) -> ParsedDocument:
    """Parse already-loaded Markdown text; *path* is used for messages."""
    normalized = raw_text.lstrip(BYTE_ORDER_MARK)
    lines = normalized.splitlines()

    frontmatter: dict[str, Any] | None = None
    body_lines = lines

    if lines and lines[0].strip() == FRONTMATTER_DELIMITER:
        frontmatter_end = _find_frontmatter_end(lines)
        if frontmatter_end is None:
            raise FrontmatterError(f"Unterminated frontmatter block in {path}")

        frontmatter_text = "\n".join(lines[1:frontmatter_end])
        try:
            payload = yaml.safe_load(frontmatter_text) if frontmatter_text.strip() else None
        except yaml.YAMLError as exc:
            raise FrontmatterError(f"Failed to parse frontmatter in {path}: {exc}") from exc

        if payload is None:
            frontmatter = None
        elif isinstance(payload, dict):
            frontmatter = payload
        else:
            raise FrontmatterError(f"Frontmatter in {path} must be a YAML mapping")

        body_lines = lines[frontmatter_end + 1 :]

    return ParsedDocument(
        file_path=path,
        raw_text=raw_text,
        frontmatter=frontmatter,
        body="\n".join(body_lines).strip(),
        body_start_line=len(lines) - len(body_lines) + 1,
    )


def _find_frontmatter_end(lines: list[str]) -> int | None:
    for index in range(1, len(lines)):
        if lines[index].strip() in {FRONTMATTER_DELIMITER, FRONTMATTER_ALT_DELIMITER}:
            return index
    return None
