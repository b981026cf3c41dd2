"""Rewrite the compressed index block inside a README."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from skillmarket.constants.index import (
    README_BEGIN_TEMPLATE,
    README_END_TEMPLATE,
    README_TEMP_PREFIX,
    README_TEMP_SUFFIX,
)
from skillmarket.exceptions import ReadmeMarkerError
from skillmarket.io import write_text_atomic

logger = logging.getLogger(__name__)


def readme_markers(title: str) -> tuple[str, str]:
    """BEGIN/END comment markers for an index titled *title*."""
    marker = title.upper()
    return README_BEGIN_TEMPLATE.format(marker=marker), README_END_TEMPLATE.format(marker=marker)


def update_readme(readme_path: Path, rendered_index: str, *, title: str) -> bool:
    """Replace the marked block in *readme_path* with *rendered_index*.

    Returns ``True`` when the file content changed.
    """
    if not readme_path.is_file():
        raise ReadmeMarkerError(f"README not found: {readme_path}")

    start, end = readme_markers(title)
    text = readme_path.read_text(encoding="utf-8")
    pattern = re.compile(re.escape(start) + r".*?" + re.escape(end), re.S)
    if not pattern.search(text):
        raise ReadmeMarkerError(f"README markers not found: add {start} and {end} to {readme_path}")

    replacement = f"{start}\n```markdown\n{rendered_index.strip()}\n```\n{end}"
    updated = pattern.sub(lambda _match: replacement, text)
    if updated == text:
        logger.info("README index already up to date: %s", readme_path)
        return False

    write_text_atomic(
        path=readme_path,
        content=updated,
        temp_prefix=README_TEMP_PREFIX,
        temp_suffix=README_TEMP_SUFFIX,
    )
    logger.info("Updated README index: %s", readme_path)
    return True
