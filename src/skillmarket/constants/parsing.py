"""Constants for frontmatter parsing."""

from __future__ import annotations

FRONTMATTER_DELIMITER: str = "---"
# YAML allows "..." as an explicit document end marker.
FRONTMATTER_ALT_DELIMITER: str = "..."
BYTE_ORDER_MARK: str = "\ufeff"
