"""Constants for report files, atomic writing, and stdout formatting."""

from __future__ import annotations

REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

SCHEMA_VERSION: str = "1.0.0"
REPORT_SCHEMA_FILENAME: str = "report.schema.json"

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_RED: str = "\033[0;31m"
ANSI_GREEN: str = "\033[0;32m"
ANSI_YELLOW: str = "\033[1;33m"

LEVEL_COLORS: dict[str, str] = {
    "error": ANSI_RED,
    "warning": ANSI_YELLOW,
}
