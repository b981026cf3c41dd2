"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "SKILLMARKET"
CLI_DESCRIPTION: str = "\n".join(
    (
        ">_ SKILLMARKET",
        "     // marketplace checks for agent skills",
        "",
        f"{BRAND_NAME} manifest validator and index generator",
    )
)
VALIDATION_HEADER: str = "Validating marketplace structure..."
SUMMARY_TITLE: str = "=== Summary ==="
PASSED_MESSAGE: str = "Validation passed!"
