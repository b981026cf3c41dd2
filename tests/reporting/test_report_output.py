"""Tests for the terminal reporter and JSON report writer."""

from __future__ import annotations

import json
from pathlib import Path

from skillmarket.constants.reporting import ANSI_GREEN, ANSI_RED, ANSI_RESET, ANSI_YELLOW, SCHEMA_VERSION
from skillmarket.exceptions.validation import ValidationError
from skillmarket.model import ValidatedEntry, ValidationReport
from skillmarket.reporting import StdoutReporter, write_report_json


def _make_report(
    *,
    issues: tuple[ValidationError, ...] = (),
    plugin_version: str | None = "2.1.0",
    agents_mode: str = "list",
    agents_source: str | None = None,
) -> ValidationReport:
    return ValidationReport(
        root=Path("/repo"),
        issues=issues,
        skills=(ValidatedEntry(kind="skill", source="./skills/a/alpha", name="alpha", path="skills/a/alpha/SKILL.md"),),
        agents=(ValidatedEntry(kind="agent", source="./agents/rev", name="rev", path="agents/rev.md"),),
        plugin_version=plugin_version,
        skills_registered=1,
        agents_registered=1,
        agents_mode=agents_mode,  # type: ignore[arg-type]
        agents_source=agents_source,
    )


ERROR = ValidationError(code="MKT004", path="skills/x/SKILL.md", field="skills", message="missing SKILL.md for: ./skills/x")
WARNING = ValidationError(
    code="MKT101",
    path="skills/y/SKILL.md",
    field="skills",
    message="skill not in plugin.json: ./skills/y",
    level="warning",
)


def test_render_sections_in_order() -> None:
    output = StdoutReporter(_make_report(), color=False).render()

    assert output.index("Validating marketplace structure...") < output.index("marketplace.json syntax: OK")
    assert output.index("plugin.json syntax: OK") < output.index("Checking skills...")
    assert output.index("OK: alpha (./skills/a/alpha)") < output.index("Checking agents...")
    assert output.index("OK: rev (./agents/rev)") < output.index("=== Summary ===")
    assert output.endswith("Validation passed!")


def test_summary_lists_counts_and_version() -> None:
    output = StdoutReporter(_make_report(issues=(ERROR, WARNING)), color=False).render()

    assert "Skills registered: 1" in output
    assert "Agents registered: 1\n" in output
    assert "Plugin version: 2.1.0" in output
    assert "Errors: 1" in output
    assert "Warnings: 1" in output
    assert "Validation passed!" not in output


def test_summary_shows_directory_mode() -> None:
    report = _make_report(agents_mode="directory", agents_source="./agents")

    output = StdoutReporter(report, color=False).render()

    assert "Agents registered: 1 (directory mode: ./agents)" in output


def test_manifest_failure_hides_syntax_and_entry_sections() -> None:
    missing = ValidationError(code="MKT001", path=".claude-plugin/plugin.json", field="", message="Manifest not found")
    report = ValidationReport(root=Path("/repo"), issues=(missing,))

    output = StdoutReporter(report, color=False).render()

    assert "syntax: OK" not in output
    assert "Checking skills..." not in output
    assert "Skills registered" not in output
    assert "Errors: 1" in output


def test_custom_manifest_names_in_syntax_lines() -> None:
    reporter = StdoutReporter(
        _make_report(),
        color=False,
        plugin_manifest="meta/my-plugin.json",
        marketplace_manifest="meta/my-market.json",
    )

    output = reporter.render()

    assert "my-market.json syntax: OK" in output
    assert "my-plugin.json syntax: OK" in output


def test_render_issues_lists_errors_before_warnings() -> None:
    reporter = StdoutReporter(_make_report(issues=(WARNING, ERROR)), color=False)

    assert reporter.render_issues().splitlines() == [
        "ERROR: [MKT004] skills/x/SKILL.md missing SKILL.md for: ./skills/x",
        "WARNING: [MKT101] skills/y/SKILL.md skill not in plugin.json: ./skills/y",
    ]


def test_colors_follow_issue_level() -> None:
    reporter = StdoutReporter(_make_report(issues=(ERROR, WARNING)), color=True)

    lines = reporter.render_issues().splitlines()

    assert lines[0].startswith(ANSI_RED) and lines[0].endswith(ANSI_RESET)
    assert lines[1].startswith(ANSI_YELLOW)
    assert f"{ANSI_GREEN}OK: alpha" in reporter.render()


def test_quiet_verdicts() -> None:
    passed = StdoutReporter(_make_report(issues=(WARNING,)), color=False, quiet=True).render()
    failed = StdoutReporter(_make_report(issues=(ERROR, WARNING)), color=False, quiet=True).render()

    assert passed == "Validation passed! (1 warning(s))"
    assert failed == "Validation failed: 1 error(s), 1 warning(s)"


def test_write_report_json(tmp_path: Path) -> None:
    out_path = tmp_path / "reports" / "validation.json"

    write_report_json(out_path, _make_report(issues=(ERROR, WARNING)))

    payload = json.loads(out_path.read_text(encoding="utf-8"))
    assert payload["schema_version"] == SCHEMA_VERSION
    assert payload["passed"] is False
    assert payload["error_count"] == 1
    assert payload["warning_count"] == 1
    assert payload["agents"][0]["name"] == "rev"
    assert [issue["code"] for issue in payload["issues"]] == ["MKT004", "MKT101"]
    assert payload["issues"][1]["level"] == "warning"


def test_issue_color_can_differ_from_stdout_color() -> None:
    reporter = StdoutReporter(_make_report(issues=(ERROR,)), color=True)

    assert "\033[" not in reporter.render_issues(color=False)
    assert ANSI_GREEN in reporter.render()
    assert StdoutReporter(_make_report(issues=(ERROR,)), color=False).render_issues(color=True).startswith(ANSI_RED)
