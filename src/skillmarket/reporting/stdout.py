"""Human-readable terminal output for validation reports."""

from __future__ import annotations

from pathlib import PurePosixPath

from skillmarket.constants.branding import PASSED_MESSAGE, SUMMARY_TITLE, VALIDATION_HEADER
from skillmarket.constants.manifest import AGENTS_MODE_DIRECTORY
from skillmarket.constants.reporting import ANSI_GREEN, ANSI_RED, ANSI_RESET, ANSI_YELLOW, LEVEL_COLORS
from skillmarket.constants.validation import MKT001, MKT002
from skillmarket.exceptions.validation import ValidationError
from skillmarket.model import ValidatedEntry, ValidationReport


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class StdoutReporter:
    """Formats a :class:`ValidationReport` for stdout (progress) and stderr (issues)."""

    def __init__(
        self,
        report: ValidationReport,
        *,
        color: bool = True,
        quiet: bool = False,
        plugin_manifest: str = "plugin.json",
        marketplace_manifest: str = "marketplace.json",
    ) -> None:
        self._report = report
        self._color = color
        self._quiet = quiet
        self._plugin_name = PurePosixPath(plugin_manifest).name
        self._marketplace_name = PurePosixPath(marketplace_manifest).name

    def render(self) -> str:
        """Render progress sections and the summary as a single string."""
        if self._quiet:
            return self._render_verdict()
        sections = [
            VALIDATION_HEADER,
            self._render_syntax(),
            self._render_entries("Checking skills...", self._report.skills),
            self._render_entries("Checking agents...", self._report.agents),
            self._render_summary(),
        ]
        return "\n\n".join(section for section in sections if section)

    def render_issues(self, *, color: bool | None = None) -> str:
        """Render errors then warnings, one per line, for stderr.

        *color* overrides the reporter setting for these lines.
        """
        use_color = self._color if color is None else color
        issues = (*self._report.errors, *self._report.warnings)
        return "\n".join(self._format_issue(issue, use_color) for issue in issues)

    def _paint(self, text: str, color: str) -> str:
        return _colorize(text, color) if self._color else text

    def _format_issue(self, issue: ValidationError, use_color: bool) -> str:
        label = "ERROR" if issue.is_error else "WARNING"
        text = f"{label}: {issue.format()}"
        return _colorize(text, LEVEL_COLORS[issue.level]) if use_color else text

    def _render_syntax(self) -> str:
        if any(issue.code in {MKT001, MKT002} for issue in self._report.issues):
            return ""
        return "\n".join(
            (
                self._paint(f"{self._marketplace_name} syntax: OK", ANSI_GREEN),
                self._paint(f"{self._plugin_name} syntax: OK", ANSI_GREEN),
            )
        )

    def _render_entries(self, heading: str, entries: tuple[ValidatedEntry, ...]) -> str:
        if self._report.plugin_version is None:
            return ""
        lines = [heading]
        lines.extend(self._paint(f"OK: {entry.name} ({entry.source})", ANSI_GREEN) for entry in entries)
        return "\n".join(lines)

    def _render_summary(self) -> str:
        r = self._report
        lines = [SUMMARY_TITLE]
        if r.plugin_version is not None:
            lines.append(f"Skills registered: {r.skills_registered}")
            if r.agents_mode == AGENTS_MODE_DIRECTORY:
                lines.append(f"Agents registered: {r.agents_registered} (directory mode: {r.agents_source})")
            else:
                lines.append(f"Agents registered: {r.agents_registered}")
            lines.append(f"Plugin version: {r.plugin_version}")
        if r.errors:
            lines.append(self._paint(f"Errors: {len(r.errors)}", ANSI_RED))
        if r.warnings:
            lines.append(self._paint(f"Warnings: {len(r.warnings)}", ANSI_YELLOW))
        if r.passed:
            lines.append(self._paint(PASSED_MESSAGE, ANSI_GREEN))
        return "\n".join(lines)

    def _render_verdict(self) -> str:
        r = self._report
        if r.passed:
            return self._paint(f"{PASSED_MESSAGE} ({len(r.warnings)} warning(s))", ANSI_GREEN)
        return self._paint(
            f"Validation failed: {len(r.errors)} error(s), {len(r.warnings)} warning(s)",
            ANSI_RED,
        )
