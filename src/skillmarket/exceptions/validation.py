"""Structured validation issue model shared by config and marketplace checks."""

from __future__ import annotations

from dataclasses import dataclass

from skillmarket.types import IssueLevel, JsonObject


@dataclass(frozen=True)
class ValidationError:
    """A single validation issue with stable code and location context."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""
    line: int | None = None
    column: int | None = None
    level: IssueLevel = "error"

    @property
    def is_error(self) -> bool:
        return self.level == "error"

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        location = self.path
        if self.line is not None:
            location = f"{location}:{self.line}"
            if self.column is not None:
                location = f"{location}:{self.column}"
        parts = [f"[{self.code}]", location, self.message]
        if self.hint:
            parts.append(f"({self.hint})")
        return " ".join(parts)

    def to_dict(self) -> JsonObject:
        return {
            "code": self.code,
            "level": self.level,
            "path": self.path,
            "field": self.field,
            "message": self.message,
            "hint": self.hint,
            "line": self.line,
            "column": self.column,
        }


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Sort validation issues deterministically by code, path, field."""
    return sorted(errors, key=lambda e: (e.code, e.path, e.field, e.line or 0))


def format_errors(errors: list[ValidationError]) -> str:
    """Format a list of validation issues as a multi-line string."""
    sorted_errs = sort_errors(errors)
    return "\n".join(e.format() for e in sorted_errs)
