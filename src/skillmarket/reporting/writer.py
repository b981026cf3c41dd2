"""JSON artifact writer for validation reports."""

from __future__ import annotations

from pathlib import Path

from skillmarket.constants.reporting import REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX
from skillmarket.io import write_json_atomic
from skillmarket.model import ValidationReport


def write_report_json(path: Path, report: ValidationReport) -> None:
    """Persist *report* to *path* atomically."""
    write_json_atomic(
        path=path,
        payload=report.to_dict(),
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
