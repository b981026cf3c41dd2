"""Reporting helpers for validation results."""

from .stdout import StdoutReporter
from .writer import write_report_json

__all__ = ["StdoutReporter", "write_report_json"]
