"""Manifest loading and JSON Schema validation."""

from .loader import load_manifest, relative_source, strip_current_dir
from .schema import load_schema, validate_against_schema

__all__ = [
    "load_manifest",
    "load_schema",
    "relative_source",
    "strip_current_dir",
    "validate_against_schema",
]
