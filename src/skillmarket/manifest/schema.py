"""JSON Schema validation for manifest payloads."""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any

import jsonschema

from skillmarket.constants.validation import MKT003
from skillmarket.exceptions.validation import ValidationError


@lru_cache(maxsize=None)
def load_schema(filename: str) -> dict[str, Any]:
    """Load a bundled schema from ``skillmarket/manifest/schemas``."""
    text = resources.files("skillmarket.manifest").joinpath("schemas", filename).read_text(encoding="utf-8")
    return json.loads(text)


def validate_against_schema(payload: object, schema_filename: str, *, path: str) -> list[ValidationError]:
    """Return one MKT003 issue per schema violation, ordered by JSON location."""
    validator = jsonschema.Draft202012Validator(load_schema(schema_filename))
    violations = sorted(validator.iter_errors(payload), key=lambda err: [str(part) for part in err.absolute_path])
    return [
        ValidationError(
            code=MKT003,
            path=path,
            field=_json_pointer(violation),
            message=f"schema violation: {violation.message}",
        )
        for violation in violations
    ]


def _json_pointer(violation: jsonschema.ValidationError) -> str:
    parts = [str(part) for part in violation.absolute_path]
    return "/" + "/".join(parts) if parts else ""
