"""Config file validation for Skillmarket."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from skillmarket.constants.config import CONFIG_FILENAME
from skillmarket.constants.discovery import ENTRY_NAME_PATTERN
from skillmarket.constants.validation import (
    ALLOWED_CATEGORY_KEYS,
    ALLOWED_CONFIG_KEYS,
    ALLOWED_INDEX_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    CFG009,
    PATH_CONFIG_KEYS,
)
from skillmarket.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a skillmarket.yaml file and return all validation errors.

    This is the collect-all entry point used by both ``skillmarket
    validate-config`` and the preflight of ``validate``/``index``.  It never
    raises; all problems are returned as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"unreadable config file: {exc}",
            )
        )
        return errors

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(str(k) for k in raw.keys()):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    for key in PATH_CONFIG_KEYS:
        if key not in raw:
            continue
        val = raw[key]
        if not isinstance(val, str):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=key,
                    message=f"invalid type for `{key}`",
                    hint="expected a relative path string",
                )
            )
        elif not val.strip():
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field=key,
                    message=f"`{key}` must not be empty",
                )
            )

    _validate_agent_models(raw, path_str, errors)
    _validate_index_block(raw, path_str, errors)

    return errors


def _validate_agent_models(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate the ``agent_models`` list in skillmarket.yaml."""
    if "agent_models" not in raw:
        return
    val = raw["agent_models"]
    if not isinstance(val, (list, tuple)) or not all(isinstance(i, str) for i in val):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="agent_models",
                message="invalid type for `agent_models`",
                hint="expected a list of strings",
            )
        )
        return
    if not [model for model in val if model.strip()]:
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field="agent_models",
                message="`agent_models` must list at least one model",
            )
        )
        return
    for model in val:
        normalized = model.strip().lower()
        if normalized and not ENTRY_NAME_PATTERN.match(normalized):
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field="agent_models",
                    message=f"invalid model identifier {model!r}",
                    hint="use lowercase letters, digits and hyphens",
                )
            )


def _validate_index_block(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate the ``index`` nested mapping in skillmarket.yaml."""
    if "index" not in raw:
        return
    index = raw["index"]
    if index is None:
        return
    if not isinstance(index, dict):
        errors.append(
            ValidationError(
                code=CFG009,
                path=path_str,
                field="index",
                message="`index` must be a mapping",
            )
        )
        return

    for key in sorted(str(k) for k in index.keys()):
        if key not in ALLOWED_INDEX_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=f"index.{key}",
                    message=f"unknown key `{key}` in `index`",
                    hint=_suggest_key(key, ALLOWED_INDEX_KEYS),
                )
            )

    if "title" in index:
        title = index["title"]
        if not isinstance(title, str):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field="index.title",
                    message="invalid type for `index.title`",
                    hint="expected a string",
                )
            )
        elif not title.strip():
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field="index.title",
                    message="`index.title` must not be empty",
                )
            )

    if "preamble" in index and not isinstance(index["preamble"], str):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="index.preamble",
                message="invalid type for `index.preamble`",
                hint="expected a string",
            )
        )

    if "categories" in index:
        _validate_categories(index["categories"], path_str, errors)


def _validate_categories(
    categories: Any,
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate ``index.categories``: a list of ``{name, patterns}`` mappings."""
    if categories is None:
        return
    if not isinstance(categories, list):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="index.categories",
                message="invalid type for `index.categories`",
                hint="expected a list of {name, patterns} mappings",
            )
        )
        return

    seen: set[str] = set()
    for position, item in enumerate(categories):
        field_prefix = f"index.categories[{position}]"
        if not isinstance(item, dict):
            errors.append(
                ValidationError(
                    code=CFG009,
                    path=path_str,
                    field=field_prefix,
                    message=f"`{field_prefix}` must be a mapping",
                )
            )
            continue

        for key in sorted(str(k) for k in item.keys()):
            if key not in ALLOWED_CATEGORY_KEYS:
                errors.append(
                    ValidationError(
                        code=CFG004,
                        path=path_str,
                        field=f"{field_prefix}.{key}",
                        message=f"unknown key `{key}` in `{field_prefix}`",
                        hint=_suggest_key(key, ALLOWED_CATEGORY_KEYS),
                    )
                )

        name = item.get("name")
        if not isinstance(name, str) or not name.strip():
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field=f"{field_prefix}.name",
                    message=f"`{field_prefix}.name` must be a non-empty string",
                )
            )
        elif name.strip() in seen:
            errors.append(
                ValidationError(
                    code=CFG008,
                    path=path_str,
                    field=f"{field_prefix}.name",
                    message=f"duplicate index category `{name.strip()}`",
                    hint="category names must be unique",
                )
            )
        else:
            seen.add(name.strip())

        patterns = item.get("patterns")
        if not isinstance(patterns, list) or not all(isinstance(p, str) for p in patterns):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"{field_prefix}.patterns",
                    message=f"invalid type for `{field_prefix}.patterns`",
                    hint="expected a list of glob strings",
                )
            )
        elif not [p for p in patterns if p.strip()]:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field=f"{field_prefix}.patterns",
                    message=f"`{field_prefix}.patterns` must list at least one glob",
                )
            )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
