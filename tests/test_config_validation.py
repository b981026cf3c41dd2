"""Tests for config validation (error codes, messages, ordering)."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillmarket.config import _suggest_key, validate_config_file
from skillmarket.constants.validation import (
    ALL_CFG_CODES,
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    CFG009,
    CFG010,
    ERROR_MKT_CODES,
    WARNING_MKT_CODES,
)
from skillmarket.exceptions.validation import ValidationError, format_errors, sort_errors
from skillmarket.validation import preflight_validate


def _write_config(tmp_path: Path, content: str) -> Path:
    cfg = tmp_path / "skillmarket.yaml"
    cfg.write_text(content, encoding="utf-8")
    return cfg


def test_validation_error_format_with_all_fields() -> None:
    err = ValidationError(
        code="CFG004",
        path="/repo/skillmarket.yaml",
        field="skills_dri",
        message="unknown key `skills_dri`",
        hint="did you mean `skills_dir`?",
        line=3,
        column=1,
    )

    assert err.format() == (
        "[CFG004] /repo/skillmarket.yaml:3:1 unknown key `skills_dri` (did you mean `skills_dir`?)"
    )


def test_validation_error_defaults_to_error_level() -> None:
    err = ValidationError(code="CFG002", path="x", field="", message="invalid YAML")

    assert err.is_error is True
    assert err.to_dict()["level"] == "error"
    assert err.format() == "[CFG002] x invalid YAML"


def test_sort_and_format_errors_are_deterministic() -> None:
    errors = [
        ValidationError(code="CFG005", path="b", field="z", message="second"),
        ValidationError(code="CFG004", path="a", field="y", message="first"),
    ]

    assert [e.code for e in sort_errors(errors)] == ["CFG004", "CFG005"]
    assert format_errors(errors).splitlines() == ["[CFG004] a first", "[CFG005] b second"]


def test_missing_default_config_is_valid(tmp_path: Path) -> None:
    assert validate_config_file(tmp_path) == []


def test_missing_explicit_config_reports_cfg001(tmp_path: Path) -> None:
    errors = validate_config_file(tmp_path, tmp_path / "custom.yaml", config_explicit=True)

    assert [e.code for e in errors] == [CFG001]


def test_invalid_yaml_reports_cfg002(tmp_path: Path) -> None:
    _write_config(tmp_path, "skills_dir: [broken\n")

    errors = validate_config_file(tmp_path)

    assert [e.code for e in errors] == [CFG002]


def test_non_mapping_reports_cfg003(tmp_path: Path) -> None:
    _write_config(tmp_path, "- skills\n")

    errors = validate_config_file(tmp_path)

    assert [e.code for e in errors] == [CFG003]
    assert "got list" in errors[0].message


def test_unknown_key_reports_cfg004_with_suggestion(tmp_path: Path) -> None:
    _write_config(tmp_path, "plugin_manifst: x.json\n")

    errors = validate_config_file(tmp_path)

    assert [e.code for e in errors] == [CFG004]
    assert errors[0].field == "plugin_manifst"
    assert errors[0].hint == "did you mean `plugin_manifest`?"


def test_collects_all_errors_in_one_pass(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        "skills_dir: 3\n"
        "agents_dir: ''\n"
        "agent_models: ['Bad Model']\n"
        "index:\n"
        "  titel: x\n"
        "  categories:\n"
        "    - name: web\n"
        "      patterns: ['./skills/web/*']\n"
        "    - name: web\n"
        "      patterns: []\n"
        "    - just-a-string\n",
    )

    errors = validate_config_file(tmp_path)
    codes = sorted(e.code for e in errors)

    assert codes == [CFG004, CFG005, CFG006, CFG007, CFG007, CFG008, CFG009]
    fields = {e.field for e in errors}
    assert {"skills_dir", "agents_dir", "agent_models", "index.titel"} <= fields
    assert "index.categories[1].name" in fields
    assert "index.categories[1].patterns" in fields
    assert "index.categories[2]" in fields


def test_index_must_be_mapping_reports_cfg009(tmp_path: Path) -> None:
    _write_config(tmp_path, "index: [a]\n")

    errors = validate_config_file(tmp_path)

    assert [e.code for e in errors] == [CFG009]


@pytest.mark.parametrize(
    "content",
    [
        pytest.param("agent_models: sonnet\n", id="scalar"),
        pytest.param("agent_models: [1, 2]\n", id="non-string-items"),
        pytest.param("index:\n  preamble: 5\n", id="preamble"),
        pytest.param("index:\n  categories: nope\n", id="categories"),
    ],
)
def test_wrong_types_report_cfg005(tmp_path: Path, content: str) -> None:
    _write_config(tmp_path, content)

    errors = validate_config_file(tmp_path)

    assert [e.code for e in errors] == [CFG005]


def test_valid_config_has_no_errors(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        "plugin_manifest: .claude-plugin/plugin.json\n"
        "agent_models: [haiku, sonnet, opus]\n"
        "index:\n"
        "  title: dotnet-skills\n"
        "  categories:\n"
        "    - name: csharp\n"
        "      patterns: ['./skills/csharp/*']\n",
    )

    assert validate_config_file(tmp_path) == []


def test_preflight_reports_missing_root(tmp_path: Path) -> None:
    errors = preflight_validate(tmp_path / "missing")

    assert [e.code for e in errors] == [CFG010]


def test_preflight_passes_explicit_flag(tmp_path: Path) -> None:
    errors = preflight_validate(tmp_path, tmp_path / "absent.yaml")

    assert [e.code for e in errors] == [CFG001]


def test_suggest_key_returns_empty_for_distant_keys() -> None:
    assert _suggest_key("zzzzzz", ALLOWED_CONFIG_KEYS) == ""
    assert _suggest_key("readme", ALLOWED_CONFIG_KEYS) == "did you mean `readme_path`?"


def test_issue_codes_are_unique() -> None:
    codes = [*ALL_CFG_CODES, *ERROR_MKT_CODES, *WARNING_MKT_CODES]

    assert len(codes) == len(set(codes))
    assert all(code.startswith("CFG") for code in ALL_CFG_CODES)
    assert all(code.startswith("MKT1") for code in WARNING_MKT_CODES)


def test_directory_config_path_reports_cfg002(tmp_path: Path) -> None:
    config_dir = tmp_path / "conf"
    config_dir.mkdir()

    errors = preflight_validate(tmp_path, config_dir)

    assert [e.code for e in errors] == [CFG002]
    assert errors[0].message.startswith("unreadable config file:")


def test_non_utf8_config_reports_cfg002(tmp_path: Path) -> None:
    (tmp_path / "skillmarket.yaml").write_bytes(b"skills_dir: \xff\xfe\n")

    errors = validate_config_file(tmp_path)

    assert [e.code for e in errors] == [CFG002]
    assert "unreadable config file" in errors[0].message
