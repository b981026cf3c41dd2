"""Stable issue codes and allowed-key sets for config and marketplace validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # unreadable file or invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid value format
CFG007: str = "CFG007"  # empty value
CFG008: str = "CFG008"  # duplicate index category
CFG009: str = "CFG009"  # invalid nested mapping
CFG010: str = "CFG010"  # root directory not found

MKT001: str = "MKT001"  # manifest file not found
MKT002: str = "MKT002"  # invalid JSON syntax
MKT003: str = "MKT003"  # manifest schema violation
MKT004: str = "MKT004"  # registered skill has no SKILL.md
MKT005: str = "MKT005"  # registered agent file missing
MKT006: str = "MKT006"  # agents directory missing (directory mode)
MKT007: str = "MKT007"  # frontmatter cannot be parsed
MKT008: str = "MKT008"  # required frontmatter field missing
MKT009: str = "MKT009"  # invalid frontmatter value
MKT010: str = "MKT010"  # duplicate entry name

MKT101: str = "MKT101"  # skill not registered in plugin.json
MKT102: str = "MKT102"  # agent not registered in plugin.json
MKT103: str = "MKT103"  # marketplace.json version differs from plugin.json

ALL_CFG_CODES: tuple[str, ...] = (
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
)

ERROR_MKT_CODES: tuple[str, ...] = (
    MKT001,
    MKT002,
    MKT003,
    MKT004,
    MKT005,
    MKT006,
    MKT007,
    MKT008,
    MKT009,
    MKT010,
)

WARNING_MKT_CODES: tuple[str, ...] = (MKT101, MKT102, MKT103)

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "plugin_manifest",
        "marketplace_manifest",
        "skills_dir",
        "agents_dir",
        "readme_path",
        "agent_models",
        "index",
    }
)

PATH_CONFIG_KEYS: tuple[str, ...] = (
    "plugin_manifest",
    "marketplace_manifest",
    "skills_dir",
    "agents_dir",
    "readme_path",
)

ALLOWED_INDEX_KEYS: frozenset[str] = frozenset({"title", "preamble", "categories"})
ALLOWED_CATEGORY_KEYS: frozenset[str] = frozenset({"name", "patterns"})
