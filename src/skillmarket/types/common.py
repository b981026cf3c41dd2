"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal

type IssueLevel = Literal["error", "warning"]
type EntryKind = Literal["skill", "agent"]
type AgentsMode = Literal["list", "directory"]

type JsonScalar = str | int | float | bool | None
type JsonValue = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
type JsonObject = dict[str, JsonValue]
