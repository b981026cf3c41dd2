"""Marketplace validation checks."""

from __future__ import annotations

from typing import Any

__all__ = ["validate_marketplace"]


def __getattr__(name: str) -> Any:
    """Lazily expose the orchestrator to avoid import cycles at package import time."""
    if name == "validate_marketplace":
        from .orchestrator import validate_marketplace

        return validate_marketplace
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
