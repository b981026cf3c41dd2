"""Typed configuration structures for index generation."""

from __future__ import annotations

from dataclasses import dataclass

from skillmarket.constants.index import (
    DEFAULT_INDEX_CATEGORIES,
    DEFAULT_INDEX_PREAMBLE,
    DEFAULT_INDEX_TITLE,
)


@dataclass(frozen=True)
class IndexCategory:
    """A named index bucket and the source-path globs routed into it."""

    name: str
    patterns: tuple[str, ...]


DEFAULT_CATEGORIES: tuple[IndexCategory, ...] = tuple(
    IndexCategory(name=name, patterns=patterns) for name, patterns in DEFAULT_INDEX_CATEGORIES
)


@dataclass(frozen=True)
class IndexConfig:
    """Settings for the compressed skills index."""

    title: str = DEFAULT_INDEX_TITLE
    preamble: str = DEFAULT_INDEX_PREAMBLE
    categories: tuple[IndexCategory, ...] = DEFAULT_CATEGORIES
