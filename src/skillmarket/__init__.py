"""Skillmarket: validation and indexing tooling for skill marketplaces."""

__version__ = "0.3.0"
