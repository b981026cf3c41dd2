"""Shared constants for Skillmarket."""
