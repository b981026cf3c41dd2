"""Command-line interface for Skillmarket."""

from .main import build_parser, main

__all__ = ["build_parser", "main"]
