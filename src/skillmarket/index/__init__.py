"""Compressed skills index generation."""

from .builder import build_index, render_index, route_source
from .readme import readme_markers, update_readme

__all__ = ["build_index", "readme_markers", "render_index", "route_source", "update_readme"]
