"""Markdown frontmatter parsers."""

from .frontmatter import parse_frontmatter_file, parse_frontmatter_text

__all__ = ["parse_frontmatter_file", "parse_frontmatter_text"]
