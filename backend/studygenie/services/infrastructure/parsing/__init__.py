"""Parsing utilities for model output."""

from .json_parser import (
    strip_markdown_fences,
    extract_largest_balanced_json,
    fix_json_escapes,
    parse_json_object,
)

__all__ = [
    "strip_markdown_fences",
    "extract_largest_balanced_json",
    "fix_json_escapes",
    "parse_json_object",
]
