"""Utility functions for the workflow extraction project.

Re-exports the text-cleaning, brace-scanning and parsing helpers so that
imports like `from ..utils import find_balanced_object` work as expected.
"""

from .text_cleaning import strip_label_prefix, strip_code_fences, find_fenced_object  # noqa: F401
from .delimiters import find_balanced_object, find_last_brace, close_open_braces  # noqa: F401
from .llm_parsing import parse_structured_json  # noqa: F401

__all__ = [
    "strip_label_prefix",
    "strip_code_fences",
    "find_fenced_object",
    "find_balanced_object",
    "find_last_brace",
    "close_open_braces",
    "parse_structured_json",
]
