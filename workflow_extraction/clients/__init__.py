"""Convenience re-exports for stream adapters."""

from .openai_stream import chunk_text, iter_completion_text, iter_completion_text_sync  # noqa: F401

__all__ = [
    "chunk_text",
    "iter_completion_text",
    "iter_completion_text_sync",
]
