"""Error types raised by the extraction pipeline.

Every failure carries a human readable message and, where there is one,
the raw text that could not be salvaged so callers can log or display it.
"""

from __future__ import annotations


class PipelineError(Exception):
    """Base class for all extraction failures."""

    def __init__(self, message: str, raw_text: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.raw_text = raw_text


class StreamFailure(PipelineError):
    """The underlying stream raised or was aborted mid-read."""


class NoStructuredRegionFound(PipelineError, ValueError):
    """No `{ ... }` region could be located in the model output."""


class JsonSyntaxError(PipelineError, ValueError):
    """A payload region was found but is not valid JSON."""


class SchemaRepairError(PipelineError, ValueError):
    """Parsed JSON could not be brought into the canonical document shape."""


class ModelReportedError(SchemaRepairError):
    """The model answered with an ``{"error": ...}`` object instead of a workflow."""


__all__ = [
    "PipelineError",
    "StreamFailure",
    "NoStructuredRegionFound",
    "JsonSyntaxError",
    "SchemaRepairError",
    "ModelReportedError",
]
