"""Top-level package for the workflow-extraction project.

This package exposes the pipeline entry points so callers can do
`python -m workflow_extraction` or `from workflow_extraction import run`.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("workflow-extraction")
except _metadata.PackageNotFoundError:  # pragma: no cover – running from source
    __version__ = "0.0.0"

from .exceptions import (  # noqa: F401
    PipelineError,
    StreamFailure,
    NoStructuredRegionFound,
    JsonSyntaxError,
    SchemaRepairError,
    ModelReportedError,
)
from .models import ExtractionResult  # noqa: F401
from .workflows.extraction_pipeline import run, run_sync  # convenience re-export

__all__ = [
    "run",
    "run_sync",
    "ExtractionResult",
    "PipelineError",
    "StreamFailure",
    "NoStructuredRegionFound",
    "JsonSyntaxError",
    "SchemaRepairError",
    "ModelReportedError",
    "__version__",
]
