"""Domain models used across the project."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict

from .config import AUXILIARY_KEY, PRIMARY_KEY

# Canonical `{"workflow": ..., "requirements": ...}` document
ExtractedDocument = Dict[str, Any]

# Receives the thought text seen so far; called synchronously from the read loop
ThoughtCallback = Callable[[str], None]


class Phase(Enum):
    """Which buffer incoming stream text currently belongs to."""

    THINKING = "thinking"
    PAYLOAD = "payload"


@dataclass(slots=True, frozen=True)
class Recovery:
    """Thoughts/payload split produced by a fallback recovery strategy."""

    thoughts: str
    payload: str
    strategy: str
    degraded: bool = False


@dataclass(slots=True, frozen=True)
class ExtractionResult:
    """Final output of one pipeline invocation."""

    thoughts: str
    document: ExtractedDocument
    degraded: bool = False
    # "marker" when the sentinel was seen, else the fallback strategy name
    strategy: str = "marker"

    @property
    def workflow(self) -> Any:
        return self.document[PRIMARY_KEY]

    @property
    def requirements(self) -> Any:
        return self.document[AUXILIARY_KEY]


__all__ = [
    "ExtractedDocument",
    "ThoughtCallback",
    "Phase",
    "Recovery",
    "ExtractionResult",
]
