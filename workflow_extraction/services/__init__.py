"""Service layer modules grouping extraction logic by concern.

This module provides convenience re-exports so that callers can simply do for
example `from workflow_extraction.services import canonicalize` without having
to know which underlying module provides the symbol.
"""

from .phase_splitter import PhaseSplitter  # noqa: F401
from .fallback import DEFAULT_STRATEGIES, recover_payload  # noqa: F401
from .canonicalizer import Canonicalizer, canonicalize, repair_shape  # noqa: F401

__all__ = [
    "PhaseSplitter",
    "DEFAULT_STRATEGIES",
    "recover_payload",
    "Canonicalizer",
    "canonicalize",
    "repair_shape",
]
