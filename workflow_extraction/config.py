"""Centralised configuration for workflow_extraction.

Environment variables are loaded once and all related constants are
grouped by concern for easier maintenance.
"""

from __future__ import annotations

import os
from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load environment variables from `.env` (if present)
# ---------------------------------------------------------------------------
load_dotenv()

# ---------------------------------------------------------------------------
# Stream phase splitting
# The generation prompt instructs the model to write its reasoning first,
# then the sentinel, then the JSON payload.
# ---------------------------------------------------------------------------
SENTINEL_MARKER: str = os.getenv("WORKFLOW_SENTINEL_MARKER", "###JSON_START###")
THOUGHT_LABEL_PREFIX: str = os.getenv("WORKFLOW_THOUGHT_LABEL", "THOUGHTS:")

# ---------------------------------------------------------------------------
# Canonical document shape
# ---------------------------------------------------------------------------
PRIMARY_KEY: str = "workflow"
AUXILIARY_KEY: str = "requirements"
# Keys of an empty `requirements` object (see the generation prompt schema)
REQUIREMENT_LIST_KEYS: tuple[str, ...] = ("custom_nodes", "models")

# ---------------------------------------------------------------------------
# Miscellaneous
# ---------------------------------------------------------------------------
LOG_LEVEL: str = os.getenv("WORKFLOW_LOG_LEVEL", "INFO").upper()

# ---------------------------------------------------------------------------
# Re-exported names
# ---------------------------------------------------------------------------
__all__ = [
    # phase splitting
    "SENTINEL_MARKER",
    "THOUGHT_LABEL_PREFIX",
    # document shape
    "PRIMARY_KEY",
    "AUXILIARY_KEY",
    "REQUIREMENT_LIST_KEYS",
    # misc
    "LOG_LEVEL",
]
