"""Utilities for parsing structured outputs returned by LLM calls.

Only the strict parse step lives here: locating the payload inside the raw
stream is the job of the phase splitter and the fallback strategies, and
shape repair is done by the canonicalizer.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from ..exceptions import JsonSyntaxError
from .text_cleaning import strip_code_fences

__all__ = ["parse_structured_json"]

logger = logging.getLogger(__name__)


def parse_structured_json(payload_text: str) -> Any:
    """Parse the JSON payload of a model response.

    Parameters
    ----------
    payload_text
        Payload text as cut out of the stream, possibly still wrapped in a
        Markdown code fence.

    Returns
    -------
    Any
        The decoded JSON value. No shape checks are made here.

    Raises
    ------
    JsonSyntaxError
        If the text (after fence stripping) is not valid JSON. The stripped
        text is attached as ``raw_text``.
    """

    cleaned: str = strip_code_fences(payload_text)
    if not cleaned:
        raise JsonSyntaxError("Model payload is empty", raw_text=cleaned)

    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as exc:
        logger.debug("Unparseable payload: %s", cleaned)
        raise JsonSyntaxError(
            f"Failed to parse the model's payload as JSON: {exc.msg} "
            f"(line {exc.lineno}, column {exc.colno})",
            raw_text=cleaned,
        ) from exc
