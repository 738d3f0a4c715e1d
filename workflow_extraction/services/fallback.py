"""Recover the payload when the model never emitted the sentinel.

The whole stream then sits in one buffer. Each recovery strategy below looks
at that text independently and either returns a thoughts/payload split or
``None``; :func:`recover_payload` tries them in order and keeps the first
hit. Strategies are plain callables so callers can reorder the tuple or add
their own.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ..exceptions import NoStructuredRegionFound
from ..models import Recovery
from ..utils.delimiters import close_open_braces, find_balanced_object, find_last_brace
from ..utils.text_cleaning import find_fenced_object, strip_label_prefix

logger = logging.getLogger(__name__)

RecoveryStrategy = Callable[[str], Optional[Recovery]]

# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

def fenced_block(text: str) -> Optional[Recovery]:
    """Payload inside a ```` ```json ```` fence; prose before the fence.

    The fence must open before the first ``{`` of the text, otherwise it is
    an example in trailing noise and the leading object wins.
    """
    found = find_fenced_object(text)
    if found is None:
        return None
    fence_start, body = found
    if text.find("{") < fence_start:
        return None
    return Recovery(
        thoughts=text[:fence_start].strip(),
        payload=body,
        strategy="fenced_block",
    )


def balanced_braces(text: str) -> Optional[Recovery]:
    """First ``{`` through its matching ``}``; trailing noise is dropped."""
    span = find_balanced_object(text)
    if span is None:
        return None
    start, end = span
    return Recovery(
        thoughts=text[:start].strip(),
        payload=text[start : end + 1],
        strategy="balanced_braces",
    )


def last_brace(text: str) -> Optional[Recovery]:
    """First ``{`` through the last literal ``}``, with open braces closed.

    Only used for truncated output, so the result is flagged degraded.
    """
    start = text.find("{")
    if start == -1:
        return None
    end = find_last_brace(text, start)
    if end is None:
        return None
    return Recovery(
        thoughts=text[:start].strip(),
        payload=close_open_braces(text[start : end + 1]),
        strategy="last_brace",
        degraded=True,
    )


DEFAULT_STRATEGIES: tuple[RecoveryStrategy, ...] = (fenced_block, balanced_braces, last_brace)

# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def recover_payload(
    raw_text: str,
    *,
    label_prefix: str = "",
    strategies: Sequence[RecoveryStrategy] = DEFAULT_STRATEGIES,
) -> Recovery:
    """Split a marker-less response into thoughts and payload.

    Raises
    ------
    NoStructuredRegionFound
        If the text has no ``{`` at all, or no strategy could cut a region
        out of it (an opening brace with no ``}`` anywhere after it).
    """
    text: str = strip_label_prefix(raw_text, label_prefix)

    if "{" not in text:
        raise NoStructuredRegionFound(
            "No structured region found: the response contains no '{'",
            raw_text=raw_text,
        )

    for strategy in strategies:
        recovery = strategy(text)
        if recovery is not None:
            logger.info("Recovered payload via %s strategy", recovery.strategy)
            return recovery

    raise NoStructuredRegionFound(
        "No structured region found: opening '{' is never closed",
        raw_text=raw_text,
    )


__all__ = [
    "RecoveryStrategy",
    "fenced_block",
    "balanced_braces",
    "last_brace",
    "DEFAULT_STRATEGIES",
    "recover_payload",
]
