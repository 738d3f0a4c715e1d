"""Shared helper utilities used across services."""

from __future__ import annotations

import re
from typing import Final, Optional, Tuple

# Opening fence with optional language tag (```json, ```JSON, ```) and the closing fence
_OPEN_FENCE: Final = re.compile(r"^```[A-Za-z0-9_-]*[ \t]*\r?\n?")
_CLOSE_FENCE: Final = re.compile(r"\r?\n?```$")
# A fenced block anywhere in the text whose body starts with an object
_FENCED_OBJECT: Final = re.compile(
    r"```(?:json)?[ \t]*\r?\n?\s*(\{.*?\})\s*```",
    flags=re.DOTALL | re.IGNORECASE,
)

# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def strip_label_prefix(text: str, label: str) -> str:
    """Remove a leading label such as ``THOUGHTS:`` from *text*.

    Leading whitespace before the label is ignored. While *text* is still
    only a partial spelling of the label (a stream that has delivered
    ``"THOU"`` so far), the empty string is returned so the caller never
    shows half a label.
    """
    if not label:
        return text

    head: str = text.lstrip()
    if head.startswith(label):
        return head[len(label) :].lstrip()
    if head and label.startswith(head):
        return ""
    return text


def strip_code_fences(text: str) -> str:
    """Remove a surrounding Markdown code fence from *text*.

    Handles ```` ```json ```` and bare ```` ``` ```` openers. Text without
    a leading fence is only trimmed.
    """
    cleaned: str = text.strip()
    if not cleaned.startswith("```"):
        return cleaned

    cleaned = _OPEN_FENCE.sub("", cleaned, count=1)
    cleaned = _CLOSE_FENCE.sub("", cleaned.rstrip(), count=1)
    return cleaned.strip()


def find_fenced_object(text: str) -> Optional[Tuple[int, str]]:
    """Locate the first fenced code block containing a JSON object.

    Returns
    -------
    tuple[int, str] | None
        Index of the opening fence and the object text inside it, or
        ``None`` when no such block exists.
    """
    match = _FENCED_OBJECT.search(text)
    if match is None:
        return None
    return match.start(), match.group(1)


__all__ = ["strip_label_prefix", "strip_code_fences", "find_fenced_object"]
