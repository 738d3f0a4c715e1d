"""Classify streamed model output into reasoning prose and JSON payload."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..models import Phase, ThoughtCallback
from ..utils.text_cleaning import strip_label_prefix

logger = logging.getLogger(__name__)


def _noop(_: str) -> None:
    return None


class PhaseSplitter:
    """Two-state machine fed one chunk at a time.

    While THINKING, chunks accumulate in a rolling buffer that is searched
    for the sentinel after every chunk, and the thought callback receives the
    current prose. Once the sentinel is found the splitter moves to PAYLOAD
    for good: the sentinel itself is dropped and all later text is kept
    verbatim without further callbacks.

    Chunk boundaries are arbitrary; the sentinel may be split across them.
    """

    def __init__(
        self,
        sentinel: str,
        on_thoughts: Optional[ThoughtCallback] = None,
        *,
        label_prefix: str = "",
    ) -> None:
        if not sentinel:
            raise ValueError("sentinel must be a non-empty string")
        self.sentinel = sentinel
        self.label_prefix = label_prefix
        self._on_thoughts: ThoughtCallback = on_thoughts or _noop

        self.phase: Phase = Phase.THINKING
        self._rolling: str = ""
        self._payload: List[str] = []
        self._thoughts: str = ""

    # ------------------------------------------------------------------
    # Feeding
    # ------------------------------------------------------------------

    def feed(self, chunk: str) -> None:
        if not chunk:
            return

        if self.phase is Phase.PAYLOAD:
            self._payload.append(chunk)
            return

        if self.phase is Phase.THINKING:
            # Only the tail of the old buffer can hold the start of a split sentinel
            search_from = max(0, len(self._rolling) - len(self.sentinel) + 1)
            self._rolling += chunk
            idx = self._rolling.find(self.sentinel, search_from)
            if idx == -1:
                self._on_thoughts(self._clean(self._rolling))
                return
            self._enter_payload(idx)
            return

        raise AssertionError(f"unhandled phase {self.phase!r}")

    def _enter_payload(self, idx: int) -> None:
        before = self._rolling[:idx]
        after = self._rolling[idx + len(self.sentinel) :]

        self._thoughts = self._clean(before).strip()
        self._on_thoughts(self._thoughts)

        if after:
            self._payload.append(after)
        self._rolling = ""
        self.phase = Phase.PAYLOAD
        logger.debug("Sentinel found after %d characters of reasoning", len(before))

    def _clean(self, text: str) -> str:
        return strip_label_prefix(text, self.label_prefix)

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    @property
    def marker_found(self) -> bool:
        return self.phase is Phase.PAYLOAD

    @property
    def thoughts(self) -> str:
        """Final thought text; only meaningful once the sentinel was seen."""
        return self._thoughts

    @property
    def payload(self) -> str:
        return "".join(self._payload)

    @property
    def raw_text(self) -> str:
        """Everything received while THINKING (the sentinel never appeared)."""
        return self._rolling


__all__ = ["PhaseSplitter"]
