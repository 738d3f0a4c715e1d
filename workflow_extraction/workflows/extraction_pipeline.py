"""End-to-end extraction: stream in, thoughts and canonical workflow out."""

from __future__ import annotations

import codecs
import logging
from typing import AsyncIterable, Iterable, Optional, Sequence, Union

from ..logging_config import logging as _  # noqa: F401  # ensure config applied early
from ..config import SENTINEL_MARKER, THOUGHT_LABEL_PREFIX
from ..exceptions import PipelineError, StreamFailure
from ..models import ExtractionResult, ThoughtCallback
from ..services.canonicalizer import Canonicalizer
from ..services.fallback import DEFAULT_STRATEGIES, RecoveryStrategy, recover_payload
from ..services.phase_splitter import PhaseSplitter

logger = logging.getLogger(__name__)

RawChunk = Union[str, bytes]


class _Invocation:
    """Per-call state: one splitter, one decoder, nothing shared."""

    def __init__(
        self,
        sentinel: str,
        thought_callback: Optional[ThoughtCallback],
        label_prefix: str,
        canonicalizer: Optional[Canonicalizer],
        strategies: Sequence[RecoveryStrategy],
    ) -> None:
        self.splitter = PhaseSplitter(sentinel, thought_callback, label_prefix=label_prefix)
        self.thought_callback = thought_callback
        self.label_prefix = label_prefix
        self.canonicalizer = canonicalizer or Canonicalizer()
        self.strategies = strategies
        self.chunks_read = 0
        self._decoder = codecs.getincrementaldecoder("utf-8")()

    def decode(self, chunk: RawChunk) -> str:
        self.chunks_read += 1
        if isinstance(chunk, bytes):
            return self._decoder.decode(chunk)
        return chunk

    def stream_failed(self, exc: Exception) -> StreamFailure:
        logger.error("Stream failed after %d chunks: %s", self.chunks_read, exc)
        return StreamFailure(f"Stream failed after {self.chunks_read} chunks: {exc}")

    def finish(self) -> ExtractionResult:
        try:
            self.splitter.feed(self._decoder.decode(b"", final=True))
        except UnicodeDecodeError as exc:
            raise self.stream_failed(exc) from exc

        try:
            return self._extract()
        except PipelineError as exc:
            logger.error("Workflow extraction failed: %s", exc.message)
            raise

    def _extract(self) -> ExtractionResult:
        splitter = self.splitter

        if splitter.marker_found:
            document = self.canonicalizer.canonicalize(splitter.payload)
            return ExtractionResult(thoughts=splitter.thoughts, document=document)

        logger.info("Sentinel %r never appeared; falling back to brace scanning", splitter.sentinel)
        recovery = recover_payload(
            splitter.raw_text,
            label_prefix=self.label_prefix,
            strategies=self.strategies,
        )
        if self.thought_callback is not None:
            self.thought_callback(recovery.thoughts)

        document = self.canonicalizer.canonicalize(recovery.payload)
        if recovery.degraded:
            logger.warning(
                "Workflow recovered from a truncated response (%s strategy)", recovery.strategy
            )
        return ExtractionResult(
            thoughts=recovery.thoughts,
            document=document,
            degraded=recovery.degraded,
            strategy=recovery.strategy,
        )


async def run(
    stream: AsyncIterable[RawChunk],
    sentinel: str = SENTINEL_MARKER,
    thought_callback: Optional[ThoughtCallback] = None,
    *,
    label_prefix: str = THOUGHT_LABEL_PREFIX,
    canonicalizer: Optional[Canonicalizer] = None,
    strategies: Sequence[RecoveryStrategy] = DEFAULT_STRATEGIES,
) -> ExtractionResult:
    """Consume *stream* and return the thoughts and canonical workflow document.

    *thought_callback* is called synchronously with the thought text seen so
    far after every chunk read before the sentinel, and once more with the
    final thoughts. A slow callback slows down reading.

    Raises
    ------
    StreamFailure
        Reading from *stream* raised. Nothing is extracted from partial data.
    NoStructuredRegionFound, JsonSyntaxError, SchemaRepairError
        See :mod:`workflow_extraction.exceptions`.
    """
    invocation = _Invocation(sentinel, thought_callback, label_prefix, canonicalizer, strategies)
    chunks = aiter(stream)

    while True:
        try:
            text = invocation.decode(await anext(chunks))
        except StopAsyncIteration:
            break
        except Exception as exc:
            raise invocation.stream_failed(exc) from exc
        invocation.splitter.feed(text)

    return invocation.finish()


def run_sync(
    stream: Iterable[RawChunk],
    sentinel: str = SENTINEL_MARKER,
    thought_callback: Optional[ThoughtCallback] = None,
    *,
    label_prefix: str = THOUGHT_LABEL_PREFIX,
    canonicalizer: Optional[Canonicalizer] = None,
    strategies: Sequence[RecoveryStrategy] = DEFAULT_STRATEGIES,
) -> ExtractionResult:
    """Blocking variant of :func:`run` for plain iterables (files, lists)."""
    invocation = _Invocation(sentinel, thought_callback, label_prefix, canonicalizer, strategies)
    chunks = iter(stream)

    while True:
        try:
            text = invocation.decode(next(chunks))
        except StopIteration:
            break
        except Exception as exc:
            raise invocation.stream_failed(exc) from exc
        invocation.splitter.feed(text)

    return invocation.finish()


__all__ = ["run", "run_sync"]
