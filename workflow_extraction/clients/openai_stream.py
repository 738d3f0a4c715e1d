"""Adapters from OpenAI-compatible streaming responses to text chunks.

Local servers (Ollama, LM Studio, vLLM) speak the same
`/v1/chat/completions` protocol, so a stream created with the
:mod:`openai` SDK and ``stream=True`` can be fed straight into the
pipeline through these helpers.
"""

from __future__ import annotations

from typing import AsyncIterable, AsyncIterator, Iterable, Iterator, Optional

from openai.types.chat import ChatCompletionChunk


def chunk_text(chunk: ChatCompletionChunk) -> Optional[str]:
    """Return the content delta of the first choice, if any."""
    if not chunk.choices:
        return None
    delta = chunk.choices[0].delta
    if delta is None:
        return None
    return delta.content or None


async def iter_completion_text(stream: AsyncIterable[ChatCompletionChunk]) -> AsyncIterator[str]:
    """Yield the text of each chunk, skipping role-only and usage chunks."""
    async for chunk in stream:
        text = chunk_text(chunk)
        if text:
            yield text


def iter_completion_text_sync(stream: Iterable[ChatCompletionChunk]) -> Iterator[str]:
    for chunk in stream:
        text = chunk_text(chunk)
        if text:
            yield text


__all__ = ["chunk_text", "iter_completion_text", "iter_completion_text_sync"]
