import json
import unittest
from unittest.mock import MagicMock
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from openai.types.chat import ChatCompletionChunk
from openai.types.chat.chat_completion_chunk import Choice, ChoiceDelta

from workflow_extraction.clients.openai_stream import (
    chunk_text,
    iter_completion_text,
    iter_completion_text_sync,
)
from workflow_extraction.workflows.extraction_pipeline import run


def _chunk(content=None, role=None):
    return ChatCompletionChunk(
        id="chatcmpl-1",
        created=0,
        model="local-model",
        object="chat.completion.chunk",
        choices=[Choice(index=0, delta=ChoiceDelta(content=content, role=role), finish_reason=None)],
    )


def _usage_chunk():
    return ChatCompletionChunk(
        id="chatcmpl-1",
        created=0,
        model="local-model",
        object="chat.completion.chunk",
        choices=[],
    )


async def _async_chunks(chunks):
    for chunk in chunks:
        yield chunk


class TestOpenAIStream(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        payload = json.dumps({"workflow": {"nodes": [], "links": []}, "requirements": {}})
        self.chunks = [
            _chunk(role="assistant"),
            _chunk("THOUGHTS: simple "),
            _chunk("graph ###MARK###"),
            _chunk(payload[:10]),
            _chunk(payload[10:]),
            _usage_chunk(),
        ]

    def test_chunk_text(self):
        self.assertEqual(chunk_text(_chunk("abc")), "abc")
        self.assertIsNone(chunk_text(_chunk(role="assistant")))
        self.assertIsNone(chunk_text(_usage_chunk()))
        self.assertIsNone(chunk_text(MagicMock(choices=[MagicMock(delta=None)])))

    def test_sync_iteration_skips_empty_chunks(self):
        texts = list(iter_completion_text_sync(self.chunks))
        self.assertEqual(len(texts), 4)
        self.assertEqual(texts[0], "THOUGHTS: simple ")

    async def test_pipeline_over_completion_stream(self):
        result = await run(
            iter_completion_text(_async_chunks(self.chunks)),
            "###MARK###",
            label_prefix="THOUGHTS:",
        )
        self.assertEqual(result.thoughts, "simple graph")
        self.assertEqual(result.workflow, {"nodes": [], "links": []})


if __name__ == '__main__':
    unittest.main()
