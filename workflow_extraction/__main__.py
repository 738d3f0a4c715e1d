"""Run the extraction pipeline over a saved model response.

Usage::

    python -m workflow_extraction response.txt > workflow.json
    cat response.txt | python -m workflow_extraction --sentinel '###MARK###'
"""

from __future__ import annotations

import argparse
import json
import sys
from functools import partial
from typing import Iterator, List, Optional, TextIO

from .config import SENTINEL_MARKER, THOUGHT_LABEL_PREFIX
from .exceptions import PipelineError
from .workflows.extraction_pipeline import run_sync


def _read_chunks(handle: TextIO, size: int) -> Iterator[str]:
    return iter(partial(handle.read, size), "")


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="workflow_extraction",
        description="Extract the reasoning and the canonical workflow JSON from a model response.",
    )
    parser.add_argument("path", nargs="?", help="response file (default: stdin)")
    parser.add_argument("--sentinel", default=SENTINEL_MARKER)
    parser.add_argument("--label", default=THOUGHT_LABEL_PREFIX, help="thought label prefix to strip")
    parser.add_argument("--chunk-size", type=int, default=4096)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)

    handle: TextIO = open(args.path, encoding="utf-8") if args.path else sys.stdin
    try:
        result = run_sync(
            _read_chunks(handle, args.chunk_size),
            args.sentinel,
            label_prefix=args.label,
        )
    except PipelineError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        if exc.raw_text:
            print(exc.raw_text, file=sys.stderr)
        return 1
    finally:
        if handle is not sys.stdin:
            handle.close()

    if result.thoughts:
        print(result.thoughts, file=sys.stderr)
    json.dump(result.document, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
