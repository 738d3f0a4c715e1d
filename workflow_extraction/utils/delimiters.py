"""Brace balancing over raw model output.

The scanner understands just enough JSON to skip braces that appear inside
double-quoted strings (including escaped quotes); it is not a parser.
"""

from __future__ import annotations

from typing import Optional, Tuple

__all__ = ["find_balanced_object", "find_last_brace", "close_open_braces"]


def find_balanced_object(text: str, start_index: int = 0) -> Optional[Tuple[int, int]]:
    """Return ``(start, end)`` of the balanced ``{...}`` region in *text*.

    Scanning begins at the first ``{`` at or after *start_index*. ``end`` is
    inclusive, so ``text[start : end + 1]`` is the region.

    Returns ``None`` when there is no ``{`` or when the braces never balance
    (typically a truncated stream).
    """
    start: int = text.find("{", max(start_index, 0))
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False

    for idx in range(start, len(text)):
        ch = text[idx]

        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return start, idx

    return None


def find_last_brace(text: str, start_index: int = 0) -> Optional[int]:
    """Index of the last literal ``}`` at or after *start_index*.

    String context is not considered, which is why this is only the
    low-confidence end marker used when the balanced scan fails.
    """
    idx: int = text.rfind("}")
    if idx < max(start_index, 0):
        return None
    return idx


def close_open_braces(fragment: str) -> str:
    """Append whatever closes an object truncated mid-stream.

    An unterminated string gets its closing quote, then one ``}`` per brace
    still open. Brackets and dangling commas are left alone.
    """
    depth = 0
    in_string = False
    escaped = False

    for ch in fragment:
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}" and depth > 0:
            depth -= 1

    suffix = ('"' if in_string else "") + "}" * depth
    return fragment + suffix
