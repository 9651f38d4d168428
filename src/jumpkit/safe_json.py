"""Tolerant JSON parsing for model-produced payloads."""

from __future__ import annotations

import json
import re
from typing import Any, Iterator, List, Optional

_FENCE_OPEN_RE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_CLOSE_RE = re.compile(r"```$")
_BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_LINE_COMMENT_RE = re.compile(r"(^|\s)//.*$", re.MULTILINE)
_TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")
_SINGLE_QUOTED_KEY_RE = re.compile(r"'([^'\\]*(?:\\.[^'\\]*)*)'\s*:")
_SINGLE_QUOTED_VALUE_RE = re.compile(r":\s*'([^'\\]*(?:\\.[^'\\]*)*)'")


def _try_parse(text: str) -> Optional[Any]:
    try:
        return json.loads(text)
    except ValueError:
        return None


def _outer_slice(text: str, opening: str, closing: str) -> Optional[str]:
    start = text.find(opening)
    end = text.rfind(closing)
    if start == -1 or end <= start:
        return None
    return text[start : end + 1]


def _top_level_candidates(text: str) -> Iterator[str]:
    stack: List[int] = []
    for index, char in enumerate(text):
        if char in "{[":
            stack.append(index)
        elif char in "}]" and stack:
            start = stack.pop()
            if not stack:
                yield text[start : index + 1]


def safe_parse_json(text: Optional[str]) -> Optional[Any]:
    """Parse JSON that may be wrapped, commented or slightly malformed.

    Tries, in order: the raw text; the text without code fences; the
    outermost object or array slice; a cleaned copy (BOM, smart quotes,
    comments, trailing commas); single-quote repair; every balanced top-level
    candidate. Returns ``None`` when nothing parses. Falsy parse results
    (``0``, ``[]``, ``{}``) count as failures and fall through.
    """
    if not text or not isinstance(text, str):
        return None

    parsed = _try_parse(text)
    if parsed:
        return parsed

    cleaned = _FENCE_CLOSE_RE.sub("", _FENCE_OPEN_RE.sub("", text.strip())).strip()
    parsed = _try_parse(cleaned)
    if parsed:
        return parsed

    for opening, closing in (("{", "}"), ("[", "]")):
        sliced = _outer_slice(cleaned, opening, closing)
        if sliced:
            parsed = _try_parse(sliced)
            if parsed:
                return parsed

    cleaned = cleaned.lstrip("\ufeff")
    cleaned = cleaned.replace("\u201c", '"').replace("\u201d", '"')
    cleaned = cleaned.replace("\u2018", "'").replace("\u2019", "'")
    cleaned = _BLOCK_COMMENT_RE.sub("", cleaned)
    cleaned = _LINE_COMMENT_RE.sub(r"\1", cleaned)
    cleaned = _TRAILING_COMMA_RE.sub(r"\1", cleaned)
    parsed = _try_parse(cleaned)
    if parsed:
        return parsed

    if cleaned.count('"') < cleaned.count("'"):
        repaired = _SINGLE_QUOTED_KEY_RE.sub(r'"\1":', cleaned)
        repaired = _SINGLE_QUOTED_VALUE_RE.sub(r': "\1"', repaired)
        parsed = _try_parse(repaired)
        if parsed:
            return parsed

    for candidate in _top_level_candidates(cleaned):
        parsed = _try_parse(_TRAILING_COMMA_RE.sub(r"\1", candidate))
        if parsed:
            return parsed
    return None
