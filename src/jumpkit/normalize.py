"""Normalization utilities."""

import re


_WHITESPACE_RE = re.compile(r"\s+")
_LINE_ENDING_RE = re.compile(r"\r\n?")
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def normalize_light(text: str) -> str:
    """Collapse whitespace runs and strip leading/trailing whitespace."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize_newlines(text: str) -> str:
    """Convert CR/CRLF line endings to LF."""
    return _LINE_ENDING_RE.sub("\n", text)


def collapse_blank_runs(text: str) -> str:
    """Collapse three or more consecutive newlines to exactly two."""
    return _BLANK_RUN_RE.sub("\n\n", text)
