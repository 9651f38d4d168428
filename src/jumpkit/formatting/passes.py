"""Individual rewrite passes of the Markdown formatter.

Every pass is a pure ``str -> str`` function. The pipeline applies them in a
fixed order, so later passes see the Markdown produced by earlier ones and
must leave existing ``#`` and ``*`` markers alone.
"""

from __future__ import annotations

import re
from typing import Callable, List

from jumpkit.formatting.vocabulary import (
    ACTION_VERBS,
    COUNT_UNITS,
    EMPHASIS_WORDS,
    LABELS,
    SECTION_LABELS,
    SECTION_TERMS,
    TIME_UNITS,
    alternation,
)
from jumpkit.normalize import collapse_blank_runs, normalize_newlines

_HEADING_RE = re.compile(r"^[ \t]*#{1,6}[ \t]")
_LIST_ITEM_RE = re.compile(r"^[ \t]*(?:[-+*]|\d+\.)[ \t]+")
_BLOCKQUOTE_RE = re.compile(r"^[ \t]*>")
_BULLET_RE = re.compile(r"^[ \t]*-[ \t]+(.*)$")

_BULLET_MARKER_RE = re.compile(r"^[ \t]*[•*][ \t]+", re.MULTILINE)
_PAREN_NUMBER_RE = re.compile(r"^([ \t]*)(\d+)\)[ \t]+", re.MULTILINE)

_CHAPTER_RE = re.compile(
    r"^[ \t]*(chapter|section)[ \t]+(\d+)\b[ \t]*[:.\-–—]?[ \t]*(.*?)[ \t]*$",
    re.IGNORECASE | re.MULTILINE,
)
_STEP_RE = re.compile(
    r"^[ \t]*(step|phase)[ \t]+(\d+)\b[ \t]*[:.\-–—]?[ \t]*(.*?)[ \t]*$",
    re.IGNORECASE | re.MULTILINE,
)

_TITLE_WORD = r"[A-Z][\w'&/\-]*"
_CONNECTOR = r"(?:a|an|and|as|at|by|for|in|of|on|or|the|to|with|&)"
_SECTION_TERM_RE = re.compile(
    rf"^[ \t]*({alternation(SECTION_TERMS)})[ \t]*:?[ \t]*$",
    re.IGNORECASE | re.MULTILINE,
)
_CAPS_LINE_RE = re.compile(r"^[ \t]*([A-Z][A-Z0-9 &/,'\-]{8,58}[A-Z0-9])[ \t]*:?[ \t]*$", re.MULTILINE)
_TITLE_CASE_RE = re.compile(
    rf"^[ \t]*({_TITLE_WORD}(?:[ \t]+(?:{_TITLE_WORD}|{_CONNECTOR}))*[ \t]+{_TITLE_WORD})[ \t]*$(?=\n[ \t]*\n)",
    re.MULTILINE,
)
_NUMBERED_TITLE_RE = re.compile(
    rf"^[ \t]*(\d+)\.[ \t]+({_TITLE_WORD}(?:[ \t]+(?:{_TITLE_WORD}|{_CONNECTOR}))*)[ \t]*:?[ \t]*$",
    re.MULTILINE,
)

_LABEL_RE = re.compile(
    rf"^([ \t]*)({alternation(LABELS)})[ \t]*:[ \t]*(.*?)[ \t]*$",
    re.IGNORECASE | re.MULTILINE,
)

_PERCENT_RE = re.compile(r"(?<![\w*.$])(\d+(?:\.\d+)?%)(?![\w*])")
_MONEY_RE = re.compile(
    r"(?<![\w*])(\$(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?(?:[ \t]?(?:[kKmMbB]|million|billion|thousand))?)(?![\w*])"
)
_COUNT_RE = re.compile(
    rf"(?<![\w*.,$])((?:\d{{1,3}}(?:,\d{{3}})+|\d+)\+?[ \t]+(?:{alternation(COUNT_UNITS)}))(?![\w*])",
    re.IGNORECASE,
)
_TIME_RE = re.compile(
    r"(?<![\w*])("
    rf"(?:within|in[ \t]+the[ \t]+next|over[ \t]+the[ \t]+next|next|first)[ \t]+\d+[ \t]+(?:{alternation(TIME_UNITS)})"
    r"|(?:short|mid|medium|long)-term"
    r"|by[ \t]+Q[1-4]"
    r")(?![\w*])",
    re.IGNORECASE,
)
_EMPHASIS_RE = re.compile(rf"(?<![\w*])({alternation(EMPHASIS_WORDS)})(?![\w*])", re.IGNORECASE)
_VERB_RE = re.compile(rf"(?<![\w*])({alternation(ACTION_VERBS)})(?![\w*])", re.IGNORECASE)

_SECTION_LABEL_RE = re.compile(
    rf"^[ \t]*(?:\*\*)?({alternation(SECTION_LABELS)})[ \t]*(?:\*\*)?[ \t]*:[ \t]*(?:\*\*)?[ \t]*(.*?)[ \t]*$",
    re.IGNORECASE | re.MULTILINE,
)
_STAGE_RE = re.compile(
    r"^[ \t]*(?:(?:[-+]|\d+\.)[ \t]+)?(?:\*\*)?(phase|stage)[ \t]+(\d+)[ \t]*(?:\*\*)?"
    r"[ \t]*[:\-–—][ \t]*(?:\*\*)?[ \t]*(.*?)[ \t]*$",
    re.IGNORECASE | re.MULTILINE,
)

_CAPS_WORD_RE = re.compile(r"(?<![\w*])([A-Z]{3,})(?![\w*])")

_LITERAL_RE = re.compile(r"`[^`\n]*`|\]\([^)\s]*\)|https?://[^\s)>\]]+")
_PLACEHOLDER_RE = re.compile(r"\x00(\d+)\x00")


def _capitalize_words(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in text.split())


def _map_body_lines(text: str, func: Callable[[str], str]) -> str:
    lines = text.split("\n")
    return "\n".join(line if _HEADING_RE.match(line) else _outside_literals(line, func) for line in lines)


def _outside_literals(line: str, func: Callable[[str], str]) -> str:
    """Apply ``func`` with code spans, link targets and URLs masked out."""
    saved: List[str] = []

    def stash(match: re.Match[str]) -> str:
        saved.append(match.group(0))
        return f"\x00{len(saved) - 1}\x00"

    masked = _LITERAL_RE.sub(stash, line)
    if not saved:
        return func(line)
    return _PLACEHOLDER_RE.sub(lambda match: saved[int(match.group(1))], func(masked))


def _promote_if_sized(match: re.Match[str], prefix: str, low: int, high: int) -> str:
    title = match.group(1).strip().rstrip(":").strip()
    if low <= len(title) <= high:
        return f"{prefix} {title}"
    return match.group(0)


def normalize(text: str) -> str:
    """Unify line endings, blank runs, bullet markers and ``1)`` numbering."""
    result = collapse_blank_runs(normalize_newlines(text))
    result = _BULLET_MARKER_RE.sub("- ", result)
    result = _PAREN_NUMBER_RE.sub(r"\1\2. ", result)
    return result.strip()


def collapse_bullet_runs(text: str, *, min_run: int = 5, keep: int = 3) -> str:
    """Keep the first ``keep`` items of long bullet runs and flatten the rest."""
    output: List[str] = []
    run: List[str] = []

    def flush() -> None:
        if len(run) < min_run:
            output.extend(run)
        else:
            output.extend(run[:keep])
            rest = []
            for line in run[keep:]:
                match = _BULLET_RE.match(line)
                item = match.group(1).strip().rstrip(".,;").strip() if match else ""
                if item:
                    rest.append(item)
            if rest:
                output.extend(["", ", ".join(rest) + ".", ""])
        run.clear()

    for line in text.split("\n"):
        if _BULLET_RE.match(line):
            run.append(line)
            continue
        flush()
        output.append(line)
    flush()
    return "\n".join(output)


def promote_numbered_sections(text: str) -> str:
    """Chapter/Section lines become ``##``, Step/Phase lines become ``###``."""

    def heading(level: str) -> Callable[[re.Match[str]], str]:
        def replace(match: re.Match[str]) -> str:
            kind = match.group(1).capitalize()
            title = match.group(3).strip()
            base = f"{level} {kind} {match.group(2)}"
            return f"{base}: {title}" if title else base

        return replace

    result = _CHAPTER_RE.sub(heading("##"), text)
    return _STEP_RE.sub(heading("###"), result)


def promote_title_lines(text: str) -> str:
    """Promote business-term, ALL-CAPS and Title-Case lines to ``##``."""
    result = _SECTION_TERM_RE.sub(
        lambda match: f"## {_capitalize_words(match.group(1))}"
        if 5 <= len(match.group(1).strip()) <= 80
        else match.group(0),
        text,
    )
    result = _CAPS_LINE_RE.sub(lambda match: _promote_if_sized(match, "##", 5, 80), result)
    return _TITLE_CASE_RE.sub(lambda match: _promote_if_sized(match, "##", 5, 80), result)


def promote_numbered_titles(text: str) -> str:
    """``3. Market Research`` style lines become ``###`` headings."""

    def replace(match: re.Match[str]) -> str:
        title = match.group(2).strip()
        if 8 <= len(title) <= 50:
            return f"### {match.group(1)}. {title}"
        return match.group(0)

    return _NUMBERED_TITLE_RE.sub(replace, text)


def bold_labels(text: str) -> str:
    """Bold a known label at the very start of a line, e.g. ``Goal:``."""

    def replace(match: re.Match[str]) -> str:
        indent, label, rest = match.group(1), _capitalize_words(match.group(2)), match.group(3)
        if rest:
            return f"{indent}**{label}:** {rest}"
        return f"{indent}**{label}:**"

    return _LABEL_RE.sub(replace, text)


def _emphasize_line(line: str) -> str:
    line = _PERCENT_RE.sub(r"**\1**", line)
    line = _MONEY_RE.sub(r"**\1**", line)
    line = _COUNT_RE.sub(r"**\1**", line)
    line = _TIME_RE.sub(r"*\1*", line)
    line = _EMPHASIS_RE.sub(r"*\1*", line)
    return _VERB_RE.sub(r"**\1**", line)


def emphasize_terms(text: str) -> str:
    """Italicise emphasis words and time phrases, bold verbs and metrics."""
    return _map_body_lines(text, _emphasize_line)


def promote_labeled_sections(text: str) -> str:
    """Split labelled lines (Risks, Stage 2, ...) into a heading and a body."""

    def section(match: re.Match[str]) -> str:
        heading = f"### {_capitalize_words(match.group(1).lower())}"
        body = _strip_dangling_bold(match.group(2))
        return f"{heading}\n\n{body}" if body else heading

    def stage(match: re.Match[str]) -> str:
        heading = f"### {match.group(1).capitalize()} {match.group(2)}"
        body = _strip_dangling_bold(match.group(3))
        return f"{heading}\n\n{body}" if body else heading

    result = _SECTION_LABEL_RE.sub(section, text)
    return _STAGE_RE.sub(stage, result)


def _strip_dangling_bold(body: str) -> str:
    body = body.strip()
    if body.endswith("**") and body.count("**") == 1:
        body = body[:-2].rstrip()
    return body


def bold_caps_words(text: str) -> str:
    """Bold remaining ALL-CAPS words of three or more letters."""
    return _map_body_lines(text, lambda line: _CAPS_WORD_RE.sub(r"**\1**", line))


def ensure_block_spacing(text: str) -> str:
    """Insert the blank lines Markdown needs before headings, list items and quotes."""
    output: List[str] = []
    in_quote = False
    for line in text.split("\n"):
        is_heading = bool(_HEADING_RE.match(line))
        is_item = bool(_LIST_ITEM_RE.match(line))
        is_quote = bool(_BLOCKQUOTE_RE.match(line))
        previous_blank = not output or not output[-1].strip()
        starts_block = is_heading or is_item or (is_quote and not in_quote)
        if starts_block and not previous_blank:
            output.append("")
        output.append(line)
        in_quote = is_quote
    return "\n".join(output)
