"""Keyword extraction from free-text form answers."""

from __future__ import annotations

import re
from typing import List

_NON_WORD_RE = re.compile(r"[^\w\s]")
_PRIORITY_RE = re.compile(
    r"^(?:ai|automation|machine|learning|data|analytics|digital|tech|business|marketing|sales"
    r"|customer|process|strategy|growth|revenue|efficiency|productivity)"
)

STOPWORDS = frozenset(
    """
    the a an and or but in on at to for of with by is are was were be been have has had do does did
    will would could should can may might must shall i me my we us our you your he him his she her
    it its they them their this that these those want need like get make use help work find create
    """.split()
)


def meaningful_words(text: str) -> List[str]:
    """Lower-cased words of ``text`` in order of appearance.

    Words shorter than three characters, stopwords and pure numbers are
    dropped.
    """
    if not text or not text.strip():
        return []
    words = _NON_WORD_RE.sub(" ", text.lower()).split()
    return [word for word in words if len(word) > 2 and word not in STOPWORDS and not word.isdigit()]


def extract_keywords(text: str, max_words: int = 2) -> List[str]:
    """Up to ``max_words`` meaningful words, AI and business terms first.

    Only the first ``max_words * 2`` meaningful words are candidates.
    """
    candidates = meaningful_words(text)[: max_words * 2]
    priority = [word for word in candidates if _PRIORITY_RE.match(word)]
    rest = [word for word in candidates if word not in priority]
    return (priority + rest)[:max_words]
