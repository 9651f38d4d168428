"""Format document use-case."""

from __future__ import annotations

from typing import Optional

from jumpkit.config import FormatterConfig
from jumpkit.formatting import format_text


def format_document(text: str, *, config: Optional[FormatterConfig] = None) -> str:
    return format_text(text, config=config)
