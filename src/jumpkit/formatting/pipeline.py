"""Ordered pass pipeline turning raw AI text into Markdown."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Callable, List, Optional, Tuple

from jumpkit.config import FormatterConfig
from jumpkit.formatting import passes
from jumpkit.normalize import collapse_blank_runs

Pass = Callable[[str], str]


@dataclass(frozen=True)
class FormatPipeline:
    steps: Tuple[Tuple[str, Pass], ...]

    @property
    def names(self) -> List[str]:
        return [name for name, _ in self.steps]

    def run(self, text: str) -> str:
        result = text
        for _, step in self.steps:
            result = step(result)
        return collapse_blank_runs(result).strip()


def build_pipeline(config: Optional[FormatterConfig] = None) -> FormatPipeline:
    cfg = config or FormatterConfig()
    return FormatPipeline(
        steps=(
            ("normalize", passes.normalize),
            (
                "collapse_bullet_runs",
                partial(passes.collapse_bullet_runs, min_run=cfg.min_bullet_run, keep=cfg.keep_bullets),
            ),
            ("promote_numbered_sections", passes.promote_numbered_sections),
            ("promote_title_lines", passes.promote_title_lines),
            ("promote_numbered_titles", passes.promote_numbered_titles),
            ("bold_labels", passes.bold_labels),
            ("emphasize_terms", passes.emphasize_terms),
            ("promote_labeled_sections", passes.promote_labeled_sections),
            ("bold_caps_words", passes.bold_caps_words),
            ("ensure_block_spacing", passes.ensure_block_spacing),
        )
    )


_DEFAULT_PIPELINE = build_pipeline()


def format_text(raw: Optional[str], config: Optional[FormatterConfig] = None) -> str:
    """Heuristically convert raw AI text into Markdown.

    Text that matches none of the patterns is returned trimmed but otherwise
    unchanged. ``""`` and ``None`` give ``""``.
    """
    if not raw:
        return ""
    pipeline = _DEFAULT_PIPELINE if config is None else build_pipeline(config)
    return pipeline.run(raw)
