"""Markdown formatting of AI generated text."""

from jumpkit.formatting.pipeline import FormatPipeline, build_pipeline, format_text

__all__ = ["FormatPipeline", "build_pipeline", "format_text"]
