#!/usr/bin/env python3
"""
Prompts and style handling for article generation

Builds the style descriptor shared by both generation modes and the
prompt sent to the external language model.
"""

from typing import Optional

from core.config import Config
from core.text_utils import clamp_text

STYLE_SEPARATOR = " | "
AUTO_LANGUAGE = "auto"

LENGTH_SPECS = {
    'short': "300-450 words",
    'medium': "600-900 words",
    'long': "1000-1400 words",
}


def build_style_descriptor(style_preset, style_detail, language) -> str:
    """
    Combine user style preferences into one bounded descriptor

    Each field is whitespace-normalized, then clamped to its own limit.
    The language clause is dropped when empty or "auto".

    Examples:
        >>> build_style_descriptor("Casual blog", "  use   headings ", "Korean")
        'Casual blog | use headings | Output language: Korean'
        >>> build_style_descriptor(None, "", "auto")
        ''
    """
    safe_preset = clamp_text(style_preset, Config.STYLE_LIMIT)
    safe_detail = clamp_text(style_detail, Config.DETAIL_LIMIT)
    safe_language = clamp_text(language, Config.LANGUAGE_LIMIT)

    parts = []
    if safe_preset:
        parts.append(safe_preset)
    if safe_detail:
        parts.append(safe_detail)
    if safe_language and safe_language != AUTO_LANGUAGE:
        parts.append(f"Output language: {safe_language}")

    return STYLE_SEPARATOR.join(parts)


def length_spec_from_choice(choice) -> str:
    """Map a length choice to its word-count target, defaulting to medium"""
    normalized = str(choice or "").strip().lower()
    return LENGTH_SPECS.get(normalized, LENGTH_SPECS['medium'])


class ArticlePrompt:
    """
    Prompt for turning a transcript into a structured article

    Used only when an external model credential is configured.
    """

    SYSTEM_PROMPT = (
        "You turn podcast transcripts into structured articles. "
        "Do not invent details that are not in the transcript."
    )
    MAX_TOKENS = Config.MAX_OUTPUT_TOKENS
    TEMPERATURE = Config.TEMPERATURE

    @staticmethod
    def build(
        transcript: str,
        style_descriptor: Optional[str],
        length_spec: str,
        truncated: bool
    ) -> str:
        """
        Build the user message

        Args:
            transcript: Normalized (possibly truncated) transcript text
            style_descriptor: Output of build_style_descriptor()
            length_spec: Word-count target such as "600-900 words"
            truncated: Whether the transcript was cut to fit

        Returns:
            User prompt with paragraphs separated by blank lines
        """
        style_line = (
            f"Style notes: {style_descriptor}."
            if style_descriptor
            else "Style notes: neutral professional tone."
        )
        transcript_line = (
            "Transcript (truncated for length):" if truncated else "Transcript:"
        )

        return "\n\n".join([
            style_line,
            f"Target length: {length_spec}.",
            "Provide a title, section headings, and a short key points list.",
            transcript_line,
            transcript,
        ])
