#!/usr/bin/env python3
"""
Text Utilities

Provides transcript joining, whitespace cleanup and length clamping.
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterable

from core.config import Config

WHITESPACE_RE = re.compile(r'\s+')


@dataclass(frozen=True)
class TranscriptSegment:
    """One timed unit of transcript text"""
    text: str
    start: float = 0.0
    duration: float = 0.0

    @classmethod
    def from_dict(cls, entry: Dict) -> "TranscriptSegment":
        return cls(
            text=entry.get('text') or '',
            start=float(entry.get('start') or 0.0),
            duration=float(entry.get('duration') or 0.0),
        )


@dataclass(frozen=True)
class NormalizedTranscript:
    """Cleaned transcript text and whether it was cut to fit"""
    text: str
    truncated: bool = False


def collapse_whitespace(text: str) -> str:
    """
    Collapse runs of whitespace into single spaces and trim

    Examples:
        >>> collapse_whitespace("  hello \\n\\t world  ")
        'hello world'
    """
    return WHITESPACE_RE.sub(' ', text).strip()


def clamp_text(value, max_length: int) -> str:
    """
    Normalize whitespace of any value and cut it to max_length characters

    Falsy values become an empty string. Never raises on oversized input.

    Examples:
        >>> clamp_text("  a   b  ", 10)
        'a b'
        >>> clamp_text(None, 10)
        ''
    """
    if not value:
        return ''
    return collapse_whitespace(str(value))[:max_length]


def segments_to_text(segments: Iterable[TranscriptSegment]) -> str:
    """Join segment text with spaces and clean up whitespace"""
    return collapse_whitespace(' '.join(segment.text or '' for segment in segments))


def normalize_transcript(
    segments: Iterable[TranscriptSegment],
    max_chars: int = Config.MAX_TRANSCRIPT_CHARS
) -> NormalizedTranscript:
    """
    Join transcript segments into one cleaned blob, truncating long transcripts

    Args:
        segments: Ordered transcript segments
        max_chars: Maximum characters kept before the truncation marker

    Returns:
        NormalizedTranscript with the text and a truncated flag
    """
    text = segments_to_text(segments)
    if len(text) > max_chars:
        return NormalizedTranscript(
            text=f"{text[:max_chars]}{Config.TRUNCATION_MARKER}",
            truncated=True
        )
    return NormalizedTranscript(text=text, truncated=False)
