"""
Rule-Based Article Writer

Builds a structured markdown article straight from transcript segments,
without any network access. Used whenever the language model is not
configured or fails.
"""

from typing import List, Sequence

from core.config import Config
from core.text_utils import TranscriptSegment, collapse_whitespace, segments_to_text

DEFAULT_TITLE = "Podcast Summary"
DEFAULT_CLOSING = "The discussion concludes with a wrap-up of key takeaways."
SOURCE_DISCLAIMER = "This article is generated from the transcript and may omit details."


def build_title(segments: Sequence[TranscriptSegment]) -> str:
    """First segment with more than 5 characters, capped at 70 characters"""
    seed = next(
        (segment.text for segment in segments if segment.text and len(segment.text) > 5),
        DEFAULT_TITLE
    )
    cleaned = collapse_whitespace(seed)

    if not cleaned:
        return DEFAULT_TITLE

    if len(cleaned) > Config.TITLE_MAX_CHARS:
        return f"{cleaned[:Config.TITLE_MAX_CHARS].strip()}..."
    return cleaned


def sample_points(segments: Sequence[TranscriptSegment], count: int = Config.KEY_POINT_COUNT) -> List[str]:
    """
    Sample up to `count` key points spread evenly across the transcript

    Each point joins a window of consecutive segments starting at every
    stride position. Empty windows are skipped.
    """
    if not segments:
        return []

    points = []
    step = max(1, len(segments) // count)

    for i in range(0, len(segments), step):
        if len(points) >= count:
            break
        chunk = segments_to_text(segments[i:i + Config.KEY_POINT_WINDOW])
        if chunk:
            points.append(chunk)

    return points


def build_rule_based_article(
    segments: Sequence[TranscriptSegment],
    style_descriptor: str,
    length_spec: str,
    truncated: bool
) -> str:
    """
    Assemble the fallback article

    Section order: title, Overview, target length, Key Points, Closing,
    Source Notes.
    """
    segments = list(segments)
    title = build_title(segments)
    intro = segments_to_text(segments[:Config.SUMMARY_SEGMENT_COUNT])
    closing = segments_to_text(segments[-Config.SUMMARY_SEGMENT_COUNT:])
    points = sample_points(segments)

    style_line = (
        f"Style focus: {style_descriptor}."
        if style_descriptor
        else "Style focus: neutral summary."
    )
    scope_line = (
        "Note: transcript truncated to fit context."
        if truncated
        else "Note: transcript fully included for this summary."
    )

    return "\n".join([
        f"# {title}",
        "",
        "## Overview",
        f"{style_line} {intro}",
        "",
        f"Target length: {length_spec}.",
        "",
        "## Key Points",
        "\n".join(f"- {point}" for point in points),
        "",
        "## Closing",
        closing or DEFAULT_CLOSING,
        "",
        "## Source Notes",
        f"{scope_line} {SOURCE_DISCLAIMER}",
    ])
