#!/usr/bin/env python3
"""
URL Utilities

Extracts YouTube video IDs from the URL shapes users paste in.
"""

import re
from typing import Optional
from urllib.parse import parse_qs, urlparse

# Loose match used when the input is not a parseable URL
VIDEO_ID_PATTERN = re.compile(
    r'(?:v=|youtu\.be/|/shorts/|/live/|/embed/)([a-zA-Z0-9_-]{6,})'
)
PATH_ID_PATTERN = re.compile(r'/(shorts|live|embed)/([^/?]+)')


def _video_id_from_parsed_url(value: str) -> Optional[str]:
    parsed = urlparse(value)
    if not parsed.scheme or not parsed.hostname:
        return None

    host = parsed.hostname.replace('www.', '', 1)

    if host == 'youtu.be':
        return parsed.path.replace('/', '') or None

    if host.endswith('youtube.com'):
        query_v = parse_qs(parsed.query).get('v', [])
        if query_v and query_v[0]:
            return query_v[0]

        path_match = PATH_ID_PATTERN.search(parsed.path)
        if path_match:
            return path_match.group(2)

    return None


def extract_video_id(value) -> Optional[str]:
    """
    Extract a YouTube video ID from a URL or URL-like string

    Tries a structured URL parse first, then falls back to pattern matching.

    Args:
        value: Raw user input

    Returns:
        The video ID, or None if no ID could be found

    Examples:
        >>> extract_video_id("https://youtu.be/abc123xy")
        'abc123xy'
        >>> extract_video_id("https://www.youtube.com/watch?v=abc123xy&t=5")
        'abc123xy'
        >>> extract_video_id("not a url") is None
        True
    """
    if not isinstance(value, str):
        return None

    trimmed = value.strip()
    if not trimmed:
        return None

    try:
        video_id = _video_id_from_parsed_url(trimmed)
        if video_id:
            return video_id
    except ValueError:
        # Malformed URL (e.g. bad IPv6 host), try pattern matching instead
        pass

    fallback_match = VIDEO_ID_PATTERN.search(trimmed)
    return fallback_match.group(1) if fallback_match else None
