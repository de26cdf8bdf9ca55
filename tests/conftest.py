"""
Shared pytest fixtures for video article backend tests

This file contains fixtures that are available to all test files.
"""

import pytest
from typing import Callable, Dict, List

from core.config import Settings
from core.text_utils import TranscriptSegment


@pytest.fixture
def sample_urls() -> Dict[str, str]:
    """Sample YouTube URLs that all embed the same video ID"""
    return {
        'watch': 'https://www.youtube.com/watch?v=dQw4w9WgXcQ',
        'watch_with_time': 'https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s',
        'mobile': 'https://m.youtube.com/watch?v=dQw4w9WgXcQ',
        'short_link': 'https://youtu.be/dQw4w9WgXcQ',
        'short_link_with_query': 'https://youtu.be/dQw4w9WgXcQ?si=abcdef',
        'shorts': 'https://www.youtube.com/shorts/dQw4w9WgXcQ',
        'live': 'https://www.youtube.com/live/dQw4w9WgXcQ',
        'embed': 'https://www.youtube.com/embed/dQw4w9WgXcQ',
        'no_scheme': 'youtube.com/watch?v=dQw4w9WgXcQ',
    }


@pytest.fixture
def make_segments() -> Callable[..., List[TranscriptSegment]]:
    """Factory for transcript segments from plain strings"""
    def _make(*texts: str) -> List[TranscriptSegment]:
        return [
            TranscriptSegment(text=text, start=float(i * 5), duration=5.0)
            for i, text in enumerate(texts)
        ]
    return _make


@pytest.fixture
def sample_segments(make_segments) -> List[TranscriptSegment]:
    """A short, realistic transcript"""
    return make_segments(
        "Welcome back to the show",
        "Today we are talking about   Python testing",
        "Our guest maintains a popular test runner",
        "We start with fixtures and why they matter",
        "Then we move on to mocking external services",
        "Parametrized tests come up next",
        "We discuss flaky tests and how to avoid them",
        "Finally some advice on continuous integration",
        "Thanks for listening and see you next week",
    )


@pytest.fixture
def settings_without_key() -> Settings:
    return Settings(provider="openai", openai_api_key=None)


@pytest.fixture
def settings_with_key() -> Settings:
    return Settings(provider="openai", openai_api_key="sk-test")
