"""
Unit tests for core/text_utils.py

Tests whitespace cleanup, clamping and transcript normalization.
"""

import pytest
from core.config import Config
from core.text_utils import (
    NormalizedTranscript,
    TranscriptSegment,
    clamp_text,
    collapse_whitespace,
    normalize_transcript,
    segments_to_text,
)


class TestCollapseWhitespace:
    """Tests for collapse_whitespace() function"""

    @pytest.mark.unit
    def test_collapses_mixed_whitespace(self):
        """Should turn runs of spaces, tabs and newlines into one space"""
        assert collapse_whitespace("a  \t b\n\nc") == "a b c"

    @pytest.mark.unit
    def test_trims_ends(self):
        """Should strip leading and trailing whitespace"""
        assert collapse_whitespace("   hello   ") == "hello"

    @pytest.mark.unit
    def test_handles_empty_string(self):
        assert collapse_whitespace("") == ""


class TestClampText:
    """Tests for clamp_text() function"""

    @pytest.mark.unit
    def test_returns_empty_for_falsy_values(self):
        """Should return empty string for None and empty values"""
        assert clamp_text(None, 10) == ""
        assert clamp_text("", 10) == ""

    @pytest.mark.unit
    def test_normalizes_before_truncating(self):
        """Whitespace should collapse before the length cap applies"""
        assert clamp_text("a          b", 3) == "a b"

    @pytest.mark.unit
    def test_truncates_to_limit(self):
        """Should cut oversized input to the limit"""
        assert clamp_text("x" * 1000, 40) == "x" * 40

    @pytest.mark.unit
    def test_converts_non_strings(self):
        """Should stringify non-string values"""
        assert clamp_text(12345, 3) == "123"


class TestSegmentsToText:
    """Tests for segments_to_text() function"""

    @pytest.mark.unit
    def test_joins_with_single_spaces(self, make_segments):
        result = segments_to_text(make_segments("hello ", "  world", "again\n"))
        assert result == "hello world again"

    @pytest.mark.unit
    def test_treats_missing_text_as_empty(self):
        """Segments without text should not break the join"""
        segments = [TranscriptSegment(text="one"), TranscriptSegment(text=None), TranscriptSegment(text="two")]
        assert segments_to_text(segments) == "one two"

    @pytest.mark.unit
    def test_empty_sequence(self):
        assert segments_to_text([]) == ""


class TestNormalizeTranscript:
    """Tests for normalize_transcript() function"""

    @pytest.mark.unit
    def test_short_transcript_is_preserved(self, sample_segments):
        """Should keep the full text and report no truncation"""
        result = normalize_transcript(sample_segments)

        assert isinstance(result, NormalizedTranscript)
        assert result.truncated is False
        assert result.text.startswith("Welcome back to the show Today we are talking about Python testing")
        assert result.text.endswith("see you next week")

    @pytest.mark.unit
    def test_idempotent_on_own_output(self, sample_segments):
        """Normalizing the output again should not change it"""
        first = normalize_transcript(sample_segments)
        second = normalize_transcript([TranscriptSegment(text=first.text)])

        assert second.text == first.text
        assert second.truncated is False

    @pytest.mark.unit
    def test_truncates_long_transcript(self, make_segments):
        """Over-length transcripts should be cut to the limit plus the marker"""
        segments = make_segments(*["abcdefghi"] * 2000)  # 19999 chars once joined
        result = normalize_transcript(segments)

        assert result.truncated is True
        assert len(result.text) == Config.MAX_TRANSCRIPT_CHARS + len(Config.TRUNCATION_MARKER)
        assert result.text.endswith(" ...")

    @pytest.mark.unit
    def test_exactly_at_limit_is_not_truncated(self):
        """A transcript of exactly max_chars should be kept whole"""
        text = "a" * Config.MAX_TRANSCRIPT_CHARS
        result = normalize_transcript([TranscriptSegment(text=text)])

        assert result.truncated is False
        assert result.text == text

    @pytest.mark.unit
    def test_custom_limit(self, make_segments):
        result = normalize_transcript(make_segments("hello", "world"), max_chars=5)
        assert result == NormalizedTranscript(text="hello ...", truncated=True)

    @pytest.mark.unit
    def test_empty_segments(self):
        result = normalize_transcript([])
        assert result.text == ""
        assert result.truncated is False


class TestTranscriptSegment:
    """Tests for TranscriptSegment.from_dict()"""

    @pytest.mark.unit
    def test_builds_from_processor_entry(self):
        segment = TranscriptSegment.from_dict({'text': 'hi there', 'start': 1, 'duration': 2.5})
        assert segment == TranscriptSegment(text='hi there', start=1.0, duration=2.5)

    @pytest.mark.unit
    def test_defaults_missing_fields(self):
        segment = TranscriptSegment.from_dict({})
        assert segment.text == ''
        assert segment.start == 0.0
        assert segment.duration == 0.0
