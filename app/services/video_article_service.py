"""
Video Article Service

Runs one request end to end: URL -> video ID -> transcript -> article.
"""

import logging
from typing import Any, Dict

from core.errors import (
    ArticleGenerationError,
    InvalidUrlError,
    TranscriptFetchError,
    TranscriptNotFoundError,
)
from core.text_utils import TranscriptSegment, normalize_transcript
from core.url_utils import extract_video_id
from processors.article_generator import ArticleGenerator, GenerationRequest
from processors.transcript_processor import TranscriptProcessor


class VideoArticleService:
    """Orchestrates transcript fetching and article generation"""

    def __init__(self, transcript_processor: TranscriptProcessor, generator: ArticleGenerator):
        self.transcript_processor = transcript_processor
        self.generator = generator
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def process(
        self,
        url: Any,
        style_preset: Any = None,
        style_detail: Any = None,
        length: Any = None,
        language: Any = None
    ) -> Dict:
        """
        Turn a YouTube URL into an article

        Returns:
            Dictionary with video_id, transcript, truncated, article and mode

        Raises:
            InvalidUrlError: URL missing or without a video ID
            TranscriptFetchError: Transcript could not be fetched
            TranscriptNotFoundError: Transcript is empty
            ArticleGenerationError: Article could not be produced
        """
        if not url or not isinstance(url, str) or not url.strip():
            raise InvalidUrlError("Please provide a YouTube URL.")

        video_id = extract_video_id(url)
        if not video_id:
            raise InvalidUrlError("Unable to parse the YouTube video ID.")

        self.logger.info(f"🎬 Generating article for video: {video_id}")

        result = self.transcript_processor.get_youtube_transcript(video_id)
        if not result.get('success'):
            self.logger.error(f"❌ Transcript fetch failed for {video_id}: {result.get('error')}")
            raise TranscriptFetchError()

        segments = [TranscriptSegment.from_dict(entry) for entry in result.get('transcript') or []]
        if not segments:
            raise TranscriptNotFoundError()

        normalized = normalize_transcript(segments)
        if normalized.truncated:
            self.logger.info(f"✂️ Transcript truncated to {len(normalized.text)} chars")

        try:
            generated = self.generator.generate(GenerationRequest(
                transcript=normalized.text,
                segments=segments,
                style_preset=style_preset,
                style_detail=style_detail,
                length=length,
                language=language,
                truncated=normalized.truncated,
            ))
        except Exception as e:
            self.logger.error(f"❌ Article generation failed: {e}", exc_info=True)
            raise ArticleGenerationError() from e

        self.logger.info(f"✅ Article ready for {video_id} (mode: {generated.mode.value})")

        return {
            'video_id': video_id,
            'transcript': normalized.text,
            'truncated': normalized.truncated,
            'article': generated.text,
            'mode': generated.mode.value,
        }
