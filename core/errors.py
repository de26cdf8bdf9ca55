"""
Error types raised while turning a video into an article.

Each error carries the HTTP status the API answers with and a message
that is safe to show to the caller.
"""

from typing import Optional


class ArticleServiceError(RuntimeError):
    """Base error for the video article pipeline"""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidUrlError(ArticleServiceError):
    """Missing URL or a URL without a recognizable video id"""

    status_code = 400
    default_message = "Please provide a YouTube URL."


class TranscriptFetchError(ArticleServiceError):
    """Transcript service failed or the video has no captions"""

    status_code = 502
    default_message = "Failed to fetch the transcript. Check if captions are available."


class TranscriptNotFoundError(ArticleServiceError):
    """Transcript was fetched but contains no segments"""

    status_code = 404
    default_message = "No transcript found for this video."


class GenerationError(ArticleServiceError):
    """External language model failed or returned nothing"""

    default_message = "Language model generation failed."


class ArticleGenerationError(ArticleServiceError):
    """Article could not be produced at all"""

    default_message = "Failed to generate article."
