"""
Article Generation Routes

Endpoints for turning a YouTube video into an article.
"""

import asyncio
import logging
from typing import Iterator, Optional

import requests
from fastapi import APIRouter, Depends

from app.models.article import ErrorResponse, GenerateArticleRequest, GenerateArticleResponse
from app.services.video_article_service import VideoArticleService
from core.config import Settings
from processors.article_generator import ArticleGenerator
from processors.transcript_processor import TranscriptProcessor

logger = logging.getLogger(__name__)

router = APIRouter()


def get_settings() -> Settings:
    """Read settings per request so credential changes apply without a restart"""
    return Settings.from_env()


def get_video_article_service(settings: Settings = Depends(get_settings)) -> Iterator[VideoArticleService]:
    """Build the pipeline for one request and close its HTTP session afterwards"""
    session = requests.Session()
    try:
        yield VideoArticleService(
            transcript_processor=TranscriptProcessor(
                session=session,
                languages=settings.transcript_languages
            ),
            generator=ArticleGenerator(settings)
        )
    finally:
        session.close()


@router.post(
    "/generate",
    response_model=GenerateArticleResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    }
)
async def generate_article(
    payload: Optional[GenerateArticleRequest] = None,
    service: VideoArticleService = Depends(get_video_article_service)
):
    """
    Fetch a video's transcript and generate an article from it

    Args:
        payload: URL plus optional style preset, style detail, length and language
        service: Pipeline used for this request

    Returns:
        Video ID, normalized transcript, truncation flag, article text and generation mode
    """
    payload = payload or GenerateArticleRequest()

    # Transcript fetch and LLM call block, keep them off the event loop
    result = await asyncio.to_thread(
        service.process,
        payload.url,
        payload.style_preset,
        payload.style_detail,
        payload.length,
        payload.language
    )

    return GenerateArticleResponse(**result)


@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}
