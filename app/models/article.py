"""
Pydantic models for article generation API requests and responses
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class GenerateArticleRequest(BaseModel):
    """Request model for POST /api/generate"""
    model_config = ConfigDict(populate_by_name=True)

    # Loosely typed so that bad input reaches the service's own validation
    url: Optional[Any] = None
    style_preset: Optional[Any] = Field(default=None, alias="stylePreset")
    style_detail: Optional[Any] = Field(default=None, alias="styleDetail")
    length: Optional[Any] = None
    language: Optional[Any] = None


class GenerateArticleResponse(BaseModel):
    """Response model for POST /api/generate"""
    model_config = ConfigDict(populate_by_name=True)

    video_id: str = Field(alias="videoId")
    transcript: str
    truncated: bool
    article: str
    mode: str


class ErrorResponse(BaseModel):
    error: str
