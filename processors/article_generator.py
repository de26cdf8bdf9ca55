"""
Article Generator

Decides how an article is produced: external language model when a
credential is configured, rule-based writer otherwise or on any failure.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from core.config import Settings
from core.llm_client import LLMClient
from core.prompts import ArticlePrompt, build_style_descriptor, length_spec_from_choice
from core.text_utils import TranscriptSegment
from processors.rule_based_writer import build_rule_based_article


class GenerationMode(str, Enum):
    """Which path produced the article"""
    EXTERNAL = "external"
    FALLBACK = "fallback"


@dataclass
class GenerationRequest:
    """Everything needed to write one article"""
    transcript: str
    segments: List[TranscriptSegment] = field(default_factory=list)
    style_preset: Any = None
    style_detail: Any = None
    length: Any = None
    language: Any = None
    truncated: bool = False


@dataclass(frozen=True)
class GenerationResult:
    text: str
    mode: GenerationMode


class ArticleGenerator:
    """Chooses between external-model and rule-based article generation"""

    def __init__(self, settings: Settings, llm_client: Optional[LLMClient] = None):
        self.settings = settings
        self._llm_client = llm_client
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def llm_client(self) -> LLMClient:
        if self._llm_client is None:
            self._llm_client = LLMClient(self.settings)
        return self._llm_client

    def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        Produce an article for the request

        External model failures are logged and never raised; the rule-based
        writer takes over instead.
        """
        style_descriptor = build_style_descriptor(
            request.style_preset,
            request.style_detail,
            request.language
        )
        length_spec = length_spec_from_choice(request.length)

        if self.settings.has_llm_credentials:
            try:
                text = self.llm_client.generate(
                    ArticlePrompt.SYSTEM_PROMPT,
                    ArticlePrompt.build(
                        request.transcript,
                        style_descriptor,
                        length_spec,
                        request.truncated
                    )
                )
                if text:
                    return GenerationResult(text=text, mode=GenerationMode.EXTERNAL)
            except Exception as e:
                self.logger.error(f"❌ {self.settings.provider} generation failed, using fallback: {e}")

        self.logger.info("📝 Writing rule-based article")
        return GenerationResult(
            text=build_rule_based_article(
                request.segments,
                style_descriptor,
                length_spec,
                request.truncated
            ),
            mode=GenerationMode.FALLBACK
        )
