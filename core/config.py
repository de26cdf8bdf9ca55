"""
Configuration management for the video article backend
"""

import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional


class Config:
    """Centralized configuration constants and environment management"""

    # Transcript limits
    MAX_TRANSCRIPT_CHARS = 12000
    TRUNCATION_MARKER = " ..."

    # Style descriptor limits
    STYLE_LIMIT = 240
    DETAIL_LIMIT = 500
    LANGUAGE_LIMIT = 40

    # Rule-based article shape
    TITLE_MAX_CHARS = 70
    KEY_POINT_COUNT = 5
    KEY_POINT_WINDOW = 3
    SUMMARY_SEGMENT_COUNT = 6

    # LLM settings
    DEFAULT_PROVIDER = "openai"
    OPENAI_MODEL = "gpt-4o-mini"
    ANTHROPIC_MODEL = "claude-sonnet-4-20250514"
    MAX_OUTPUT_TOKENS = 1200
    TEMPERATURE = 0.5

    DEFAULT_TRANSCRIPT_LANGUAGES = "en"
    DEFAULT_PORT = 3000

    @staticmethod
    def get_api_keys() -> Dict[str, Optional[str]]:
        """Get all configured API keys"""
        return {
            'openai': os.getenv('OPENAI_API_KEY'),
            'anthropic': os.getenv('ANTHROPIC_API_KEY'),
        }


def _parse_languages(value: Optional[str]) -> List[str]:
    languages = [item.strip() for item in (value or "").split(",") if item.strip()]
    return languages or [Config.DEFAULT_TRANSCRIPT_LANGUAGES]


@dataclass(frozen=True)
class Settings:
    """Per-request view of the process configuration"""
    provider: str = Config.DEFAULT_PROVIDER
    openai_api_key: Optional[str] = None
    openai_model: str = Config.OPENAI_MODEL
    anthropic_api_key: Optional[str] = None
    anthropic_model: str = Config.ANTHROPIC_MODEL
    max_output_tokens: int = Config.MAX_OUTPUT_TOKENS
    temperature: float = Config.TEMPERATURE
    transcript_languages: List[str] = field(
        default_factory=lambda: [Config.DEFAULT_TRANSCRIPT_LANGUAGES]
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables"""
        keys = Config.get_api_keys()
        return cls(
            provider=(os.getenv('LLM_PROVIDER') or Config.DEFAULT_PROVIDER).strip().lower(),
            openai_api_key=keys['openai'] or None,
            openai_model=os.getenv('OPENAI_MODEL') or Config.OPENAI_MODEL,
            anthropic_api_key=keys['anthropic'] or None,
            anthropic_model=os.getenv('ANTHROPIC_MODEL') or Config.ANTHROPIC_MODEL,
            transcript_languages=_parse_languages(os.getenv('TRANSCRIPT_LANGUAGES')),
        )

    @property
    def api_key(self) -> Optional[str]:
        """Credential for the configured provider"""
        if self.provider == "anthropic":
            return self.anthropic_api_key
        return self.openai_api_key

    @property
    def model(self) -> str:
        if self.provider == "anthropic":
            return self.anthropic_model
        return self.openai_model

    @property
    def has_llm_credentials(self) -> bool:
        return bool(self.api_key)
