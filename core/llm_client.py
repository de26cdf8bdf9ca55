#!/usr/bin/env python3
"""
LLM Client
Handles all interactions with the external language model
"""

import logging
from typing import Optional

import anthropic
from openai import OpenAI

from core.config import Settings
from core.errors import GenerationError


class LLMClient:
    """Client for the configured language model provider (OpenAI or Anthropic)"""

    def __init__(self, settings: Settings, logger: Optional[logging.Logger] = None):
        """
        Initialize LLM client

        Args:
            settings: Provider, credentials and generation parameters
            logger: Logger instance
        """
        self.settings = settings
        self.logger = logger or logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def generate(self, system_prompt: str, user_prompt: str) -> str:
        """
        Send a system instruction and user message, return the generated text

        Raises:
            GenerationError: If no credential is configured or the model returns nothing
        """
        if not self.settings.api_key:
            raise GenerationError(f"No API key configured for provider '{self.settings.provider}'")

        self.logger.info(
            f"   🤖 [LLM API] Sending prompt to {self.settings.provider}/{self.settings.model} "
            f"({len(user_prompt)} chars)"
        )

        if self.settings.provider == "anthropic":
            response = self._call_anthropic(system_prompt, user_prompt)
        else:
            response = self._call_openai(system_prompt, user_prompt)

        if not response:
            self.logger.warning("   ⚠️ LLM API returned empty response")
            raise GenerationError("LLM API returned empty response")

        self.logger.info(f"   ✅ [LLM API] Received {len(response)} chars")
        return response

    def _call_openai(self, system_prompt: str, user_prompt: str) -> str:
        client = OpenAI(api_key=self.settings.openai_api_key)
        response = client.responses.create(
            model=self.settings.openai_model,
            input=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            max_output_tokens=self.settings.max_output_tokens,
            temperature=self.settings.temperature,
        )
        return (response.output_text or "").strip()

    def _call_anthropic(self, system_prompt: str, user_prompt: str) -> str:
        client = anthropic.Anthropic(api_key=self.settings.anthropic_api_key)
        message = client.messages.create(
            model=self.settings.anthropic_model,
            max_tokens=self.settings.max_output_tokens,
            temperature=self.settings.temperature,
            system=system_prompt,
            messages=[{
                "role": "user",
                "content": user_prompt
            }]
        )
        text = "".join(
            getattr(block, "text", "") for block in message.content
            if getattr(block, "type", "text") == "text"
        )
        return text.strip()
