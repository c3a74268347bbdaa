"""Anthropic Claude LLM provider."""

from __future__ import annotations

from typing import Any

import anthropic

from mongo_nlq.config import LLMConfig
from mongo_nlq.llm.base import LLMProvider
from mongo_nlq.llm.exceptions import LLMAuthError, LLMError, LLMRateLimitError


class ClaudeProvider(LLMProvider):
    """Anthropic Claude API provider."""

    def __init__(self, config: LLMConfig) -> None:
        kwargs: dict[str, Any] = {"api_key": config.api_key}
        if config.base_url:
            kwargs["base_url"] = config.base_url
        self._client = anthropic.AsyncAnthropic(**kwargs)
        self._model = config.model
        self._temperature = config.temperature
        self._max_tokens = config.max_tokens
        self._timeout_s = config.timeout_s

    def _error_map(self, exc: Exception) -> LLMError | None:
        if isinstance(exc, anthropic.AuthenticationError):
            return LLMAuthError(str(exc))
        if isinstance(exc, anthropic.RateLimitError):
            return LLMRateLimitError(str(exc))
        if isinstance(exc, anthropic.APIError):
            return LLMError(str(exc))
        return None

    async def _call(self, prompt: str, system_prompt: str | None) -> str:
        kwargs: dict[str, Any] = {}
        if system_prompt:
            kwargs["system"] = system_prompt
        response = await self._client.messages.create(
            model=self._model,
            messages=[{"role": "user", "content": prompt}],
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            **kwargs,
        )
        return response.content[0].text
