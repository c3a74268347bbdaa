"""OpenAI LLM provider (also supports OpenAI-compatible APIs)."""

from __future__ import annotations

import openai

from mongo_nlq.config import LLMConfig
from mongo_nlq.llm.base import LLMProvider
from mongo_nlq.llm.exceptions import LLMAuthError, LLMError, LLMRateLimitError


class OpenAIProvider(LLMProvider):
    """OpenAI API provider. Also works with OpenAI-compatible endpoints."""

    def __init__(self, config: LLMConfig) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=config.api_key,
            base_url=config.base_url,
        )
        self._model = config.model
        self._temperature = config.temperature
        self._max_tokens = config.max_tokens
        self._timeout_s = config.timeout_s

    def _error_map(self, exc: Exception) -> LLMError | None:
        if isinstance(exc, openai.AuthenticationError):
            return LLMAuthError(str(exc))
        if isinstance(exc, openai.RateLimitError):
            return LLMRateLimitError(str(exc))
        if isinstance(exc, openai.APIError):
            return LLMError(str(exc))
        return None

    async def _call(self, prompt: str, system_prompt: str | None) -> str:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=messages,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        return response.choices[0].message.content or ""
