"""Google Gemini LLM provider."""

from __future__ import annotations

from typing import Any

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from mongo_nlq.config import LLMConfig
from mongo_nlq.llm.base import LLMProvider
from mongo_nlq.llm.exceptions import LLMAuthError, LLMError, LLMRateLimitError


class GeminiProvider(LLMProvider):
    """Google Gemini API provider."""

    def __init__(self, config: LLMConfig) -> None:
        kwargs: dict[str, Any] = {"api_key": config.api_key}
        if config.base_url:
            kwargs["http_options"] = types.HttpOptions(base_url=config.base_url)
        self._client = genai.Client(**kwargs)
        self._model = config.model
        self._temperature = config.temperature
        self._max_tokens = config.max_tokens
        self._timeout_s = config.timeout_s

    def _error_map(self, exc: Exception) -> LLMError | None:
        if isinstance(exc, genai_errors.ClientError):
            if exc.code in (401, 403):
                return LLMAuthError(str(exc))
            if exc.code == 429:
                return LLMRateLimitError(str(exc))
            return LLMError(str(exc))
        if isinstance(exc, genai_errors.APIError):
            return LLMError(str(exc))
        return None

    async def _call(self, prompt: str, system_prompt: str | None) -> str:
        response = await self._client.aio.models.generate_content(
            model=self._model,
            contents=prompt,
            config=types.GenerateContentConfig(
                system_instruction=system_prompt or None,
                temperature=self._temperature,
                max_output_tokens=self._max_tokens,
            ),
        )
        return response.text or ""
