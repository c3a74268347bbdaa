"""Tests for LLM providers (mocked SDKs, no real API calls)."""

from __future__ import annotations

import asyncio
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from mongo_nlq.config import LLMConfig
from mongo_nlq.llm.base import LLMProvider
from mongo_nlq.llm.claude_provider import ClaudeProvider
from mongo_nlq.llm.exceptions import (
    LLMAuthError,
    LLMError,
    LLMRateLimitError,
    LLMTimeoutError,
)
from mongo_nlq.llm.factory import create_provider
from mongo_nlq.llm.gemini_provider import GeminiProvider
from mongo_nlq.llm.openai_provider import OpenAIProvider


def _config(provider: str = "openai", **overrides: Any) -> LLMConfig:
    defaults = {
        "provider": provider,
        "api_key": "test-key",
        "model": "test-model",
        "temperature": 0.0,
        "max_tokens": 1024,
    }
    defaults.update(overrides)
    return LLMConfig(**defaults)


# ---------------------------------------------------------------
# Factory tests
# ---------------------------------------------------------------


class TestFactory:
    def test_creates_openai(self):
        p = create_provider(_config("openai"))
        assert isinstance(p, OpenAIProvider)

    def test_creates_claude(self):
        p = create_provider(_config("claude"))
        assert isinstance(p, ClaudeProvider)

    def test_creates_gemini(self):
        p = create_provider(_config("gemini"))
        assert isinstance(p, GeminiProvider)

    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="expected gemini, openai or claude"):
            create_provider(_config("xxx"))

    def test_missing_api_key(self):
        with pytest.raises(ValueError, match="GEMINI_API_KEY"):
            create_provider(_config("gemini", api_key=""))

    def test_missing_model(self):
        with pytest.raises(ValueError, match="Model name required"):
            create_provider(_config("openai", model=""))


# ---------------------------------------------------------------
# Base class behaviour
# ---------------------------------------------------------------


class SlowProvider(LLMProvider):
    _timeout_s = 0.01

    def _error_map(self, exc: Exception) -> None:
        return None

    async def _call(self, prompt: str, system_prompt: str | None) -> str:
        await asyncio.sleep(1)
        return "too late"


class BrokenProvider(LLMProvider):
    def _error_map(self, exc: Exception) -> None:
        return None

    async def _call(self, prompt: str, system_prompt: str | None) -> str:
        raise RuntimeError("socket closed")


class TestBaseProvider:
    @pytest.mark.asyncio
    async def test_timeout_raises_llm_timeout(self):
        with pytest.raises(LLMTimeoutError):
            await SlowProvider().complete("prompt")

    @pytest.mark.asyncio
    async def test_timeout_is_an_llm_error(self):
        with pytest.raises(LLMError):
            await SlowProvider().complete("prompt")

    @pytest.mark.asyncio
    async def test_unmapped_exception_wrapped(self):
        with pytest.raises(LLMError, match="Unexpected error from BrokenProvider"):
            await BrokenProvider().complete("prompt")


# ---------------------------------------------------------------
# OpenAI provider tests
# ---------------------------------------------------------------


class TestOpenAIProvider:
    @pytest.fixture()
    def provider(self):
        return OpenAIProvider(_config("openai"))

    @pytest.mark.asyncio
    async def test_complete(self, provider):
        mock_response = MagicMock()
        mock_response.choices = [MagicMock()]
        mock_response.choices[0].message.content = "Hello world"

        provider._client.chat.completions.create = AsyncMock(
            return_value=mock_response
        )
        result = await provider.complete("prompt")
        assert result == "Hello world"

        call_kwargs = provider._client.chat.completions.create.call_args.kwargs
        assert call_kwargs["messages"] == [{"role": "user", "content": "prompt"}]

    @pytest.mark.asyncio
    async def test_complete_with_system_prompt(self, provider):
        mock_response = MagicMock()
        mock_response.choices = [MagicMock()]
        mock_response.choices[0].message.content = "ok"

        provider._client.chat.completions.create = AsyncMock(
            return_value=mock_response
        )
        await provider.complete("prompt", system_prompt="system")

        call_kwargs = provider._client.chat.completions.create.call_args.kwargs
        assert call_kwargs["messages"][0] == {"role": "system", "content": "system"}

    @pytest.mark.asyncio
    async def test_none_content_is_empty_string(self, provider):
        mock_response = MagicMock()
        mock_response.choices = [MagicMock()]
        mock_response.choices[0].message.content = None

        provider._client.chat.completions.create = AsyncMock(
            return_value=mock_response
        )
        assert await provider.complete("prompt") == ""

    @pytest.mark.asyncio
    async def test_auth_error(self, provider):
        import openai

        provider._client.chat.completions.create = AsyncMock(
            side_effect=openai.AuthenticationError(
                message="bad key",
                response=MagicMock(status_code=401),
                body=None,
            )
        )
        with pytest.raises(LLMAuthError):
            await provider.complete("prompt")

    @pytest.mark.asyncio
    async def test_rate_limit_error(self, provider):
        import openai

        provider._client.chat.completions.create = AsyncMock(
            side_effect=openai.RateLimitError(
                message="rate limited",
                response=MagicMock(status_code=429),
                body=None,
            )
        )
        with pytest.raises(LLMRateLimitError):
            await provider.complete("prompt")


# ---------------------------------------------------------------
# Claude provider tests
# ---------------------------------------------------------------


class TestClaudeProvider:
    @pytest.fixture()
    def provider(self):
        return ClaudeProvider(_config("claude"))

    @pytest.mark.asyncio
    async def test_complete(self, provider):
        mock_response = MagicMock()
        mock_response.content = [MagicMock(text="Hello from Claude")]

        provider._client.messages.create = AsyncMock(
            return_value=mock_response
        )
        result = await provider.complete("user msg")
        assert result == "Hello from Claude"

        call_kwargs = provider._client.messages.create.call_args.kwargs
        assert "system" not in call_kwargs
        assert call_kwargs["messages"] == [{"role": "user", "content": "user msg"}]

    @pytest.mark.asyncio
    async def test_system_prompt_passed_separately(self, provider):
        mock_response = MagicMock()
        mock_response.content = [MagicMock(text="ok")]

        provider._client.messages.create = AsyncMock(
            return_value=mock_response
        )
        await provider.complete("user msg", system_prompt="system prompt")

        call_kwargs = provider._client.messages.create.call_args.kwargs
        assert call_kwargs["system"] == "system prompt"

    @pytest.mark.asyncio
    async def test_auth_error(self, provider):
        import anthropic

        provider._client.messages.create = AsyncMock(
            side_effect=anthropic.AuthenticationError(
                message="bad key",
                response=MagicMock(status_code=401),
                body=None,
            )
        )
        with pytest.raises(LLMAuthError):
            await provider.complete("prompt")


# ---------------------------------------------------------------
# Gemini provider tests
# ---------------------------------------------------------------


class TestGeminiProvider:
    @pytest.fixture()
    def provider(self):
        return GeminiProvider(_config("gemini"))

    @pytest.mark.asyncio
    async def test_complete(self, provider):
        mock_response = MagicMock()
        mock_response.text = "Hello from Gemini"

        provider._client.aio.models.generate_content = AsyncMock(
            return_value=mock_response
        )
        result = await provider.complete("user msg")
        assert result == "Hello from Gemini"

        call_kwargs = provider._client.aio.models.generate_content.call_args.kwargs
        assert call_kwargs["contents"] == "user msg"
        assert call_kwargs["model"] == "test-model"

    @pytest.mark.asyncio
    async def test_empty_text(self, provider):
        mock_response = MagicMock()
        mock_response.text = None

        provider._client.aio.models.generate_content = AsyncMock(
            return_value=mock_response
        )
        assert await provider.complete("user msg") == ""

    @pytest.mark.asyncio
    async def test_auth_error(self, provider):
        from google.genai import errors as genai_errors

        provider._client.aio.models.generate_content = AsyncMock(
            side_effect=genai_errors.ClientError(401, {"error": {"message": "unauthorized"}})
        )
        with pytest.raises(LLMAuthError):
            await provider.complete("prompt")

    @pytest.mark.asyncio
    async def test_rate_limit_error(self, provider):
        from google.genai import errors as genai_errors

        provider._client.aio.models.generate_content = AsyncMock(
            side_effect=genai_errors.ClientError(429, {"error": {"message": "rate limited"}})
        )
        with pytest.raises(LLMRateLimitError):
            await provider.complete("prompt")

    @pytest.mark.asyncio
    async def test_server_error(self, provider):
        from google.genai import errors as genai_errors

        provider._client.aio.models.generate_content = AsyncMock(
            side_effect=genai_errors.ServerError(503, {"error": {"message": "unavailable"}})
        )
        with pytest.raises(LLMError):
            await provider.complete("prompt")
