"""LLM provider factory."""

from __future__ import annotations

from mongo_nlq.config import LLMConfig
from mongo_nlq.llm.base import LLMProvider


def create_provider(config: LLMConfig) -> LLMProvider:
    """Create the completion provider named by ``config.provider``.

    There is no offline fallback for intent parsing, so a missing key or
    model is a startup error rather than something to recover from.
    """
    if not config.api_key:
        raise ValueError(
            f"API key required for provider '{config.provider}' "
            f"(set {config.provider.upper()}_API_KEY)"
        )
    if not config.model:
        raise ValueError(
            f"Model name required for provider '{config.provider}' (set LLM_MODEL)"
        )

    match config.provider:
        case "gemini":
            from mongo_nlq.llm.gemini_provider import GeminiProvider

            return GeminiProvider(config)
        case "openai":
            from mongo_nlq.llm.openai_provider import OpenAIProvider

            return OpenAIProvider(config)
        case "claude":
            from mongo_nlq.llm.claude_provider import ClaudeProvider

            return ClaudeProvider(config)
        case _:
            raise ValueError(
                f"Unknown LLM provider: {config.provider} "
                "(expected gemini, openai or claude)"
            )
