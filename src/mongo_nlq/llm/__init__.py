"""LLM provider abstraction layer."""

from mongo_nlq.llm.exceptions import (
    JSONExtractionError,
    LLMAuthError,
    LLMError,
    LLMRateLimitError,
    LLMResponseError,
    LLMTimeoutError,
    ParseFailureReason,
)
from mongo_nlq.llm.factory import create_provider

__all__ = [
    "create_provider",
    "LLMError",
    "LLMAuthError",
    "LLMRateLimitError",
    "LLMTimeoutError",
    "LLMResponseError",
    "JSONExtractionError",
    "ParseFailureReason",
]
