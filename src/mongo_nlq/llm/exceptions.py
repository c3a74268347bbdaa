"""LLM provider exceptions."""

from __future__ import annotations

from enum import Enum


class LLMError(Exception):
    """Base exception for LLM provider errors (model unavailable)."""


class LLMAuthError(LLMError):
    """Authentication or authorization failure."""


class LLMRateLimitError(LLMError):
    """Rate limit exceeded."""


class LLMTimeoutError(LLMError):
    """The completion did not return within the configured timeout."""


class LLMResponseError(LLMError):
    """Failed to parse or extract response from LLM output."""


class ParseFailureReason(str, Enum):
    NO_JSON_DELIMITERS = "no_json_delimiters"
    MALFORMED_JSON = "malformed_json"


class JSONExtractionError(LLMResponseError):
    """No JSON object could be extracted from a completion."""

    def __init__(self, reason: ParseFailureReason, message: str) -> None:
        super().__init__(message)
        self.reason = reason
