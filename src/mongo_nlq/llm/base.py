"""LLM provider abstraction base class."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod

from mongo_nlq.llm.exceptions import LLMError, LLMTimeoutError


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    Subclasses implement _call for SDK-specific logic.
    Error handling and the timeout are centralized in complete via _error_map.
    There is no retry at this layer.
    """

    _timeout_s: float | None = None

    @abstractmethod
    async def _call(self, prompt: str, system_prompt: str | None) -> str:
        """Provider-specific text completion (no error wrapping)."""
        ...

    @abstractmethod
    def _error_map(self, exc: Exception) -> LLMError | None:
        """Map a provider SDK exception to our hierarchy.

        Return None if the exception is not from this provider's SDK.
        """
        ...

    @property
    def _provider_label(self) -> str:
        return self.__class__.__name__

    async def complete(self, prompt: str, system_prompt: str | None = None) -> str:
        """Return a text completion with unified error handling."""
        try:
            return await asyncio.wait_for(
                self._call(prompt, system_prompt), timeout=self._timeout_s
            )
        except LLMError:
            raise
        except TimeoutError as exc:
            raise LLMTimeoutError(
                f"{self._provider_label} did not answer within {self._timeout_s}s"
            ) from exc
        except Exception as exc:
            mapped = self._error_map(exc)
            if mapped is not None:
                raise mapped from exc
            raise LLMError(
                f"Unexpected error from {self._provider_label}: {exc}"
            ) from exc
