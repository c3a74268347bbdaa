"""Intent parser skill: question + collections -> Intent."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from mongo_nlq.llm.base import LLMProvider
from mongo_nlq.llm.exceptions import JSONExtractionError
from mongo_nlq.llm.json_utils import extract_json
from mongo_nlq.models import Intent, RawIntent
from mongo_nlq.prompts.intent_parsing import build_intent_prompt
from mongo_nlq.skills.intent_validator import DEFAULT_COLLECTION, validate_intent

logger = logging.getLogger(__name__)


class IntentParser:
    """Ask the LLM which database operation answers a question.

    Unparseable output falls back to listing the default collection.
    LLMError from the provider is not caught: without a completion there is
    nothing to fall back from.
    """

    def __init__(
        self, llm: LLMProvider, default_collection: str = DEFAULT_COLLECTION
    ) -> None:
        self._llm = llm
        self._default_collection = default_collection

    async def parse(self, question: str, collections: Sequence[str]) -> Intent:
        prompt = build_intent_prompt(question, collections)
        text = await self._llm.complete(prompt)
        logger.debug("Raw LLM response: %s", text)

        raw: RawIntent | None
        try:
            raw = extract_json(text)
        except JSONExtractionError as exc:
            logger.warning(
                "Could not extract intent (%s), using fallback: %s",
                exc.reason.value, exc,
            )
            raw = None

        return validate_intent(raw, collections, self._default_collection)
