"""Utilities for extracting JSON from LLM response text."""

from __future__ import annotations

import json
from typing import Any

from mongo_nlq.llm.exceptions import JSONExtractionError, ParseFailureReason


def extract_json(text: str) -> dict[str, Any]:
    """Extract a JSON object from LLM response text.

    Takes the span from the first ``{`` to the last ``}`` (inclusive) and
    parses it. Prose or code fences around a single outermost object are
    tolerated; nothing smarter is attempted, so text whose outermost braces
    do not enclose exactly one JSON value is reported as malformed.

    Raises ``JSONExtractionError`` with ``NO_JSON_DELIMITERS`` when either
    brace is missing, and ``MALFORMED_JSON`` when the span does not parse
    to an object.
    """
    text = text or ""
    first_brace = text.find("{")
    last_brace = text.rfind("}")
    if first_brace == -1 or last_brace == -1:
        raise JSONExtractionError(
            ParseFailureReason.NO_JSON_DELIMITERS,
            "No JSON detected in LLM response",
        )

    try:
        result = json.loads(text[first_brace : last_brace + 1])
    except (json.JSONDecodeError, ValueError) as exc:
        raise JSONExtractionError(
            ParseFailureReason.MALFORMED_JSON,
            f"Malformed JSON in LLM response: {exc}",
        ) from exc

    if not isinstance(result, dict):
        raise JSONExtractionError(
            ParseFailureReason.MALFORMED_JSON,
            f"Expected a JSON object, got {type(result).__name__}",
        )
    return result
