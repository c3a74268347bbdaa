"""Core data models for the natural-language query pipeline.

All Pydantic models are defined here as the single source of truth.
Every other module imports from this file.

The model's output is untrusted: the extractor yields a plain ``RawIntent``
dict, and only ``skills.intent_validator`` turns it into a trusted ``Intent``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

RawIntent = dict[str, Any]
Filter = dict[str, Any]
Pipeline = list[dict[str, Any]]


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class IntentKind(str, Enum):
    LIST = "list"
    SEARCH = "search"
    AGGREGATE = "aggregate"


# ---------------------------------------------------------------------------
# Intent
# ---------------------------------------------------------------------------

class Intent(BaseModel):
    """Validated database operation inferred from a question.

    ``collection`` is ``None`` when the store exposes no collection at all.
    On the wire the kind is named ``intent``.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    kind: IntentKind = Field(alias="intent")
    collection: str | None
    query: Any = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# HTTP payloads
# ---------------------------------------------------------------------------

class ChatbotRequest(BaseModel):
    question: str | None = None


class QueryResult(BaseModel):
    question: str
    analysis: Intent
    resultats: list[dict[str, Any]] = []


class ChatRequest(BaseModel):
    message: str | None = None


class ChatReply(BaseModel):
    reply: str


class ErrorBody(BaseModel):
    error: str
    details: str | None = None
