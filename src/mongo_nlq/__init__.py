"""mongo-nlq: natural-language questions over a MongoDB database."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mongo_nlq.models import (
    Intent,
    IntentKind,
    QueryResult,
)

if TYPE_CHECKING:
    from mongo_nlq.config import AppConfig


async def ask(question: str, config: AppConfig | None = None) -> QueryResult:
    """One-line convenience: answer a question with the configured model and store.

    Args:
        question: Natural language question about the database.
        config: Optional AppConfig. If None, loads from environment.
    """
    from mongo_nlq.config import load_config
    from mongo_nlq.workflow import QueryWorkflow

    cfg = config or load_config()
    wf = QueryWorkflow.from_config(cfg)
    try:
        return await wf.run(question)
    finally:
        await wf.close()


__all__ = [
    "Intent",
    "IntentKind",
    "QueryResult",
    "ask",
]
