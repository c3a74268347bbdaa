"""Query dispatcher skill: Intent -> documents."""

from __future__ import annotations

import logging
from typing import Any

from mongo_nlq.models import Intent, IntentKind
from mongo_nlq.store.base import DocumentStore

logger = logging.getLogger(__name__)


class UnsupportedQueryShapeError(ValueError):
    """The intent's query cannot be executed for its kind."""


class QueryDispatcher:
    """Run a validated Intent against the store.

    ``aggregate`` with a list of stage objects runs a pipeline;
    ``list``/``search`` with a mapping runs a find. Any other combination
    raises UnsupportedQueryShapeError. Store errors propagate.
    """

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    async def execute(self, intent: Intent) -> list[dict[str, Any]]:
        if intent.collection is None:
            logger.warning("No collection available, returning no documents")
            return []

        if (
            intent.kind == IntentKind.AGGREGATE
            and isinstance(intent.query, list)
            and all(isinstance(stage, dict) for stage in intent.query)
        ):
            return await self._store.aggregate(intent.collection, intent.query)
        if intent.kind in (IntentKind.LIST, IntentKind.SEARCH):
            # null matches everything, as an empty filter does
            filter = {} if intent.query is None else intent.query
            if isinstance(filter, dict):
                return await self._store.find(intent.collection, filter)

        raise UnsupportedQueryShapeError(
            f"Unsupported query type: intent={intent.kind.value}, "
            f"query={type(intent.query).__name__}"
        )
