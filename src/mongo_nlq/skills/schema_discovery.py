"""Schema discovery skill: live store -> collection names."""

from __future__ import annotations

import logging

from mongo_nlq.store.base import DocumentStore
from mongo_nlq.store.exceptions import StoreError

logger = logging.getLogger(__name__)


class SchemaDiscovery:
    """List the collections a question may target.

    The catalog is fetched on every call, never cached, since collections
    can appear or disappear between requests.
    """

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    async def list_collections(self) -> list[str]:
        try:
            collections = await self._store.list_collections()
        except StoreError as exc:
            logger.error("Failed to list collections: %s", exc)
            return []
        logger.info("Available collections: %s", collections)
        return collections
