"""Document store factory."""

from __future__ import annotations

from mongo_nlq.config import StoreConfig
from mongo_nlq.store.base import DocumentStore


def create_store(config: StoreConfig) -> DocumentStore:
    """Create a document store adapter from configuration."""
    if not config.uri:
        raise ValueError("Store connection URI required")

    from mongo_nlq.store.mongo_store import MongoStore

    return MongoStore(
        uri=config.uri,
        database=config.database,
        timeout_s=config.timeout_s,
        max_retries=config.max_retries,
    )
