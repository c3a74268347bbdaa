"""MongoDB document store adapter."""

from __future__ import annotations

import asyncio
import json
import logging
import random
from typing import Any, Awaitable, Callable, TypeVar

from bson import json_util
from bson.errors import BSONError
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import (
    AutoReconnect,
    ConnectionFailure,
    ExecutionTimeout,
    PyMongoError,
)

from mongo_nlq.store.base import DocumentStore
from mongo_nlq.store.exceptions import StoreQueryError, StoreUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _to_jsonable(documents: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Convert BSON values (ObjectId, datetime, Decimal128...) to plain JSON."""
    return json.loads(
        json_util.dumps(documents, json_options=json_util.RELAXED_JSON_OPTIONS)
    )


class MongoStore(DocumentStore):
    """MongoDB adapter built on motor.

    The database is taken from the connection URI path, falling back to
    ``database``. ``timeout_s`` bounds both server selection and each
    operation (``maxTimeMS``). Transient network errors are retried up to
    ``max_retries`` times with exponential backoff; the default is no retry.
    """

    def __init__(
        self,
        uri: str,
        database: str = "DatabaseCommerce",
        timeout_s: float = 10.0,
        max_retries: int = 0,
        client: AsyncIOMotorClient | None = None,
    ) -> None:
        self.timeout_s = timeout_s
        self.max_retries = max_retries
        self._client = client or AsyncIOMotorClient(
            uri, serverSelectionTimeoutMS=int(timeout_s * 1000)
        )
        self._db = self._client.get_default_database(default=database)

    @property
    def _max_time_ms(self) -> int:
        return int(self.timeout_s * 1000)

    async def _run(self, label: str, operation: Callable[[], Awaitable[T]]) -> T:
        last_error: Exception | None = None
        for attempt in range(self.max_retries + 1):
            try:
                return await operation()
            except AutoReconnect as exc:
                last_error = exc
                if attempt < self.max_retries:
                    backoff = min(16, 2**attempt) + random.uniform(0, 1)
                    logger.warning(
                        "%s failed (attempt %d), retrying in %.1fs: %s",
                        label, attempt + 1, backoff, exc,
                    )
                    await asyncio.sleep(backoff)
                    continue
                break
            except (ConnectionFailure, ExecutionTimeout) as exc:
                raise StoreUnavailableError(f"{label} failed: {exc}") from exc
            except (PyMongoError, BSONError, TypeError) as exc:
                # TypeError: the driver rejects non-document stages or filters
                raise StoreQueryError(f"{label} failed: {exc}") from exc

        raise StoreUnavailableError(f"{label} failed: {last_error}") from last_error

    async def list_collections(self) -> list[str]:
        names = await self._run(
            "list_collections", self._db.list_collection_names
        )
        return sorted(n for n in names if not n.startswith("system."))

    async def find(
        self, collection: str, filter: dict[str, Any]
    ) -> list[dict[str, Any]]:
        async def operation() -> list[dict[str, Any]]:
            cursor = self._db[collection].find(filter, max_time_ms=self._max_time_ms)
            return await cursor.to_list(length=None)

        documents = await self._run(f"find on '{collection}'", operation)
        return _to_jsonable(documents)

    async def aggregate(
        self, collection: str, pipeline: list[dict[str, Any]]
    ) -> list[dict[str, Any]]:
        async def operation() -> list[dict[str, Any]]:
            cursor = self._db[collection].aggregate(
                pipeline, maxTimeMS=self._max_time_ms
            )
            return await cursor.to_list(length=None)

        documents = await self._run(f"aggregate on '{collection}'", operation)
        return _to_jsonable(documents)

    async def close(self) -> None:
        self._client.close()
