"""Document store abstraction."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class DocumentStore(ABC):
    """Abstract base class for document stores queried by the pipeline.

    Every operation materializes its full result before returning.
    Adapters raise ``StoreError`` subclasses for any backend failure.
    """

    @abstractmethod
    async def list_collections(self) -> list[str]:
        """Names of the collections currently in the store."""
        ...

    @abstractmethod
    async def find(
        self, collection: str, filter: dict[str, Any]
    ) -> list[dict[str, Any]]:
        """Documents of ``collection`` matching ``filter``."""
        ...

    @abstractmethod
    async def aggregate(
        self, collection: str, pipeline: list[dict[str, Any]]
    ) -> list[dict[str, Any]]:
        """Run an aggregation pipeline on ``collection``."""
        ...

    async def close(self) -> None:
        """Release backend resources."""
