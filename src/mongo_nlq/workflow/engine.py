"""Question-answering workflow orchestrator."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from mongo_nlq.config import AppConfig
from mongo_nlq.llm.base import LLMProvider
from mongo_nlq.models import QueryResult
from mongo_nlq.skills.intent_parser import IntentParser
from mongo_nlq.skills.query_dispatcher import QueryDispatcher
from mongo_nlq.skills.schema_discovery import SchemaDiscovery
from mongo_nlq.store.base import DocumentStore

logger = logging.getLogger(__name__)

ProgressReporter = Callable[[str, dict[str, Any]], None]


class QueryWorkflow:
    """Answer a natural-language question from the document store.

    Coordinates all skills in sequence, once per question:
    schema_discovery -> intent_parser -> query_dispatcher

    Parse and validation failures are absorbed by the intent parser.
    LLMError, StoreError and UnsupportedQueryShapeError propagate.
    """

    def __init__(
        self,
        schema_discovery: SchemaDiscovery,
        intent_parser: IntentParser,
        query_dispatcher: QueryDispatcher,
        progress_reporter: ProgressReporter | None = None,
        owned_store: DocumentStore | None = None,
    ) -> None:
        self._schema_discovery = schema_discovery
        self._intent_parser = intent_parser
        self._query_dispatcher = query_dispatcher
        self._progress_reporter = progress_reporter
        self._owned_store = owned_store

    def _report_progress(self, phase: str, **details: Any) -> None:
        if not self._progress_reporter:
            return
        try:
            self._progress_reporter(phase, details)
        except Exception:
            logger.exception("Progress reporter failed")

    async def run(self, question: str) -> QueryResult:
        logger.info("Question received: %s", question)

        self._report_progress("schema_discovery")
        t0 = time.perf_counter()
        collections = await self._schema_discovery.list_collections()
        logger.info("Schema discovery completed in %.2fs", time.perf_counter() - t0)

        self._report_progress("intent_parsing", collections=collections)
        t0 = time.perf_counter()
        intent = await self._intent_parser.parse(question, collections)
        logger.info(
            "Intent parsing completed in %.2fs: %s on %r",
            time.perf_counter() - t0, intent.kind.value, intent.collection,
        )

        self._report_progress(
            "dispatching", kind=intent.kind.value, collection=intent.collection
        )
        t0 = time.perf_counter()
        documents = await self._query_dispatcher.execute(intent)
        logger.info(
            "Dispatch completed in %.2fs (%d documents)",
            time.perf_counter() - t0, len(documents),
        )

        return QueryResult(question=question, analysis=intent, resultats=documents)

    async def close(self) -> None:
        """Close the store if this workflow created it."""
        if self._owned_store is not None:
            await self._owned_store.close()
            self._owned_store = None

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        llm: LLMProvider | None = None,
        store: DocumentStore | None = None,
        progress_reporter: ProgressReporter | None = None,
    ) -> QueryWorkflow:
        from mongo_nlq.llm import create_provider
        from mongo_nlq.store.factory import create_store

        llm = llm or create_provider(config.llm)
        owned_store = None
        if store is None:
            store = owned_store = create_store(config.store)

        return cls(
            schema_discovery=SchemaDiscovery(store),
            intent_parser=IntentParser(
                llm, default_collection=config.default_collection
            ),
            query_dispatcher=QueryDispatcher(store),
            progress_reporter=progress_reporter,
            owned_store=owned_store,
        )
