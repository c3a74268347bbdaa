"""HTTP server exposing the question pipeline.

Routes:
    POST /api/chatbot  {question} -> {question, analysis, resultats}
    POST /api/chat     {message}  -> {reply}

Run with ``mongo-nlq-server`` (or ``python -m mongo_nlq.server``).
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mongo_nlq.config import AppConfig, load_config
from mongo_nlq.llm.base import LLMProvider
from mongo_nlq.llm.exceptions import LLMError
from mongo_nlq.models import (
    ChatbotRequest,
    ChatReply,
    ChatRequest,
    ErrorBody,
    QueryResult,
)
from mongo_nlq.skills.query_dispatcher import UnsupportedQueryShapeError
from mongo_nlq.store.base import DocumentStore
from mongo_nlq.store.exceptions import StoreError
from mongo_nlq.workflow import QueryWorkflow

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _error(
    status_code: int, error: str, details: str | None = None
) -> JSONResponse:
    body = ErrorBody(error=error, details=details)
    return JSONResponse(
        status_code=status_code, content=body.model_dump(exclude_none=True)
    )


def get_workflow(request: Request) -> QueryWorkflow:
    return request.app.state.workflow


def get_llm(request: Request) -> LLMProvider:
    return request.app.state.llm


@router.post("/chatbot", response_model=QueryResult)
async def chatbot(
    payload: ChatbotRequest,
    workflow: QueryWorkflow = Depends(get_workflow),
):
    if not payload.question:
        return _error(status.HTTP_400_BAD_REQUEST, "The 'question' field is required")

    try:
        return await workflow.run(payload.question)
    except (LLMError, StoreError, UnsupportedQueryShapeError) as exc:
        logger.error("Failed to process question %r: %s", payload.question, exc)
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to process the question",
            str(exc),
        )


@router.post("/chat", response_model=ChatReply)
async def chat(
    payload: ChatRequest,
    llm: LLMProvider = Depends(get_llm),
):
    if not payload.message:
        return _error(status.HTTP_400_BAD_REQUEST, "The 'message' field is required")

    try:
        reply = await llm.complete(payload.message)
    except LLMError as exc:
        logger.error("Chat completion failed: %s", exc)
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Chatbot error", str(exc)
        )
    return ChatReply(reply=reply)


async def _invalid_body_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, "Invalid request body")


def create_app(
    llm: LLMProvider,
    store: DocumentStore,
    config: AppConfig | None = None,
) -> FastAPI:
    """Create the FastAPI application around an LLM provider and a store.

    The store is closed when the application shuts down.
    """
    config = config or AppConfig()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await store.close()

    app = FastAPI(title="mongo-nlq", lifespan=lifespan)
    app.state.llm = llm
    app.state.workflow = QueryWorkflow.from_config(config, llm=llm, store=store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _invalid_body_handler)
    app.include_router(router)
    return app


def main() -> None:
    import uvicorn

    from mongo_nlq.llm import create_provider
    from mongo_nlq.store.factory import create_store

    config = load_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        llm = create_provider(config.llm)
    except ValueError as exc:
        logger.error("Invalid LLM configuration: %s", exc)
        sys.exit(1)

    app = create_app(llm, create_store(config.store), config)
    logger.info("Listening on %s:%d", config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
