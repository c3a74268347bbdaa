"""Configuration loading for mongo-nlq."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

DEFAULT_MONGODB_URI = "mongodb://127.0.0.1:27017/DatabaseCommerce"


class LLMConfig(BaseModel):
    provider: str = "gemini"
    model: str = "gemini-2.0-flash"
    api_key: str = ""
    base_url: str | None = None
    temperature: float = 0.7
    max_tokens: int = 2048
    timeout_s: float = 30.0


class StoreConfig(BaseModel):
    uri: str = DEFAULT_MONGODB_URI
    database: str = "DatabaseCommerce"
    timeout_s: float = 10.0
    max_retries: int = 0


class AppConfig(BaseModel):
    llm: LLMConfig = LLMConfig()
    store: StoreConfig = StoreConfig()
    default_collection: str = "articles"
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"


def load_config(env_path: str | Path | None = None) -> AppConfig:
    """Load configuration from environment variables (.env file)."""
    if env_path:
        load_dotenv(env_path)
    else:
        load_dotenv()

    provider = os.getenv("LLM_PROVIDER", "gemini")
    llm = LLMConfig(
        provider=provider,
        model=os.getenv("LLM_MODEL", "gemini-2.0-flash"),
        api_key=os.getenv(f"{provider.upper()}_API_KEY", ""),
        base_url=os.getenv("LLM_BASE_URL") or None,
        temperature=float(os.getenv("LLM_TEMPERATURE", "0.7")),
        max_tokens=int(os.getenv("LLM_MAX_TOKENS", "2048")),
        timeout_s=float(os.getenv("LLM_TIMEOUT_S", "30")),
    )

    store = StoreConfig(
        uri=(
            os.getenv("DATABASECLOUD")
            or os.getenv("MONGODB_URI")
            or DEFAULT_MONGODB_URI
        ),
        database=os.getenv("MONGODB_DATABASE", "DatabaseCommerce"),
        timeout_s=float(os.getenv("MONGODB_TIMEOUT_S", "10")),
        max_retries=int(os.getenv("MONGODB_MAX_RETRIES", "0")),
    )

    return AppConfig(
        llm=llm,
        store=store,
        default_collection=os.getenv("DEFAULT_COLLECTION", "articles"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3001")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
