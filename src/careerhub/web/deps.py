"""FastAPI dependency injection for the CareerHub web API."""

import logging

from fastapi import Request

from careerhub.config import CareerHubConfig
from careerhub.storage import SqliteStorage
from careerhub.store import JobStore

logger = logging.getLogger(__name__)


def get_config(request: Request) -> CareerHubConfig:
    """Get configuration from app state."""
    return request.app.state.config


def get_store(request: Request) -> JobStore:
    """Build a job store over the app's storage database."""
    config = get_config(request)
    return JobStore(SqliteStorage(request.app.state.engine), key=config.storage.slot_key)


def get_llm_client(request: Request):
    """Get LLM client if available, or None."""
    config = get_config(request)
    if not config.llm.enabled:
        return None
    from careerhub.llm import get_llm_client as _get_llm_client

    client = _get_llm_client(config.llm)
    if client.available:
        return client
    logger.debug("LLM provider '%s' not available", config.llm.provider)
    return None
