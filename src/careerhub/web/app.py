"""FastAPI application factory for the CareerHub web API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from careerhub.config import load_config
from careerhub.errors import JobNotFoundError, StorageError
from careerhub.storage import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load config and open the storage database."""
    config = load_config()
    app.state.config = config
    app.state.engine = init_db(config.storage.db_path)
    yield
    app.state.engine.dispose()


async def _not_found(request: Request, exc: JobNotFoundError):
    return JSONResponse({"detail": str(exc)}, status_code=404)


async def _invalid_fields(request: Request, exc: ValidationError):
    return JSONResponse({"detail": str(exc)}, status_code=422)


async def _storage_failure(request: Request, exc: StorageError):
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse({"detail": str(exc)}, status_code=500)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="CareerHub", lifespan=lifespan)

    app.add_exception_handler(JobNotFoundError, _not_found)
    app.add_exception_handler(ValidationError, _invalid_fields)
    app.add_exception_handler(StorageError, _storage_failure)

    from careerhub.web.routes import router

    app.include_router(router)

    return app
