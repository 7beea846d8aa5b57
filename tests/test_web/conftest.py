"""Shared fixtures for web tests."""

import pytest
from fastapi.testclient import TestClient

from careerhub.config import CareerHubConfig, StorageConfig
from careerhub.storage import SqliteStorage, init_db
from careerhub.store import JobStore
from careerhub.web.app import create_app
from careerhub.web.deps import get_llm_client


@pytest.fixture
def web_db(tmp_path):
    """Create a test database and return (engine, db_path)."""
    db_path = str(tmp_path / "test_web.db")
    engine = init_db(db_path)
    yield engine, db_path
    engine.dispose()


@pytest.fixture
def web_app(web_db):
    """Create a test FastAPI app with test DB and no LLM."""
    engine, db_path = web_db

    app = create_app()
    app.state.config = CareerHubConfig(storage=StorageConfig(db_path=db_path))
    app.state.engine = engine
    app.dependency_overrides[get_llm_client] = lambda: None

    return app


@pytest.fixture
def web_store(web_app):
    """A store over the same slot the app uses."""
    config = web_app.state.config
    return JobStore(SqliteStorage(web_app.state.engine), key=config.storage.slot_key)


@pytest.fixture
def client(web_app):
    return TestClient(web_app, raise_server_exceptions=False)
