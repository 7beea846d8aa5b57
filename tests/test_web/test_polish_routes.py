"""Tests for the description polishing route."""

from unittest.mock import MagicMock

from careerhub.web.deps import get_llm_client


class TestPolishRoute:
    def test_without_llm_returns_original(self, client):
        resp = client.post("/polish", json={"title": "Designer", "description": "Draw things."})
        assert resp.status_code == 200
        assert resp.json() == {"description": "Draw things."}

    def test_with_llm(self, client, web_app):
        llm = MagicMock()
        llm.invoke.return_value = "Shape how our colleagues work every day."
        web_app.dependency_overrides[get_llm_client] = lambda: llm

        resp = client.post("/polish", json={"title": "Designer", "description": "Draw things."})
        assert resp.json()["description"] == "Shape how our colleagues work every day."

    def test_llm_failure_returns_original(self, client, web_app):
        llm = MagicMock()
        llm.invoke.side_effect = ConnectionError("offline")
        web_app.dependency_overrides[get_llm_client] = lambda: llm

        resp = client.post("/polish", json={"title": "Designer", "description": "Draw things."})
        assert resp.status_code == 200
        assert resp.json()["description"] == "Draw things."

    def test_polish_does_not_touch_store(self, client, web_store):
        before = web_store.list()
        client.post("/polish", json={"title": "Designer", "description": "Draw things."})
        assert web_store.list() == before
