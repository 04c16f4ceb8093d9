"""
Integration tests for LEGACY_INTEGER_CODES mode.

The code pattern is read from the environment at import time, so the API
modules are reloaded with the flag set and reloaded again afterwards.
"""

import importlib

import pytest
from fastapi.testclient import TestClient

import app.api.handlers
import app.api.routes
import app.core.config
import app.main


def _reload_api() -> None:
    for module in (app.core.config, app.api.handlers, app.api.routes, app.main):
        importlib.reload(module)


@pytest.fixture
def legacy_client(db_url: str, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    monkeypatch.setenv("LEGACY_INTEGER_CODES", "true")
    _reload_api()
    try:
        with TestClient(app.main.create_app(db_url)) as test_client:
            yield test_client
    finally:
        monkeypatch.delenv("LEGACY_INTEGER_CODES")
        _reload_api()


def test_integer_code_is_accepted(legacy_client: TestClient, agent_rows) -> None:
    response = legacy_client.delete("/agents/1")
    assert response.status_code == 200
    assert response.json() == {"message": "Agent deleted"}
    assert agent_rows("1") == []


@pytest.mark.parametrize("code", ["A007", "1.5"])
def test_non_integer_code_is_rejected(legacy_client: TestClient, agent_rows, code: str) -> None:
    before = agent_rows()
    response = legacy_client.delete(f"/agents/{code}")
    assert response.status_code == 400
    assert response.json() == {"errors": [{"location": "path", "field": "code", "msg": "ID must be an integer"}]}
    assert agent_rows() == before


def test_get_lookup_is_not_restricted(legacy_client: TestClient) -> None:
    response = legacy_client.get("/agents/A007")
    assert response.status_code == 200
    assert len(response.json()) == 1
