"""
Shared fixtures: a file-backed SQLite copy of the sample database and a TestClient bound to it.

The schema and demo rows are written with the stdlib sqlite3 driver; the app talks
to the same file through SQLAlchemy + aiosqlite.
"""

import sqlite3
from pathlib import Path
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from app.core.sample_db import INSERT_AGENT, INSERT_CUSTOMER, SCHEMA_STATEMENTS, SEED_AGENTS, SEED_CUSTOMERS
from app.main import create_app


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    path = tmp_path / "sample.db"
    conn = sqlite3.connect(str(path))
    try:
        for statement in SCHEMA_STATEMENTS:
            conn.execute(statement)
        conn.executemany(INSERT_AGENT, SEED_AGENTS)
        conn.executemany(INSERT_CUSTOMER, SEED_CUSTOMERS)
        conn.commit()
    finally:
        conn.close()
    return path


@pytest.fixture
def db_url(db_path: Path) -> str:
    return f"sqlite+aiosqlite:///{db_path}"


@pytest.fixture
def client(db_url: str) -> TestClient:
    with TestClient(create_app(db_url)) as test_client:
        yield test_client


@pytest.fixture
def agent_rows(db_path: Path) -> Callable[..., list[dict[str, Any]]]:
    """Read agents straight from the database file, bypassing the API."""

    def _rows(code: str | None = None) -> list[dict[str, Any]]:
        conn = sqlite3.connect(str(db_path))
        conn.row_factory = sqlite3.Row
        try:
            if code is None:
                cur = conn.execute("SELECT * FROM agents ORDER BY AGENT_CODE")
            else:
                cur = conn.execute("SELECT * FROM agents WHERE AGENT_CODE = ?", (code,))
            return [dict(row) for row in cur.fetchall()]
        finally:
            conn.close()

    return _rows
