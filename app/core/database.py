"""
Storage client for the agents and customer tables.

One AgentStore wraps a pooled SQLAlchemy AsyncEngine. Every call checks out one
connection, runs one parameterized statement, and returns the connection to
the pool whether or not the statement succeeded.
"""

import logging
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import AsyncAdaptedQueuePool

from app.core.errors import StorageError

logger = logging.getLogger(__name__)

_AGENTS = "agents"
_CUSTOMERS = "customer"

# Mutable agent columns; the only identifiers a partial update may place in SET
UPDATABLE_COLUMNS: tuple[str, ...] = ("AGENT_NAME", "WORKING_AREA", "COMMISSION", "PHONE_NO", "COUNTRY")


class AgentStore:
    """Async access to agents/customers through a bounded connection pool."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    @classmethod
    def from_url(cls, url: str, pool_size: int = 5, pool_timeout: float = 30.0) -> "AgentStore":
        """Build a store with a fixed-size pool (no overflow connections)."""
        engine = create_async_engine(
            url,
            poolclass=AsyncAdaptedQueuePool,
            pool_size=pool_size,
            max_overflow=0,
            pool_timeout=pool_timeout,
            pool_pre_ping=True,
        )
        logger.info("[database] pool ready dialect=%s size=%d timeout=%.1fs", engine.dialect.name, pool_size, pool_timeout)
        return cls(engine)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self._engine.dispose()

    async def _fetch_all(self, sql: str, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(text(sql), params or {})
                return [dict(row._mapping) for row in result]
        except SQLAlchemyError as e:
            raise StorageError(f"Query failed: {e}") from e

    async def _execute(self, sql: str, params: dict[str, Any]) -> tuple[int, int | None]:
        """Run one write statement in its own transaction; returns (rowcount, lastrowid)."""
        try:
            async with self._engine.begin() as conn:
                result = await conn.execute(text(sql), params)
                return result.rowcount, result.lastrowid
        except SQLAlchemyError as e:
            raise StorageError(f"Statement failed: {e}") from e

    # --- Agents ---

    async def list_agents(self) -> list[dict[str, Any]]:
        rows = await self._fetch_all(f"SELECT * FROM {_AGENTS}")
        logger.info("[database:list_agents] OUT rows=%d", len(rows))
        return rows

    async def get_agents_by_code(self, code: str) -> list[dict[str, Any]]:
        """Rows whose AGENT_CODE equals code; empty list when there are none."""
        rows = await self._fetch_all(f"SELECT * FROM {_AGENTS} WHERE AGENT_CODE = :code", {"code": code})
        logger.info("[database:get_agents_by_code] IN  code=%r OUT rows=%d", code, len(rows))
        return rows

    async def create_agent(self, values: dict[str, Any]) -> int | None:
        """Insert one agent row and return the generated row id reported by the driver."""
        _, row_id = await self._execute(
            f"INSERT INTO {_AGENTS} (AGENT_CODE, AGENT_NAME, WORKING_AREA, COMMISSION, PHONE_NO, COUNTRY) "
            "VALUES (:AGENT_CODE, :AGENT_NAME, :WORKING_AREA, :COMMISSION, :PHONE_NO, :COUNTRY)",
            values,
        )
        logger.info("[database:create_agent] IN  code=%r OUT id=%s", values.get("AGENT_CODE"), row_id)
        return row_id

    async def replace_agent(self, code: str, values: dict[str, Any]) -> int:
        """Overwrite all mutable fields. Returns the affected row count (0 is not an error)."""
        rowcount, _ = await self._execute(
            f"UPDATE {_AGENTS} SET AGENT_NAME = :AGENT_NAME, WORKING_AREA = :WORKING_AREA, "
            "COMMISSION = :COMMISSION, PHONE_NO = :PHONE_NO, COUNTRY = :COUNTRY WHERE AGENT_CODE = :code",
            {**values, "code": code},
        )
        logger.info("[database:replace_agent] IN  code=%r OUT rows=%d", code, rowcount)
        return rowcount

    async def update_agent_fields(self, code: str, values: dict[str, Any]) -> int:
        """
        Update only the supplied columns. Keys must come from UPDATABLE_COLUMNS;
        anything else is refused before a statement is built.
        """
        if not values:
            raise ValueError("No fields supplied")
        unknown = [column for column in values if column not in UPDATABLE_COLUMNS]
        if unknown:
            raise ValueError(f"Invalid field: {', '.join(unknown)}")

        columns = [column for column in UPDATABLE_COLUMNS if column in values]
        assignments = ", ".join(f"{column} = :{column}" for column in columns)
        params = {column: values[column] for column in columns}
        params["code"] = code
        rowcount, _ = await self._execute(f"UPDATE {_AGENTS} SET {assignments} WHERE AGENT_CODE = :code", params)
        logger.info("[database:update_agent_fields] IN  code=%r columns=%s OUT rows=%d", code, columns, rowcount)
        return rowcount

    async def delete_agent(self, code: str) -> int:
        rowcount, _ = await self._execute(f"DELETE FROM {_AGENTS} WHERE AGENT_CODE = :code", {"code": code})
        logger.info("[database:delete_agent] IN  code=%r OUT rows=%d", code, rowcount)
        return rowcount

    # --- Customers ---

    async def list_customers_by_agent(self, code: str) -> list[dict[str, Any]]:
        rows = await self._fetch_all(f"SELECT * FROM {_CUSTOMERS} WHERE AGENT_CODE = :code", {"code": code})
        logger.info("[database:list_customers_by_agent] IN  code=%r OUT rows=%d", code, len(rows))
        return rows
