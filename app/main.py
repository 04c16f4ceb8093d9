# Run from project root: uvicorn app.main:app --reload

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from app.api.handlers import validation_exception_handler
from app.api.routes import router
from app.core.config import (
    API_DESCRIPTION,
    API_DOCS_URL,
    API_HOST,
    API_PORT,
    API_TITLE,
    API_VERSION,
    DATABASE_URL,
    DB_POOL_SIZE,
    DB_POOL_TIMEOUT,
    LOG_LEVEL,
)
from app.core.database import AgentStore

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app(database_url: str | None = None) -> FastAPI:
    """Build the API. The AgentStore (and its pool) lives for the app's lifespan."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = AgentStore.from_url(database_url or DATABASE_URL, pool_size=DB_POOL_SIZE, pool_timeout=DB_POOL_TIMEOUT)
        app.state.store = store
        try:
            yield
        finally:
            await store.dispose()
            logger.info("[main] connection pool closed")

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
        docs_url=API_DOCS_URL,
        openapi_url=f"{API_DOCS_URL}/openapi.json",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("App listening at http://%s:%d", API_HOST, API_PORT)
    uvicorn.run(app, host=API_HOST, port=API_PORT)
