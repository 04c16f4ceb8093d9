"""
API handlers: store injection, storage-error mapping, and validation-error formatting.

Responsibility: Bridge HTTP types and the storage client. Marshalling and
exception-to-HTTP mapping live here so AgentStore stays free of FastAPI types.
"""

import logging
from collections.abc import Awaitable
from typing import Any, TypeVar

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.config import LEGACY_INTEGER_CODES
from app.core.database import AgentStore
from app.core.errors import StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def get_store(request: Request) -> AgentStore:
    """FastAPI dependency: the AgentStore created in the app lifespan."""
    return request.app.state.store


async def call_store(operation: str, failure_message: str, pending: Awaitable[T]) -> T:
    """
    Await a storage call. StorageError is logged with its cause and surfaces as a
    500 carrying only failure_message; nothing internal reaches the client.
    """
    try:
        return await pending
    except StorageError as e:
        logger.exception("[api:%s] storage failure: %s", operation, e.message)
        raise HTTPException(status_code=500, detail=failure_message) from e


def _violation(error: dict[str, Any]) -> dict[str, Any]:
    loc = tuple(error.get("loc") or ())
    location = str(loc[0]) if loc else "body"
    error_type = error.get("type", "")
    field = str(loc[-1]) if len(loc) > 1 else None

    if location == "path":
        msg = "ID must be an integer" if LEGACY_INTEGER_CODES else "Invalid agent code"
    elif error_type == "json_invalid":
        field, msg = None, "Request body must be valid JSON"
    elif field is None:
        if error_type == "missing":
            msg = "Request body is required"
        elif error_type in {"model_attributes_type", "model_type", "dict_type"}:
            msg = "Request body must be a JSON object"
        else:
            msg = str(error.get("msg", "")).removeprefix("Value error, ")
    elif error_type == "extra_forbidden":
        msg = f"Invalid field: {field}"
    elif error_type in {"missing", "string_too_short"}:
        msg = f"{field} is required"
    elif error_type == "string_type":
        msg = f"{field} must be a non-empty string"
    elif error_type.startswith("float") or error_type == "finite_number":
        msg = f"{field} must be a number"
    else:
        msg = str(error.get("msg", "")).removeprefix("Value error, ")

    return {"location": location, "field": field, "msg": msg}


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return every violation of the request at once as 400 {"errors": [...]}."""
    errors = [_violation(error) for error in exc.errors()]
    logger.info("[api:validation] %s %s rejected violations=%d", request.method, request.url.path, len(errors))
    return JSONResponse(status_code=400, content={"errors": errors})
