"""
Echo function: stateless keyword echo, deployable on its own as an AWS Lambda handler.

No database, no shared state. The HTTP API exposes the same message at GET /echo.
"""

import json
import logging
from typing import Any

from app.core.config import ECHO_SPEAKER

logger = logging.getLogger(__name__)


def format_echo(keyword: str | None, speaker: str = ECHO_SPEAKER) -> str:
    """Return '<speaker> says <keyword>'. A missing keyword renders as an empty string."""
    return f"{speaker} says {keyword if keyword is not None else ''}"


def lambda_handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """API Gateway proxy handler: reads ?keyword= and returns the message as a JSON string literal."""
    params = (event or {}).get("queryStringParameters") or {}
    keyword = params.get("keyword")
    logger.info("[echo:lambda_handler] IN  keyword=%r", keyword)
    return {
        "statusCode": 200,
        "body": json.dumps(format_echo(keyword)),
    }
