"""
Unit tests for the echo Lambda handler.
"""

import json

from app.functions.echo import format_echo, lambda_handler


def test_handler_returns_json_string_literal() -> None:
    response = lambda_handler({"queryStringParameters": {"keyword": "hello"}}, None)
    assert response["statusCode"] == 200
    assert response["body"] == '"Taylor Palmer says hello"'
    assert json.loads(response["body"]) == "Taylor Palmer says hello"


def test_handler_without_query_parameters() -> None:
    # API Gateway sends null when the request has no query string
    response = lambda_handler({"queryStringParameters": None}, None)
    assert response["statusCode"] == 200
    assert json.loads(response["body"]) == "Taylor Palmer says "


def test_keyword_is_not_escaped_or_altered() -> None:
    assert format_echo('say "hi"') == 'Taylor Palmer says say "hi"'
    assert json.loads(lambda_handler({"queryStringParameters": {"keyword": 'say "hi"'}})["body"]) == 'Taylor Palmer says say "hi"'


def test_custom_speaker() -> None:
    assert format_echo("hi", speaker="Alex") == "Alex says hi"
