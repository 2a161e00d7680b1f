"""AWS Lambda entry point for API Gateway proxy integration.

Settings are read once per cold start; every invocation reuses them.
"""
from __future__ import annotations

from distance_api.config import load_settings
from distance_api.handler import DistanceHandler, HandlerResponse

_handler = DistanceHandler(load_settings())


def to_proxy_response(result: HandlerResponse) -> dict:
    return {
        "statusCode": result.status_code,
        "headers": {"Content-Type": result.content_type},
        "body": result.body,
    }


def handler(event: dict, context) -> dict:
    """AWS Lambda handler for API Gateway proxy events."""
    # API Gateway sends null when the request has no query string
    query_params = event.get("queryStringParameters") or {}
    return to_proxy_response(_handler.handle(query_params))
