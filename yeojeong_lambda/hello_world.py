"""Hello World Lambda handler for API Gateway proxy integration."""

import json

import structlog

from .config import settings
from .infrastructure.clock import utc_timestamp
from .infrastructure.logging import configure_logging

configure_logging(settings.service_name)

logger = structlog.get_logger()

GREETING = "Hello from Yeojeong Lambda!"
MISSING_REQUEST_ID = "N/A"

CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "OPTIONS,POST,GET",
}


def _request_id(event: dict) -> str:
    request_context = event.get("requestContext") or {}
    return request_context.get("requestId") or MISSING_REQUEST_ID


def handler(event: dict, context) -> dict:
    """AWS Lambda handler returning a greeting."""
    logger.info("Event received", lambda_event=event)

    body = {
        "message": GREETING,
        "timestamp": utc_timestamp(),
        "requestId": _request_id(event),
        "environment": settings.environment,
    }
    response = {
        "statusCode": 200,
        "headers": dict(CORS_HEADERS),
        "body": json.dumps(body, separators=(",", ":")),
    }

    logger.info("Response", response=response)
    return response
