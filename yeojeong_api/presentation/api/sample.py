import json
from typing import Any

from fastapi import APIRouter, Depends, Request

from ...config import Settings
from ...infrastructure.clock import utc_timestamp
from .dependencies import get_settings
from .schemas import EchoResponse, HelloResponse

router = APIRouter(prefix="/api", tags=["sample"])

GREETING = "Hello from Yeojeong API!"


def _is_json(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def read_json_body(request: Request) -> Any:
    """
    Parse the request body as JSON without validating its shape.

    Requests that do not declare a JSON content type, or that have an
    empty body, yield an empty object. Malformed JSON raises
    ``json.JSONDecodeError``.
    """
    if not _is_json(request.headers.get("content-type", "")):
        return {}

    raw = await request.body()
    if not raw.strip():
        return {}
    return json.loads(raw)


@router.get("/hello", summary="Sample greeting", response_model=HelloResponse)
async def hello(settings: Settings = Depends(get_settings)) -> HelloResponse:
    return HelloResponse(
        message=GREETING,
        timestamp=utc_timestamp(),
        environment=settings.environment,
    )


@router.post("/echo", summary="Echo the request body", response_model=EchoResponse)
async def echo(request: Request) -> EchoResponse:
    body = await read_json_body(request)
    return EchoResponse(echo=body, timestamp=utc_timestamp())
