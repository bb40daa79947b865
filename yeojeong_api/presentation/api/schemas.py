"""Response models for the sample endpoints."""

from typing import Any

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    environment: str
    version: str


class HelloResponse(BaseModel):
    message: str
    timestamp: str
    environment: str


class EchoResponse(BaseModel):
    """The request body is returned as-is under ``echo``."""

    echo: Any
    timestamp: str
