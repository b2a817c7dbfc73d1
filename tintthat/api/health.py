"""
Health check endpoints.

Provides liveness and readiness probes with a storage check.
"""

import os
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from tintthat.store import StoreLocation, get_location

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    storage: str | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    Does not check dependencies.
    """
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(
    response: Response,
    location: Annotated[StoreLocation, Depends(get_location)],
) -> HealthResponse:
    """
    Readiness probe.

    Checks that the collections directory exists and is writable.
    Returns 503 otherwise.
    """
    directory = location.collections_dir
    if directory.is_dir() and os.access(directory, os.W_OK):
        return HealthResponse(status="ready", storage="writable")

    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthResponse(status="not ready", storage="unavailable")
