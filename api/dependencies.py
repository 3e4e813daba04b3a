"""
FastAPI dependencies for configuration and the outbound HTTP client
"""
from typing import AsyncIterator
import httpx
from api.config import Settings, settings


def get_settings() -> Settings:
    """
    Provide the application settings to a request handler.

    Handlers receive configuration through this dependency instead of reading
    the environment themselves, so tests can swap in their own Settings via
    app.dependency_overrides.

    Returns:
        Settings: The settings loaded at startup
    """
    return settings


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """
    Yield an HTTP client scoped to a single request.

    The client is closed once the response has been produced. Timeouts are
    applied per call by the caller.

    Yields:
        httpx.AsyncClient: A fresh async client
    """
    async with httpx.AsyncClient() as client:
        yield client
