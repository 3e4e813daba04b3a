"""
Error types for the verse endpoint.
Every error carries the HTTP status it maps to and is rendered as {"error": message}.
"""
from typing import Dict, Iterable, Optional
from fastapi import Request
from fastapi.responses import JSONResponse

NO_STORE_HEADERS = {"Cache-Control": "no-store"}


class VerseError(Exception):
    """Base class for errors reported to the caller as structured JSON."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.headers = headers or {}


class ConfigurationError(VerseError):
    """Required server configuration (the Gemini credential) is missing."""

    status_code = 500


class ClientInputError(VerseError):
    status_code = 400


class MethodNotAllowedError(ClientInputError):
    status_code = 405

    def __init__(self, allowed_methods: Iterable[str]):
        super().__init__(
            "Method not allowed",
            headers={"Allow": ", ".join(allowed_methods)}
        )


class UpstreamError(VerseError):
    """Gemini answered with a non-success status or could not be reached."""

    status_code = 502


class UpstreamTimeoutError(UpstreamError):
    status_code = 504


class ShapeError(VerseError):
    """Gemini succeeded but produced nothing usable as a verse."""

    status_code = 502


class UnexpectedError(VerseError):
    status_code = 500


async def verse_error_handler(request: Request, exc: VerseError) -> JSONResponse:
    """Render any VerseError as a non-cacheable JSON error response."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers={**NO_STORE_HEADERS, **exc.headers}
    )
