"""
Verse router - HTTP endpoint that turns a feeling into a Bible verse
"""
from fastapi import APIRouter, Depends, Request
from fastapi.exception_handlers import http_exception_handler as default_http_exception_handler
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Optional
import httpx
import logging
from api.config import Settings
from api.dependencies import get_settings, get_http_client
from api.errors import (
    NO_STORE_HEADERS,
    ClientInputError,
    ConfigurationError,
    MethodNotAllowedError,
    UnexpectedError,
    VerseError,
    verse_error_handler,
)
from api.services.verses import generate_verse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/verse", tags=["verse"])

ALLOWED_METHODS = ("GET", "POST")


# Pydantic model for the optional POST body
class VerseRequest(BaseModel):
    feeling: Optional[str] = None


async def read_feeling(request: Request) -> str:
    """
    Extract the feeling from the query string, falling back to a JSON body on POST.

    Returns:
        str: The trimmed feeling, or "" when none was supplied
    """
    feeling = (request.query_params.get("feeling") or "").strip()
    if feeling or request.method != "POST":
        return feeling

    body = await request.body()
    if not body:
        return ""

    try:
        payload = VerseRequest.model_validate_json(body)
    except ValidationError:
        logger.warning("⚠️ Ignoring POST body that is not a JSON object with a string feeling")
        return ""

    return (payload.feeling or "").strip()


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Render routing 405s for this endpoint as JSON errors with Allow: GET, POST.
    Starlette raises these for any method the route does not list, including
    extension methods such as TRACE or PROPFIND.
    """
    if exc.status_code == 405 and request.url.path.rstrip("/") == router.prefix:
        return await verse_error_handler(request, MethodNotAllowedError(ALLOWED_METHODS))
    return await default_http_exception_handler(request, exc)


@router.api_route("", methods=list(ALLOWED_METHODS))
async def verse_endpoint(
    request: Request,
    settings: Settings = Depends(get_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client)
):
    """
    Return one verse for ?feeling=... (GET) or {"feeling": "..."} (POST).
    Responses are never cacheable; each request makes its own Gemini call.
    """
    try:
        if not settings.gemini_api_key:
            logger.error("❌ GEMINI_API_KEY is not configured")
            raise ConfigurationError("Server missing GEMINI_API_KEY")

        feeling = await read_feeling(request)
        if not feeling:
            raise ClientInputError('Missing "feeling"')

        logger.info(f"📖 Verse requested ({request.method}) for feeling: {feeling[:80]}")
        verse = await generate_verse(feeling, settings, http_client)
        return JSONResponse(content=verse.model_dump(), headers=NO_STORE_HEADERS)
    except VerseError:
        raise
    except Exception as e:
        error_str = str(e)
        logger.error(f"❌ Unexpected error generating verse: {error_str}")
        logger.exception("Full traceback:")
        raise UnexpectedError(error_str or "Server error")
