"""Generate verse service."""

import httpx
from api.config import Settings
from api.errors import ShapeError
from lib.gemini_client import GeminiClient
from .build_prompt import build_verse_prompt
from .parse_verse import Verse, recover_verse


async def generate_verse(
    feeling: str,
    settings: Settings,
    http_client: httpx.AsyncClient
) -> Verse:
    """
    Ask Gemini for one verse matching a feeling.

    Args:
        feeling: The caller's trimmed, non-empty feeling text
        settings: Settings holding the Gemini credential, model and timeout
        http_client: HTTP client used for the single outbound call

    Returns:
        The normalized verse

    Raises:
        UpstreamError: If the Gemini call fails
        ShapeError: If Gemini returned no text at all
    """
    prompt = build_verse_prompt(feeling, settings.verse_prompt_template)

    gemini = GeminiClient(
        http_client,
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        api_base=settings.gemini_api_base,
        timeout=settings.upstream_timeout_seconds
    )
    raw = await gemini.generate_content(prompt)

    verse = recover_verse(raw)
    if verse is None:
        raise ShapeError("Empty response from model")
    return verse
