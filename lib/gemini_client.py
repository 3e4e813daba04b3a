"""
Gemini client for verse-api
Thin wrapper over the generateContent REST endpoint.
"""
import asyncio
import logging
from typing import Any, Dict, Optional
import httpx
from api.errors import UpstreamError, UpstreamTimeoutError

logger = logging.getLogger(__name__)


def extract_text(result: Any) -> str:
    """
    Join the text parts of the first candidate in a generateContent response.

    Args:
        result: Decoded JSON body returned by Gemini

    Returns:
        str: Non-empty part texts joined by newlines and trimmed, or "" when
        the response carries no text
    """
    if not isinstance(result, dict):
        return ""

    candidates = result.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return ""

    first = candidates[0]
    content = first.get("content") if isinstance(first, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return ""

    texts = [
        part["text"] for part in parts
        if isinstance(part, dict) and isinstance(part.get("text"), str) and part["text"]
    ]
    return "\n".join(texts).strip()


def extract_error_message(result: Any) -> Optional[str]:
    """Pull error.message out of a Gemini error body, if there is one."""
    if not isinstance(result, dict):
        return None
    error = result.get("error")
    if isinstance(error, dict) and isinstance(error.get("message"), str) and error["message"]:
        return error["message"]
    return None


class GeminiClient:
    """Calls Gemini generateContent with an API key passed as a query credential."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: str,
        model: str,
        api_base: str,
        timeout: Optional[float] = None
    ):
        if not api_key:
            raise ValueError("Gemini API key is required")
        self.http_client = http_client
        self.api_key = api_key
        self.model = model
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    @property
    def endpoint(self) -> str:
        return f"{self.api_base}/models/{self.model}:generateContent"

    @staticmethod
    def build_payload(prompt: str, response_mime_type: Optional[str] = "application/json") -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        }
        if response_mime_type:
            payload["generationConfig"] = {"responseMimeType": response_mime_type}
        return payload

    async def generate_content(self, prompt: str, response_mime_type: Optional[str] = "application/json") -> str:
        """
        Send a single prompt to Gemini and return the generated text.

        Args:
            prompt: The user prompt
            response_mime_type: Output format requested from the model

        Returns:
            str: The concatenated text of the first candidate ("" if none)

        Raises:
            UpstreamTimeoutError: If the call exceeds the configured timeout
            UpstreamError: If Gemini is unreachable or answers with a non-2xx status
        """
        payload = self.build_payload(prompt, response_mime_type)
        logger.info(f"🤖 Calling Gemini model {self.model}")

        try:
            # wait_for caps the whole call; httpx timeouts only bound each phase
            response = await asyncio.wait_for(
                self.http_client.post(
                    self.endpoint,
                    params={"key": self.api_key},
                    json=payload,
                    timeout=self.timeout
                ),
                self.timeout
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.error(f"⏱️ Gemini request timed out after {self.timeout}s")
            raise UpstreamTimeoutError("Gemini request timed out")
        except httpx.HTTPError as e:
            # The exception text can include the request URL, which holds the key
            logger.error(f"❌ Gemini request failed: {type(e).__name__}")
            raise UpstreamError(f"Gemini request failed: {type(e).__name__}")

        try:
            result = response.json()
        except ValueError:
            result = {}

        if not response.is_success:
            message = extract_error_message(result) or f"Gemini error {response.status_code}"
            logger.error(f"❌ Gemini returned {response.status_code}: {message}")
            raise UpstreamError(message, status_code=response.status_code)

        return extract_text(result)
