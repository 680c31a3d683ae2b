"""
Gemini AI client for explaining cipher operations.

Given a finished operation (cipher, direction, input, output and key) it
asks Gemini for a short technical walk-through of how the result was
produced.
"""
import logging

import httpx

from cipherbench.core.config import get_settings
from cipherbench.core.exceptions import ExplanationError, ExplanationUnavailableError
from cipherbench.models.schemas import CipherRecord, Direction

logger = logging.getLogger(__name__)


class GeminiClient:
    """
    Client for Google's Gemini API.

    Produces natural-language explanations of cipher operations.
    """

    BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
    DEFAULT_MODEL = "gemini-2.5-flash-lite"

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize Gemini client.

        Args:
            api_key: Gemini API key. Falls back to settings if not provided.
            model: Model to use. Falls back to settings, then DEFAULT_MODEL.
            client: HTTP client to reuse instead of creating one.
        """
        settings = get_settings()
        self.api_key = api_key or settings.gemini_api_key
        self.model = model or settings.gemini_model or self.DEFAULT_MODEL
        self._client = client or httpx.AsyncClient(
            timeout=settings.gemini_timeout_seconds
        )

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def generate_content(self, prompt: str) -> str:
        """
        Generate content using Gemini.

        Args:
            prompt: The prompt to send to Gemini

        Returns:
            Generated text response, empty if Gemini returned no candidates

        Raises:
            ExplanationUnavailableError: If no API key is configured
            ExplanationError: If the reply is not the expected JSON shape
            httpx.HTTPError: If the request fails
        """
        if not self.enabled:
            raise ExplanationUnavailableError()

        url = f"{self.BASE_URL}/{self.model}:generateContent"

        payload = {
            "contents": [
                {
                    "parts": [
                        {"text": prompt}
                    ]
                }
            ]
        }

        headers = {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }

        response = await self._client.post(url, json=payload, headers=headers)
        response.raise_for_status()

        try:
            return self._first_candidate_text(response.json())
        except (ValueError, AttributeError, LookupError, TypeError) as e:
            logger.warning("Unreadable Gemini reply: %s", e)
            raise ExplanationError(
                "The explanation service returned an unreadable reply",
                {"reason": str(e)},
            ) from e

    @staticmethod
    def _first_candidate_text(data: dict) -> str:
        candidates = data.get("candidates") or []
        if not candidates:
            return ""

        parts = candidates[0].get("content", {}).get("parts") or []
        if not parts:
            return ""

        text = parts[0].get("text", "")
        if not isinstance(text, str):
            raise TypeError(f"expected text, got {type(text).__name__}")
        return text

    async def explain_operation(self, record: CipherRecord) -> str:
        """
        Explain how a cipher operation turned its input into its output.

        Args:
            record: The finished operation

        Returns:
            A short technical explanation

        Raises:
            ExplanationUnavailableError: If no API key is configured
            ExplanationError: If Gemini cannot be reached or answers with nothing
        """
        action = "Encryption" if record.direction == Direction.ENCRYPT else "Decryption"
        prompt = f"""You are a cryptography expert. Analyze the following operation:
Algorithm: {record.cipher_type.value}
Operation: {action}
Original text: {record.original_text}
Result: {record.result_text}
Key: {record.key}

Explain very briefly, and only from a technical point of view, how this cryptographic operation was carried out."""

        try:
            text = await self.generate_content(prompt)
        except httpx.HTTPError as e:
            logger.warning("Gemini request failed: %s", e)
            raise ExplanationError(
                "Could not reach the explanation service",
                {"reason": str(e)},
            ) from e

        text = text.strip()
        if not text:
            raise ExplanationError("The explanation service returned no text")
        return text
