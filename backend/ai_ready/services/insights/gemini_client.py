"""
Gemini Client - Prompt in, text out.
"""

import asyncio

from google import genai

from ai_ready.config import settings
from ai_ready.logger import logger


class GenerationError(Exception):
    """The generative model could not produce a response."""


class GeminiClient:
    """Thin wrapper around the google-genai SDK."""

    def __init__(self, api_key: str = None, model: str = None):
        self.api_key = settings.GOOGLE_API_KEY if api_key is None else api_key
        self.model = model or settings.GEMINI_MODEL

    async def complete(self, prompt: str) -> str:
        """Send one prompt and return the response text.

        Raises:
            GenerationError: missing key, SDK/transport failure or empty response
        """
        if not self.api_key:
            raise GenerationError("GOOGLE_API_KEY not configured")

        try:
            client = genai.Client(api_key=self.api_key)
            response = await asyncio.to_thread(
                client.models.generate_content,
                model=self.model,
                contents=prompt
            )
        except Exception as e:
            raise GenerationError(f"Gemini API error: {e}") from e

        text = getattr(response, "text", None)
        if not text:
            raise GenerationError("Gemini returned an empty response")

        logger.debug(f"Gemini ({self.model}) returned {len(text)} chars")
        return text
