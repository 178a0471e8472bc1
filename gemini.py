# gemini.py
# The one outbound call: hands a built request to Gemini and returns its raw text.

import logging

from google import genai
from google.genai import types
from google.genai.errors import APIError

from analysis import AnalysisBackend, AnalysisError

logger = logging.getLogger(__name__)


class GeminiClient(AnalysisBackend):
    """Sends an AnalysisRequest to Gemini with a JSON response schema."""

    def __init__(self, settings):
        self.settings = settings
        self.client = None
        if settings.api_key:
            # One client per instance; the key never leaves it.
            self.client = genai.Client(
                api_key=settings.api_key,
                http_options=types.HttpOptions(timeout=int(settings.request_timeout * 1000)),
            )

    def generate(self, request):
        if self.client is None:
            raise AnalysisError("GEMINI_API_KEY is not configured")

        config = types.GenerateContentConfig(
            system_instruction=request.system_instruction,
            response_mime_type=request.response_mime_type,
            response_schema=request.response_schema,
        )
        try:
            response = self.client.models.generate_content(
                model=self.settings.model,
                contents=request.contents,
                config=config,
            )
        except APIError as e:
            logger.warning("Gemini request to %s failed: %s", self.settings.model, e)
            raise AnalysisError(f"Gemini request failed: {e}") from e

        # Blocked or empty candidates come back with no text.
        return response.text
