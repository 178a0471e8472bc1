# analysis.py
# Contains the core analysis flow: validate the input, make one model call, parse the result.

import logging
from typing import Protocol, runtime_checkable

from pydantic import ValidationError

from models import AnalysisResult
from prompt import build_request

logger = logging.getLogger(__name__)


# --- Errors ---

class CheckerError(Exception):
    """Base class. `user_message` is the text shown on the page."""

    user_message = "Something went wrong."

    def __init__(self, detail=None):
        super().__init__(detail or self.user_message)


class InputValidationError(CheckerError):
    user_message = "Please enter at least 50 characters for a reliable analysis."


class AnalysisError(CheckerError):
    # Network, API and schema failures all collapse into this one message.
    user_message = "Analysis failed. Please check your connection and try again."


# --- Input & Response Handling ---

def validate_input(text, min_chars, max_chars):
    """
    Truncates the text to `max_chars` and rejects it if it is blank or
    shorter than `min_chars`. Returns the text that may be sent.
    """
    text = (text or "")[:max_chars]
    if not text.strip() or len(text) < min_chars:
        raise InputValidationError(f"input has {len(text)} characters, need {min_chars}")
    return text


def parse_result(raw):
    """Turns the model's raw text into an AnalysisResult or raises AnalysisError."""
    if not raw:
        raise AnalysisError("model returned no text")
    try:
        return AnalysisResult.model_validate_json(raw)
    except ValidationError as e:
        # Malformed JSON also lands here as a json_invalid error.
        raise AnalysisError(f"response does not match the schema: {e.error_count()} error(s)") from e


# --- Main Analysis Entry Point ---

@runtime_checkable
class AnalysisBackend(Protocol):
    """Takes an AnalysisRequest and returns the model's raw text."""

    def generate(self, request) -> str:
        ...


class ContentAnalyzer:
    def __init__(self, settings, backend: AnalysisBackend):
        self.settings = settings
        self.backend = backend

    def analyze(self, text):
        text = validate_input(text, self.settings.min_chars, self.settings.max_chars)
        request = build_request(text)

        logger.info("Analyzing %d characters with %s", len(text), self.settings.model)
        try:
            raw = self.backend.generate(request)
        except AnalysisError:
            raise
        except Exception as e:
            logger.exception("Analysis backend raised")
            raise AnalysisError(str(e)) from e

        return parse_result(raw)
