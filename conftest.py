# conftest.py
# Shared fixtures. The Gemini backend is replaced with a stub that records every call.

import json

import pytest

from analysis import AnalysisBackend
from app import create_app
from config import Settings


# ---- Mock Dependencies ----

class StubBackend(AnalysisBackend):
    """Returns a canned response (or raises) and remembers each request it got."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def generate(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


SAMPLE_RESPONSE = {
    "aiScore": 80,
    "humanScore": 20,
    "readability": "Easy",
    "tone": "Neutral",
    "keyFindings": ["f1"],
    "suggestions": [{"title": "T", "description": "D"}],
    "detailedMetrics": [{"label": "Perplexity", "value": 90}],
}


@pytest.fixture
def sample_response():
    return json.loads(json.dumps(SAMPLE_RESPONSE))


@pytest.fixture
def settings():
    return Settings(api_key="test-key", model="gemini-test")


@pytest.fixture
def backend(sample_response):
    return StubBackend(response=json.dumps(sample_response))


@pytest.fixture
def app(settings, backend):
    app = create_app(settings=settings, backend=backend)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
