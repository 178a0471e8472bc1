import pytest
from google.genai import errors

import gemini
from analysis import AnalysisBackend, AnalysisError
from config import Settings
from gemini import GeminiClient
from prompt import REQUIRED_FIELDS, SYSTEM_INSTRUCTION, build_request


class _FakeResponse:
    def __init__(self, text):
        self.text = text


class _FakeModels:
    def __init__(self):
        self.calls = []
        self.response = _FakeResponse('{"aiScore": 1}')
        self.error = None

    def generate_content(self, model, contents, config):
        self.calls.append((model, contents, config))
        if self.error is not None:
            raise self.error
        return self.response


class _FakeClient:
    instances = []

    def __init__(self, api_key, http_options=None):
        self.api_key = api_key
        self.http_options = http_options
        self.models = _FakeModels()
        _FakeClient.instances.append(self)


@pytest.fixture
def fake_client(monkeypatch):
    _FakeClient.instances = []
    monkeypatch.setattr(gemini.genai, "Client", _FakeClient)
    return _FakeClient


def test_sends_persona_prompt_schema_and_timeout(fake_client):
    client = GeminiClient(Settings(api_key="k", model="gemini-test", request_timeout=5))

    raw = client.generate(build_request("a" * 50))

    (sdk,) = fake_client.instances
    assert raw == '{"aiScore": 1}'
    assert sdk.api_key == "k"
    assert sdk.http_options.timeout == 5000
    model, contents, config = sdk.models.calls[0]
    assert model == "gemini-test"
    assert "a" * 50 in contents
    assert config.system_instruction == SYSTEM_INSTRUCTION
    assert config.response_mime_type == "application/json"
    assert config.response_schema.required == REQUIRED_FIELDS


def test_each_client_keeps_its_own_key(fake_client):
    first = GeminiClient(Settings(api_key="key-A"))
    second = GeminiClient(Settings(api_key="key-B"))

    assert first.client.api_key == "key-A"
    assert second.client.api_key == "key-B"


def test_is_an_analysis_backend(fake_client):
    assert isinstance(GeminiClient(Settings(api_key="k")), AnalysisBackend)


def test_missing_key_fails_without_calling(fake_client):
    with pytest.raises(AnalysisError):
        GeminiClient(Settings()).generate(build_request("a" * 50))

    assert fake_client.instances == []


def test_api_error_becomes_analysis_error(fake_client):
    client = GeminiClient(Settings(api_key="k"))
    client.client.models.error = errors.ServerError(
        503, {"error": {"code": 503, "message": "overloaded", "status": "UNAVAILABLE"}}
    )

    with pytest.raises(AnalysisError):
        client.generate(build_request("a" * 50))


def test_empty_response_text_is_passed_on_as_none(fake_client):
    client = GeminiClient(Settings(api_key="k"))
    client.client.models.response = _FakeResponse(None)

    assert client.generate(build_request("a" * 50)) is None
