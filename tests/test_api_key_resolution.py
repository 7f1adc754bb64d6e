from types import SimpleNamespace
import asyncio

import pytest

from core.providers import (
    GeminiTextGenerator,
    UpstreamError,
    get_generator,
    resolve_api_key,
)


def test_resolve_api_key_prefers_explicit(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "env-value")
    assert resolve_api_key(" explicit ", "GEMINI_API_KEY") == "explicit"


def test_resolve_api_key_falls_back_to_first_non_empty_env(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "  ")
    monkeypatch.setenv("GOOGLE_API_KEY", "google-value")
    assert resolve_api_key(None, "GEMINI_API_KEY", "GOOGLE_API_KEY") == "google-value"


def test_resolve_api_key_returns_empty_when_nothing_set(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    assert resolve_api_key("", "GEMINI_API_KEY", "GOOGLE_API_KEY") == ""


def test_gemini_generator_supports_google_api_key_env(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("GOOGLE_API_KEY", "google-value")
    generator = GeminiTextGenerator(api_key=None)
    assert generator.api_key == "google-value"
    assert generator.model == "gemini-1.5-flash"


def test_gemini_generator_requires_a_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    with pytest.raises(ValueError):
        GeminiTextGenerator()


def test_get_generator_rejects_unknown_provider():
    with pytest.raises(ValueError, match="Unknown provider"):
        get_generator("dall-e")


def _stub_client(generate_content):
    return SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate_content)))


def test_gemini_generator_returns_response_text():
    calls = []

    async def generate_content(model, contents, config):
        calls.append((model, contents, config))
        return SimpleNamespace(text="<!DOCTYPE html><html></html>")

    generator = GeminiTextGenerator(api_key="key", model="gemini-test", temperature=0.5)
    generator._client = _stub_client(generate_content)

    assert asyncio.run(generator.generate("hola")) == "<!DOCTYPE html><html></html>"
    assert calls[0][0] == "gemini-test"
    assert calls[0][1] == "hola"
    assert calls[0][2]["temperature"] == 0.5


def test_gemini_generator_maps_missing_text_to_empty_string():
    async def generate_content(model, contents, config):
        return SimpleNamespace(text=None)

    generator = GeminiTextGenerator(api_key="key")
    generator._client = _stub_client(generate_content)

    assert asyncio.run(generator.generate("hola")) == ""


def test_gemini_generator_wraps_sdk_errors():
    async def generate_content(model, contents, config):
        raise ConnectionError("boom")

    generator = GeminiTextGenerator(api_key="key")
    generator._client = _stub_client(generate_content)

    with pytest.raises(UpstreamError) as excinfo:
        asyncio.run(generator.generate("hola"))
    assert isinstance(excinfo.value.__cause__, ConnectionError)


def test_gemini_generator_wraps_client_construction_errors(monkeypatch):
    generator = GeminiTextGenerator(api_key="key")

    def _broken_client():
        raise ImportError("No module named 'google.genai'")

    monkeypatch.setattr(generator, "_get_client", _broken_client)

    with pytest.raises(UpstreamError) as excinfo:
        asyncio.run(generator.generate("hola"))
    assert isinstance(excinfo.value.__cause__, ImportError)
