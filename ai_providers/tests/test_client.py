"""Client facade: construction order, normalization, and provider switching."""
from __future__ import annotations

import json

import pytest
import respx
from httpx import Response

from ai_providers import (
    ChatRequest,
    Client,
    ClientFactory,
    CompletionRequest,
    Config,
    ErrorKind,
    Message,
    ProviderError,
    create_client,
    create_client_from_env,
    create_client_with_defaults,
)
from ai_providers.anthropic import AnthropicAdapter
from ai_providers.openai import OpenAIAdapter
from ai_providers.tests.utils import (
    ANTHROPIC_KEY,
    GOOGLE_KEY,
    OPENAI_KEY,
    anthropic_body,
    openai_chat_body,
    openai_completion_body,
)


def _validation(callable_, *args, **kwargs) -> ProviderError:
    with pytest.raises(ProviderError) as ei:
        callable_(*args, **kwargs)
    assert ei.value.kind is ErrorKind.VALIDATION  # nosec B101 - asserts are appropriate in unit tests
    return ei.value


# ---- construction -----------------------------------------------------------

def test_client_binds_one_adapter(openai_config):
    client = create_client("openai", openai_config)
    assert client.provider == "openai" and isinstance(client.adapter, OpenAIAdapter)  # nosec B101 - asserts are appropriate in unit tests
    assert client.config is openai_config  # nosec B101 - asserts are appropriate in unit tests


def test_unsupported_provider():
    err = _validation(Client, "mistral", Config(api_key=OPENAI_KEY))
    assert err.message == "unsupported provider: mistral"  # nosec B101 - asserts are appropriate in unit tests


def test_invalid_configuration_is_prefixed():
    err = _validation(create_client_with_defaults, "openai", "")
    assert err.message == "invalid configuration: API key is required"  # nosec B101 - asserts are appropriate in unit tests
    err = _validation(create_client, "anthropic", Config(api_key=OPENAI_KEY))
    assert err.message.startswith("invalid configuration: invalid API key format")  # nosec B101 - asserts are appropriate in unit tests


def test_adapter_validation_is_prefixed():
    err = _validation(create_client, "anthropic", Config(api_key=ANTHROPIC_KEY, temperature=1.5))
    assert err.message.startswith("adapter validation failed: temperature must be between 0.0 and 1.0")  # nosec B101 - asserts are appropriate in unit tests


def test_google_is_declared_but_has_no_adapter():
    with pytest.raises(ProviderError) as ei:
        create_client_with_defaults("google", GOOGLE_KEY)
    assert ei.value.kind is ErrorKind.PROVIDER and ei.value.provider == "google"  # nosec B101 - asserts are appropriate in unit tests


def test_client_factory_is_explicit(anthropic_config):
    factory = ClientFactory()
    assert factory.supported_providers() == ("openai", "anthropic", "google")  # nosec B101 - asserts are appropriate in unit tests
    with factory.create_client("anthropic", anthropic_config, model="claude-x") as client:
        assert isinstance(client.adapter, AnthropicAdapter) and client.adapter.model == "claude-x"  # nosec B101 - asserts are appropriate in unit tests


def test_create_client_from_env(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", ANTHROPIC_KEY)
    monkeypatch.setenv("AI_MAX_RETRIES", "1")
    client = create_client_from_env("anthropic")
    assert client.config.api_key == ANTHROPIC_KEY and client.config.max_retries == 1  # nosec B101 - asserts are appropriate in unit tests
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    _validation(create_client_from_env, "openai")


# ---- requests ---------------------------------------------------------------

def test_request_validation_is_prefixed_and_not_sent(openai_config, mock_openai):
    route = mock_openai.post("/chat/completions").mock(return_value=Response(200, json=openai_chat_body()))
    client = create_client("openai", openai_config)
    err = _validation(client.chat_complete, ChatRequest(messages=(Message("assistant", "Hello"),)))
    assert err.message.startswith("request validation failed: invalid conversation structure: ")  # nosec B101 - asserts are appropriate in unit tests
    err = _validation(client.complete, CompletionRequest(prompt=" "))
    assert "prompt is required" in err.message  # nosec B101 - asserts are appropriate in unit tests
    assert route.call_count == 0  # nosec B101 - asserts are appropriate in unit tests


def test_requests_are_clamped_before_sending(openai_config, mock_openai):
    route = mock_openai.post("/completions").mock(return_value=Response(200, json=openai_completion_body()))
    create_client("openai", openai_config).complete(
        CompletionRequest(prompt="hi", temperature=2.5, max_tokens=10000, stop=("a", "b", "c", "d", "e"))
    )
    payload = json.loads(route.calls.last.request.content)
    assert payload["temperature"] == 2.0 and payload["max_tokens"] == 4096  # nosec B101 - asserts are appropriate in unit tests
    assert payload["stop"] == ["a", "b", "c", "d"]  # nosec B101 - asserts are appropriate in unit tests


def test_config_defaults_fill_requests(mock_anthropic):
    route = mock_anthropic.post("/messages").mock(return_value=Response(200, json=anthropic_body()))
    config = Config(api_key=ANTHROPIC_KEY, max_retries=0, temperature=0.3, max_tokens=300)
    create_client("anthropic", config).chat_complete(ChatRequest(messages=(Message("user", "hi"),)))
    payload = json.loads(route.calls.last.request.content)
    assert payload["temperature"] == 0.3 and payload["max_tokens"] == 300  # nosec B101 - asserts are appropriate in unit tests


def test_same_request_works_against_both_providers(openai_config, anthropic_config):
    request = CompletionRequest(prompt="Say hello", temperature=1.5)
    with respx.mock(assert_all_called=True) as router:
        router.post("https://api.openai.com/v1/completions").mock(
            return_value=Response(200, json=openai_completion_body("Hello!", 5, 3))
        )
        router.post("https://api.anthropic.com/v1/messages").mock(
            return_value=Response(200, json=anthropic_body("Hello!", 5, 3))
        )
        results = [
            create_client(p, c).complete(request)
            for p, c in (("openai", openai_config), ("anthropic", anthropic_config))
        ]
    assert [r.text for r in results] == ["Hello!", "Hello!"]  # nosec B101 - asserts are appropriate in unit tests
    assert [r.usage.total_tokens for r in results] == [8, 8]  # nosec B101 - asserts are appropriate in unit tests
    assert request.temperature == 1.5  # nosec B101 - asserts are appropriate in unit tests


def test_adapter_errors_pass_through_unwrapped(openai_config, mock_openai):
    body = {"error": {"message": "Incorrect API key provided", "type": "invalid_request_error", "code": "invalid_api_key"}}
    mock_openai.post("/completions").mock(return_value=Response(401, json=body))
    with pytest.raises(ProviderError) as ei:
        create_client("openai", openai_config).complete(CompletionRequest(prompt="hi"))
    assert ei.value.kind is ErrorKind.AUTHENTICATION  # nosec B101 - asserts are appropriate in unit tests
    assert ei.value.message == "Incorrect API key provided"  # nosec B101 - asserts are appropriate in unit tests
