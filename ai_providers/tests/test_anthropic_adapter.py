"""AnthropicAdapter: Messages API mapping, system lifting, and error envelopes."""
from __future__ import annotations

import json

import pytest
from httpx import Response

from ai_providers.anthropic import AnthropicAdapter
from ai_providers.anthropic.client import split_system_messages
from ai_providers.base.constants import FEATURE_FUNCTION_CALLING, FEATURE_SYSTEM_MESSAGES
from ai_providers.base.errors import ErrorKind, ProviderError
from ai_providers.base.models import ChatRequest, CompletionRequest, Message
from ai_providers.config import Config
from ai_providers.tests.utils import ANTHROPIC_KEY, anthropic_body


def _payload(route) -> dict:
    return json.loads(route.calls.last.request.content)


def test_headers_and_features(anthropic_config, mock_anthropic):
    route = mock_anthropic.post("/messages").mock(return_value=Response(200, json=anthropic_body()))
    adapter = AnthropicAdapter(anthropic_config)
    adapter.complete(CompletionRequest(prompt="hi"))
    headers = route.calls.last.request.headers
    assert headers["x-api-key"] == ANTHROPIC_KEY  # nosec B101 - asserts are appropriate in unit tests
    assert headers["anthropic-version"] == "2023-06-01"  # nosec B101 - asserts are appropriate in unit tests
    assert "authorization" not in headers  # nosec B101 - asserts are appropriate in unit tests
    assert FEATURE_SYSTEM_MESSAGES in adapter.supported_features()  # nosec B101 - asserts are appropriate in unit tests
    assert FEATURE_FUNCTION_CALLING not in adapter.supported_features()  # nosec B101 - asserts are appropriate in unit tests


def test_complete_sends_prompt_as_user_message(anthropic_config, mock_anthropic):
    route = mock_anthropic.post("/messages").mock(return_value=Response(200, json=anthropic_body("Hello!", 10, 5)))
    resp = AnthropicAdapter(anthropic_config).complete(
        CompletionRequest(prompt="Say hello", temperature=0.5, stop=("END",))
    )
    assert resp.text == "Hello!" and resp.finish_reason == "end_turn"  # nosec B101 - asserts are appropriate in unit tests
    assert (resp.usage.prompt_tokens, resp.usage.completion_tokens, resp.usage.total_tokens) == (10, 5, 15)  # nosec B101 - asserts are appropriate in unit tests
    assert _payload(route) == {  # nosec B101 - asserts are appropriate in unit tests
        "model": "claude-3-haiku-20240307",
        "max_tokens": 1024,
        "messages": [{"role": "user", "content": "Say hello"}],
        "temperature": 0.5,
        "stop_sequences": ["END"],
    }


def test_chat_lifts_and_joins_system_messages(anthropic_config, mock_anthropic):
    route = mock_anthropic.post("/messages").mock(return_value=Response(200, json=anthropic_body("Sure")))
    request = ChatRequest(
        messages=(
            Message("system", "You are terse."),
            Message("user", "Hi"),
            Message("system", "Answer in English."),
            Message("assistant", "Hello"),
            Message("user", "Help"),
        ),
        max_tokens=64,
    )
    resp = AnthropicAdapter(anthropic_config, model="claude-3-opus-20240229").chat_complete(request)
    payload = _payload(route)
    assert payload["system"] == "You are terse.\n\nAnswer in English."  # nosec B101 - asserts are appropriate in unit tests
    assert [m["role"] for m in payload["messages"]] == ["user", "assistant", "user"]  # nosec B101 - asserts are appropriate in unit tests
    assert payload["max_tokens"] == 64 and payload["model"] == "claude-3-opus-20240229"  # nosec B101 - asserts are appropriate in unit tests
    assert resp.message == Message("assistant", "Sure")  # nosec B101 - asserts are appropriate in unit tests


def test_chat_without_system_omits_field(anthropic_config, mock_anthropic):
    route = mock_anthropic.post("/messages").mock(return_value=Response(200, json=anthropic_body()))
    AnthropicAdapter(anthropic_config).chat_complete(ChatRequest(messages=(Message("user", "Hi"),)))
    assert "system" not in _payload(route)  # nosec B101 - asserts are appropriate in unit tests


def test_multiple_text_blocks_are_concatenated(anthropic_config, mock_anthropic):
    body = anthropic_body()
    body["content"] = [{"type": "text", "text": "Hel"}, {"type": "tool_use", "id": "t1"}, {"type": "text", "text": "lo"}]
    mock_anthropic.post("/messages").mock(return_value=Response(200, json=body))
    assert AnthropicAdapter(anthropic_config).complete(CompletionRequest(prompt="x")).text == "Hello"  # nosec B101 - asserts are appropriate in unit tests


def test_split_system_messages_helper():
    system, rest = split_system_messages((Message("user", "a"),))
    assert system is None and len(rest) == 1  # nosec B101 - asserts are appropriate in unit tests


@pytest.mark.parametrize(
    "status, error_type, kind",
    [
        (401, "authentication_error", ErrorKind.AUTHENTICATION),
        (403, "permission_error", ErrorKind.AUTHENTICATION),
        (400, "invalid_request_error", ErrorKind.VALIDATION),
        (529, "overloaded_error", ErrorKind.PROVIDER),
    ],
)
def test_error_envelope_classification(anthropic_config, mock_anthropic, status, error_type, kind):
    body = {"type": "error", "error": {"type": error_type, "message": "nope"}}
    mock_anthropic.post("/messages").mock(return_value=Response(status, json=body))
    with pytest.raises(ProviderError) as ei:
        AnthropicAdapter(anthropic_config).complete(CompletionRequest(prompt="hi"))
    assert ei.value.kind is kind and ei.value.code == error_type  # nosec B101 - asserts are appropriate in unit tests
    assert ei.value.provider == "anthropic"  # nosec B101 - asserts are appropriate in unit tests


def test_rate_limit_without_header_defaults_to_sixty_seconds(anthropic_config, mock_anthropic):
    body = {"type": "error", "error": {"type": "rate_limit_error", "message": "slow down"}}
    mock_anthropic.post("/messages").mock(return_value=Response(429, json=body))
    with pytest.raises(ProviderError) as ei:
        AnthropicAdapter(anthropic_config).complete(CompletionRequest(prompt="hi"))
    assert ei.value.kind is ErrorKind.RATE_LIMIT and ei.value.retry_after == 60  # nosec B101 - asserts are appropriate in unit tests


def test_prompt_too_long_is_token_limit(anthropic_config, mock_anthropic):
    body = {"type": "error", "error": {"type": "invalid_request_error", "message": "prompt is too long: 210000 tokens > 200000 maximum"}}
    mock_anthropic.post("/messages").mock(return_value=Response(400, json=body))
    with pytest.raises(ProviderError) as ei:
        AnthropicAdapter(anthropic_config).complete(CompletionRequest(prompt="long"))
    assert ei.value.kind is ErrorKind.TOKEN_LIMIT and ei.value.token_count == 210000  # nosec B101 - asserts are appropriate in unit tests


def test_unparsable_error_body(anthropic_config, mock_anthropic):
    mock_anthropic.post("/messages").mock(return_value=Response(500, text="internal"))
    with pytest.raises(ProviderError) as ei:
        AnthropicAdapter(anthropic_config).complete(CompletionRequest(prompt="hi"))
    assert ei.value.message == "Anthropic API error (status 500): internal"  # nosec B101 - asserts are appropriate in unit tests


def test_validate_config_enforces_anthropic_temperature_ceiling(anthropic_config):
    adapter = AnthropicAdapter(anthropic_config)
    adapter.validate_config(anthropic_config.with_temperature(1.0))
    with pytest.raises(ProviderError) as ei:
        adapter.validate_config(anthropic_config.with_temperature(1.5))
    assert ei.value.kind is ErrorKind.VALIDATION  # nosec B101 - asserts are appropriate in unit tests
    assert "0.0 and 1.0" in ei.value.message  # nosec B101 - asserts are appropriate in unit tests
    with pytest.raises(ProviderError, match="API key is required"):
        adapter.validate_config(Config())


def test_system_only_chat_is_rejected_before_sending(anthropic_config, mock_anthropic):
    route = mock_anthropic.post("/messages").mock(return_value=Response(200, json=anthropic_body()))
    with pytest.raises(ProviderError) as ei:
        AnthropicAdapter(anthropic_config).chat_complete(ChatRequest(messages=(Message("system", "rules"),)))
    assert ei.value.kind is ErrorKind.VALIDATION  # nosec B101 - asserts are appropriate in unit tests
    assert "non-system message" in ei.value.message  # nosec B101 - asserts are appropriate in unit tests
    assert route.call_count == 0  # nosec B101 - asserts are appropriate in unit tests


def test_padded_api_key_is_sent_trimmed(mock_anthropic):
    route = mock_anthropic.post("/messages").mock(return_value=Response(200, json=anthropic_body()))
    AnthropicAdapter(Config(api_key=f"  {ANTHROPIC_KEY}\n", max_retries=0)).complete(CompletionRequest(prompt="hi"))
    assert route.calls.last.request.headers["x-api-key"] == ANTHROPIC_KEY  # nosec B101 - asserts are appropriate in unit tests
