"""Unit tests for the immutable domain value types."""
from __future__ import annotations

import dataclasses

import pytest

from ai_providers.base.models import (
    ChatRequest,
    ChatResponse,
    CompletionRequest,
    CompletionResponse,
    Message,
    ProviderType,
    Usage,
)
from ai_providers.config import Config, default_config


def test_usage_total_is_derived():
    usage = Usage(prompt_tokens=7, completion_tokens=5)
    assert usage.total_tokens == 12  # nosec B101 - asserts are appropriate in unit tests
    assert usage.to_dict() == {"prompt_tokens": 7, "completion_tokens": 5, "total_tokens": 12}  # nosec B101 - asserts are appropriate in unit tests


def test_usage_rejects_negative_counts():
    with pytest.raises(ValueError):
        Usage(prompt_tokens=-1)


def test_requests_store_tuples_and_are_frozen():
    req = CompletionRequest(prompt="hi", stop=["a", "b"])  # type: ignore[arg-type]
    chat = ChatRequest(messages=[Message("user", "hi")])  # type: ignore[arg-type]
    assert req.stop == ("a", "b")  # nosec B101 - asserts are appropriate in unit tests
    assert isinstance(chat.messages, tuple)  # nosec B101 - asserts are appropriate in unit tests
    with pytest.raises(dataclasses.FrozenInstanceError):
        req.prompt = "changed"  # type: ignore[misc]


def test_chat_request_system_messages_and_to_dict():
    chat = ChatRequest(messages=(Message("system", "be brief"), Message("user", "hi")), temperature=0.3)
    assert chat.system_messages() == (Message("system", "be brief"),)  # nosec B101 - asserts are appropriate in unit tests
    assert chat.to_dict()["messages"][1] == {"role": "user", "content": "hi"}  # nosec B101 - asserts are appropriate in unit tests


def test_responses_serialize():
    resp = CompletionResponse(text="ok", usage=Usage(1, 2), finish_reason="stop")
    chat = ChatResponse(message=Message("assistant", "hello"), usage=Usage(3, 4))
    assert resp.to_dict()["usage"]["total_tokens"] == 3  # nosec B101 - asserts are appropriate in unit tests
    assert chat.text == "hello" and chat.to_dict()["finish_reason"] == ""  # nosec B101 - asserts are appropriate in unit tests


def test_provider_type_values():
    assert ProviderType.values() == ("openai", "anthropic", "google")  # nosec B101 - asserts are appropriate in unit tests
    assert ProviderType("anthropic") is ProviderType.ANTHROPIC  # nosec B101 - asserts are appropriate in unit tests


def test_config_defaults_and_builders_return_copies():
    base = default_config()
    assert base.timeout == 30.0 and base.max_retries == 3  # nosec B101 - asserts are appropriate in unit tests
    tuned = base.with_api_key("sk-abc").with_timeout(5).with_max_retries(1).with_temperature(0.2).with_max_tokens(10)
    assert base.api_key == "" and base.temperature is None  # nosec B101 - asserts are appropriate in unit tests
    assert (tuned.timeout, tuned.max_retries, tuned.temperature, tuned.max_tokens) == (5, 1, 0.2, 10)  # nosec B101 - asserts are appropriate in unit tests
    assert tuned.with_base_url("https://proxy").base_url == "https://proxy"  # nosec B101 - asserts are appropriate in unit tests


def test_config_never_exposes_api_key():
    cfg = Config(api_key="sk-secret-value-1234567890")  # pragma: allowlist secret
    assert "sk-secret" not in repr(cfg)  # nosec B101 - asserts are appropriate in unit tests
    assert cfg.to_dict()["api_key"] == "***"  # nosec B101 - asserts are appropriate in unit tests
