"""Request normalizer.

Purpose
-------
Turn a caller's request into a provider-ready copy in four fixed steps:

1. structural validation (prompt, messages, numeric fields);
2. conversation structure (chat only);
3. clamping into the provider's bounds;
4. default fill from ``Config`` for fields the request left empty.

Only steps 1 and 2 can fail, and always with ``ProviderError(kind=validation)``.
Inputs are never mutated; a new frozen request is returned. Applying the
normalizer to its own output returns an equal request.
"""
from __future__ import annotations

import math
from dataclasses import replace
from typing import TYPE_CHECKING, Optional, Sequence, Tuple, Union, overload

from ..constants import CONVERSATION_ERROR_PREFIX
from ..errors import ErrorKind, ProviderError
from ..limits import get_max_system_messages, get_provider_limits, requires_non_system_message
from ..models import VALID_ROLES, ChatRequest, CompletionRequest, Message, ProviderType

if TYPE_CHECKING:  # pragma: no cover
    from ...config import Config

Request = Union[CompletionRequest, ChatRequest]


def _provider_key(provider: "str | ProviderType") -> str:
    return provider.value if isinstance(provider, ProviderType) else str(provider)


def _invalid(message: str, provider: str) -> ProviderError:
    return ProviderError(ErrorKind.VALIDATION, message, provider=provider)


# ---- Step 1: structural validation -----------------------------------------

def validate_message(message: Message, index: int) -> Optional[str]:
    """Return a problem description for ``message`` or ``None`` when valid."""
    role = message.role or ""
    if not role.strip():
        return f"message {index}: role is required"
    if not (message.content or "").strip():
        return f"message {index}: content is required"
    if role not in VALID_ROLES:
        return f"message {index}: invalid role '{role}', must be one of: {', '.join(VALID_ROLES)}"
    return None


def _validate_sampling(temperature: Optional[float], max_tokens: Optional[int]) -> Optional[str]:
    if temperature is not None and not math.isfinite(temperature):
        return f"temperature must be a finite number, got: {temperature}"
    if temperature is not None and temperature < 0.0:
        return f"temperature must be non-negative, got: {temperature}"
    if max_tokens is not None and max_tokens <= 0:
        return f"max_tokens must be positive, got: {max_tokens}"
    return None


def validate_completion_request(request: CompletionRequest) -> Optional[str]:
    if not (request.prompt or "").strip():
        return "prompt is required and cannot be empty"
    return _validate_sampling(request.temperature, request.max_tokens)


def validate_chat_request(request: ChatRequest) -> Optional[str]:
    if not request.messages:
        return "messages are required: conversation must have at least one message"
    for index, message in enumerate(request.messages):
        if problem := validate_message(message, index):
            return problem
    return _validate_sampling(request.temperature, request.max_tokens)


# ---- Step 2: conversation structure ----------------------------------------

def validate_conversation_structure(messages: Sequence[Message], provider: "str | ProviderType") -> Optional[str]:
    """Check conversation ordering rules and the provider's system-message cap.

    Consecutive user messages are allowed; system messages may appear
    anywhere and are only counted.
    """
    if not messages:
        return "conversation must have at least one message"
    system_count = 0
    seen_non_system = False
    for index, message in enumerate(messages):
        if message.role == "system":
            system_count += 1
            continue
        if message.role == "assistant" and not seen_non_system:
            return f"conversation cannot start with assistant message at position {index}"
        seen_non_system = True
    if not seen_non_system and requires_non_system_message(provider):
        return "conversation must contain a non-system message"
    cap = get_max_system_messages(_provider_key(provider))
    if cap is not None and system_count > cap:
        return f"too many system messages ({system_count}), {_provider_key(provider).capitalize()} recommends fewer system messages"
    return None


# ---- Step 3: clamping -------------------------------------------------------

def clamp_temperature(temperature: Optional[float], provider: "str | ProviderType") -> Optional[float]:
    if temperature is None:
        return None
    return min(max(temperature, 0.0), get_provider_limits(provider).max_temperature)


def clamp_max_tokens(max_tokens: Optional[int], provider: "str | ProviderType") -> Optional[int]:
    if max_tokens is None:
        return None
    limits = get_provider_limits(provider)
    if max_tokens <= 0:
        return limits.default_max_tokens
    return min(max_tokens, limits.token_limit)


def clamp_stop_sequences(stop: Sequence[str], provider: "str | ProviderType") -> Tuple[str, ...]:
    return tuple(stop[: get_provider_limits(provider).max_stop_sequences])


# ---- Step 4: default fill ---------------------------------------------------

def _default_temperature(config: "Config", provider: str) -> Optional[float]:
    value = config.temperature
    if value is not None and 0.0 <= value <= get_provider_limits(provider).max_temperature:
        return value
    return None


def _default_max_tokens(config: "Config", provider: str) -> Optional[int]:
    value = config.max_tokens
    if value is not None and 0 < value <= get_provider_limits(provider).token_limit:
        return value
    return None


# ---- Public entry points ----------------------------------------------------

def normalize_completion_request(
    request: CompletionRequest, config: "Config", provider: "str | ProviderType"
) -> CompletionRequest:
    """Validate, clamp and default-fill a completion request."""
    key = _provider_key(provider)
    if problem := validate_completion_request(request):
        raise _invalid(problem, key)

    temperature = clamp_temperature(request.temperature, key)
    max_tokens = clamp_max_tokens(request.max_tokens, key)
    if temperature is None:
        temperature = _default_temperature(config, key)
    if max_tokens is None:
        max_tokens = _default_max_tokens(config, key)
    return replace(
        request,
        temperature=temperature,
        max_tokens=max_tokens,
        stop=clamp_stop_sequences(request.stop, key),
    )


def normalize_chat_request(request: ChatRequest, config: "Config", provider: "str | ProviderType") -> ChatRequest:
    """Validate structure and conversation, then clamp and default-fill."""
    key = _provider_key(provider)
    if problem := validate_chat_request(request):
        raise _invalid(problem, key)
    if problem := validate_conversation_structure(request.messages, key):
        raise _invalid(CONVERSATION_ERROR_PREFIX + problem, key)

    temperature = clamp_temperature(request.temperature, key)
    max_tokens = clamp_max_tokens(request.max_tokens, key)
    if temperature is None:
        temperature = _default_temperature(config, key)
    if max_tokens is None:
        max_tokens = _default_max_tokens(config, key)
    return replace(request, temperature=temperature, max_tokens=max_tokens)


@overload
def normalize(request: CompletionRequest, config: "Config", provider: "str | ProviderType") -> CompletionRequest: ...


@overload
def normalize(request: ChatRequest, config: "Config", provider: "str | ProviderType") -> ChatRequest: ...


def normalize(request: Request, config: "Config", provider: "str | ProviderType") -> Request:
    """Dispatch to the completion or chat normalizer by request type."""
    if isinstance(request, CompletionRequest):
        return normalize_completion_request(request, config, provider)
    if isinstance(request, ChatRequest):
        return normalize_chat_request(request, config, provider)
    raise TypeError(f"unsupported request type: {type(request).__name__}")


__all__ = [
    "validate_message",
    "validate_completion_request",
    "validate_chat_request",
    "validate_conversation_structure",
    "clamp_temperature",
    "clamp_max_tokens",
    "clamp_stop_sequences",
    "normalize_completion_request",
    "normalize_chat_request",
    "normalize",
]
