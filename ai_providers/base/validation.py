"""Configuration validator.

Purpose
-------
Check a :class:`~ai_providers.config.Config` against a provider before any
adapter is constructed. All checks are local and pure: nothing here touches
the network or mutates its input.

Failure modes
-------------
- Every failure raises ``ProviderError(kind=validation)`` carrying the
  provider name and a stable, human-readable message. Checks short-circuit on
  the first failure in this order: API key presence, provider membership, key
  shape, timeout, max retries, temperature, max tokens.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping, Tuple

from .errors import ErrorKind, ProviderError
from .limits import CONFIG_MAX_TEMPERATURE, get_provider_token_limit
from .models import ProviderType

if TYPE_CHECKING:  # pragma: no cover
    from ..config import Config

MIN_API_KEY_LENGTH = 20


@dataclass(frozen=True)
class KeyShape:
    """Expected API key shape for one provider."""

    label: str
    prefix: str = ""
    min_length: int = MIN_API_KEY_LENGTH


KEY_SHAPES: Mapping[str, KeyShape] = {
    ProviderType.OPENAI.value: KeyShape("OpenAI", "sk-"),
    ProviderType.ANTHROPIC.value: KeyShape("Anthropic", "sk-ant-"),
    ProviderType.GOOGLE.value: KeyShape("Google AI"),
}


def supported_providers() -> Tuple[str, ...]:
    """Return the provider identifiers known to the package."""
    return ProviderType.values()


def is_valid_provider(provider: "str | ProviderType") -> bool:
    value = provider.value if isinstance(provider, ProviderType) else provider
    return value in supported_providers()


def _fail(message: str, provider: str) -> ProviderError:
    return ProviderError(ErrorKind.VALIDATION, message, provider=provider)


def validate_provider_type(provider: "str | ProviderType") -> None:
    """Raise a validation error when ``provider`` is not a known identifier."""
    value = provider.value if isinstance(provider, ProviderType) else str(provider)
    if not is_valid_provider(value):
        raise _fail(
            f"unsupported provider '{value}', supported providers: {', '.join(supported_providers())}",
            value,
        )


def validate_api_key(api_key: str, provider: str) -> None:
    """Check the key's prefix and minimum length for ``provider``."""
    shape = KEY_SHAPES.get(provider)
    if shape is None:
        return
    if shape.prefix and not api_key.startswith(shape.prefix):
        raise _fail(
            f"invalid API key format: {shape.label} API key should start with '{shape.prefix}'",
            provider,
        )
    if len(api_key) < shape.min_length:
        raise _fail(f"invalid API key format: {shape.label} API key appears to be too short", provider)


def validate_config(config: "Config", provider: "str | ProviderType") -> None:
    """Validate ``config`` for ``provider``.

    Raises:
        ProviderError: kind ``validation`` describing the first failed check.
    """
    name = provider.value if isinstance(provider, ProviderType) else str(provider)

    api_key = (config.api_key or "").strip()
    if not api_key:
        raise _fail("API key is required", name)

    validate_provider_type(name)
    validate_api_key(api_key, name)

    if config.timeout < 0:
        raise _fail("timeout must be non-negative", name)

    if config.max_retries < 0:
        raise _fail("max retries must be non-negative", name)

    if config.temperature is not None and not 0.0 <= config.temperature <= CONFIG_MAX_TEMPERATURE:
        raise _fail(
            f"temperature must be between 0.0 and {CONFIG_MAX_TEMPERATURE:.1f}, got: {config.temperature}",
            name,
        )

    if config.max_tokens is not None:
        if config.max_tokens <= 0:
            raise _fail("max tokens must be positive", name)
        limit = get_provider_token_limit(name)
        if config.max_tokens > limit:
            raise _fail(
                f"max tokens exceeds provider limit of {limit}, got: {config.max_tokens}",
                name,
            )


__all__ = [
    "MIN_API_KEY_LENGTH",
    "KeyShape",
    "KEY_SHAPES",
    "supported_providers",
    "is_valid_provider",
    "validate_provider_type",
    "validate_api_key",
    "validate_config",
]
