"""Provider bounds table and provider-specific policy values.

Purpose
-------
Single source of truth for the per-provider numeric bounds used by the
configuration validator, the request normalizer and the parameter mapper.
These values are contractual: clamping results depend on them bit-for-bit.

Notes
-----
- Unknown providers resolve to conservative fallback bounds rather than
  raising, so helpers stay total. Provider membership is enforced separately
  by ``ai_providers.base.validation``.
- ``MAX_SYSTEM_MESSAGES`` caps system messages only for providers present in
  the mapping; it is a provider-specific heuristic, not a general rule.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Mapping

from .models import ProviderType

# Applied when neither the request nor the config sets max_tokens and the
# provider requires the field on the wire.
DEFAULT_MAX_TOKENS = 1024

# Upper bound accepted by the configuration validator regardless of provider.
CONFIG_MAX_TEMPERATURE = 2.0


@dataclass(frozen=True)
class ProviderLimits:
    """Numeric bounds for one provider.

    Attributes:
        max_temperature: Inclusive upper bound; the lower bound is always 0.
        token_limit: Inclusive upper bound for ``max_tokens``.
        max_stop_sequences: Maximum number of stop sequences forwarded.
        default_max_tokens: Fallback completion budget.
    """

    max_temperature: float
    token_limit: int
    max_stop_sequences: int
    default_max_tokens: int = DEFAULT_MAX_TOKENS


_FALLBACK_LIMITS = ProviderLimits(max_temperature=1.0, token_limit=4096, max_stop_sequences=4)

PROVIDER_LIMITS: Mapping[str, ProviderLimits] = MappingProxyType(
    {
        ProviderType.OPENAI.value: ProviderLimits(max_temperature=2.0, token_limit=4096, max_stop_sequences=4),
        ProviderType.ANTHROPIC.value: ProviderLimits(max_temperature=1.0, token_limit=100000, max_stop_sequences=10),
        ProviderType.GOOGLE.value: ProviderLimits(max_temperature=1.0, token_limit=8192, max_stop_sequences=5),
    }
)

MAX_SYSTEM_MESSAGES: Mapping[str, int] = MappingProxyType({ProviderType.ANTHROPIC.value: 5})

# Providers that lift system messages out of the conversation and reject a
# request whose remaining message list is empty.
NON_SYSTEM_MESSAGE_REQUIRED: FrozenSet[str] = frozenset({ProviderType.ANTHROPIC.value})


def _key(provider: "str | ProviderType") -> str:
    return provider.value if isinstance(provider, ProviderType) else str(provider)


def get_provider_limits(provider: "str | ProviderType") -> ProviderLimits:
    """Return the bounds for ``provider`` (fallback bounds when unknown)."""
    return PROVIDER_LIMITS.get(_key(provider), _FALLBACK_LIMITS)


def get_provider_max_temperature(provider: "str | ProviderType") -> float:
    return get_provider_limits(provider).max_temperature


def get_provider_token_limit(provider: "str | ProviderType") -> int:
    return get_provider_limits(provider).token_limit


def get_provider_max_stop_sequences(provider: "str | ProviderType") -> int:
    return get_provider_limits(provider).max_stop_sequences


def get_default_max_tokens(provider: "str | ProviderType") -> int:
    return get_provider_limits(provider).default_max_tokens


def get_max_system_messages(provider: "str | ProviderType") -> "int | None":
    """Return the system-message cap for ``provider`` or ``None`` when uncapped."""
    return MAX_SYSTEM_MESSAGES.get(_key(provider))


def requires_non_system_message(provider: "str | ProviderType") -> bool:
    return _key(provider) in NON_SYSTEM_MESSAGE_REQUIRED


__all__ = [
    "DEFAULT_MAX_TOKENS",
    "CONFIG_MAX_TEMPERATURE",
    "ProviderLimits",
    "PROVIDER_LIMITS",
    "MAX_SYSTEM_MESSAGES",
    "NON_SYSTEM_MESSAGE_REQUIRED",
    "get_provider_limits",
    "get_provider_max_temperature",
    "get_provider_token_limit",
    "get_provider_max_stop_sequences",
    "get_default_max_tokens",
    "get_max_system_messages",
    "requires_non_system_message",
]
