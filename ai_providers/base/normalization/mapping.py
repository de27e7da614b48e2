"""Parameter mapping between providers.

``ParameterMapper`` translates sampling parameters tuned for one provider into
the range of another, e.g. when replaying a request written for OpenAI against
Anthropic. Unlike the normalizer's clamping, temperatures above 1.0 coming
from OpenAI are halved before being clamped, preserving their relative
position in the narrower range.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from ..limits import get_provider_limits
from ..models import ProviderType


@dataclass(frozen=True)
class ParameterMapper:
    """Map temperature, max tokens and stop sequences from ``source`` to ``target``."""

    source: ProviderType
    target: ProviderType

    def map_temperature(self, temperature: float) -> float:
        ceiling = get_provider_limits(self.target).max_temperature
        if self.source is ProviderType.OPENAI and ceiling < 2.0 and temperature > 1.0:
            temperature = temperature / 2.0
        return min(max(temperature, 0.0), ceiling)

    def map_max_tokens(self, max_tokens: int) -> int:
        """Clamp to the target limit; non-positive values take the target default."""
        limits = get_provider_limits(self.target)
        if max_tokens <= 0:
            return limits.default_max_tokens
        return min(max_tokens, limits.token_limit)

    def map_stop_sequences(self, stop: Sequence[str]) -> Tuple[str, ...]:
        return tuple(stop[: get_provider_limits(self.target).max_stop_sequences])


__all__ = ["ParameterMapper"]
