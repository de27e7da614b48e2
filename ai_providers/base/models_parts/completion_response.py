"""CompletionResponse DTO returned by ``ProviderAdapter.complete``."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from .usage import Usage


@dataclass(frozen=True)
class CompletionResponse:
    """Generated text plus usage for a completion request.

    Attributes:
        text: Generated text (may be empty when the provider returned nothing).
        usage: Token accounting for the exchange.
        finish_reason: Provider-native stop reason, normalized to a string.
    """

    text: str
    usage: Usage = field(default_factory=Usage)
    finish_reason: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "usage": self.usage.to_dict(),
            "finish_reason": self.finish_reason,
        }


__all__ = ["CompletionResponse"]
