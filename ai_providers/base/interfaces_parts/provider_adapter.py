"""ProviderAdapter Protocol (single-class module).

Defines the capability set every provider adapter satisfies. The client and
the factory depend only on this contract, never on a concrete adapter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, FrozenSet, Optional, Protocol, runtime_checkable

from ..cancellation import CancellationToken
from ..models import ChatRequest, ChatResponse, CompletionRequest, CompletionResponse

if TYPE_CHECKING:  # pragma: no cover
    from ...config import Config


@runtime_checkable
class ProviderAdapter(Protocol):
    """Uniform adapter contract.

    Implementations map normalized requests to their wire schema, issue one
    call through the transport, and map the reply back to generic responses.
    Failures surface as ``ProviderError``; adapters never re-issue requests.
    """

    @property
    def name(self) -> str:
        """Canonical provider identifier, e.g. ``"openai"``."""
        ...

    def complete(self, request: CompletionRequest, token: Optional[CancellationToken] = None) -> CompletionResponse:
        """Execute a single-prompt completion."""
        ...

    def chat_complete(self, request: ChatRequest, token: Optional[CancellationToken] = None) -> ChatResponse:
        """Execute a chat completion."""
        ...

    def validate_config(self, config: "Config") -> None:
        """Raise ``ProviderError(kind=validation)`` when ``config`` is unusable."""
        ...

    def supported_features(self) -> FrozenSet[str]:
        """Return the feature names this adapter supports."""
        ...


__all__ = ["ProviderAdapter"]
