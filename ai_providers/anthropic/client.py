"""Anthropic provider adapter built on BaseHTTPAdapter.

Both operations use the Messages API (``POST /messages``):

- completion: the prompt becomes a single ``user`` message;
- chat: system messages are lifted out of the conversation and joined with a
  blank line into the ``system`` field, the remaining messages keep their
  order.

``max_tokens`` is always sent (falling back to the provider default) and
stop sequences travel as ``stop_sequences``. Authentication uses the
``x-api-key`` header plus the fixed ``anthropic-version`` header.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import httpx

from ..base.adapters import BaseHTTPAdapter
from ..base.cancellation import CancellationToken
from ..base.constants import (
    FEATURE_CHAT_COMPLETION,
    FEATURE_COMPLETION,
    FEATURE_MAX_TOKENS,
    FEATURE_STOP_SEQUENCES,
    FEATURE_STREAMING,
    FEATURE_SYSTEM_MESSAGES,
    FEATURE_TEMPERATURE,
    SYSTEM_MESSAGE_SEPARATOR,
)
from ..base.errors import ErrorKind, ProviderError
from ..base.limits import get_default_max_tokens, get_provider_max_temperature
from ..base.models import (
    ChatRequest,
    ChatResponse,
    CompletionRequest,
    CompletionResponse,
    Message,
    ProviderType,
    Usage,
)
from ..base.resilience.retry import RetryPolicy
from ..config import Config
from ..config.defaults import ANTHROPIC_API_VERSION, ANTHROPIC_DEFAULT_BASE_URL, ANTHROPIC_DEFAULT_MODEL
from .schemas import AnthropicMessage, AnthropicMessagesRequest, AnthropicMessagesResponse

MESSAGES_PATH = "/messages"


def split_system_messages(messages: Tuple[Message, ...]) -> Tuple[Optional[str], List[AnthropicMessage]]:
    """Return ``(system, conversation)`` for the Messages API.

    All system messages, adjacent or not, are joined with a blank line.
    """
    system_parts: List[str] = []
    conversation: List[AnthropicMessage] = []
    for message in messages:
        if message.is_system():
            system_parts.append(message.content)
        else:
            conversation.append(AnthropicMessage(role=message.role, content=message.content))
    system = SYSTEM_MESSAGE_SEPARATOR.join(system_parts) if system_parts else None
    return system, conversation


class AnthropicAdapter(BaseHTTPAdapter):
    """Adapter for the Anthropic Messages API."""

    provider_name = ProviderType.ANTHROPIC.value
    default_base_url = ANTHROPIC_DEFAULT_BASE_URL
    features = frozenset(
        {
            FEATURE_COMPLETION,
            FEATURE_CHAT_COMPLETION,
            FEATURE_STREAMING,
            FEATURE_TEMPERATURE,
            FEATURE_MAX_TOKENS,
            FEATURE_STOP_SEQUENCES,
            FEATURE_SYSTEM_MESSAGES,
        }
    )

    def __init__(
        self,
        config: Config,
        *,
        http_client: Optional[httpx.Client] = None,
        policy: Optional[RetryPolicy] = None,
        model: str = ANTHROPIC_DEFAULT_MODEL,
    ) -> None:
        super().__init__(config, http_client=http_client, policy=policy)
        self.model = model

    def _auth_headers(self) -> Dict[str, str]:
        return {"x-api-key": self._api_key, "anthropic-version": ANTHROPIC_API_VERSION}

    def validate_config(self, config: Config) -> None:
        """Shared checks plus Anthropic's tighter temperature ceiling."""
        super().validate_config(config)
        ceiling = get_provider_max_temperature(self.provider_name)
        if config.temperature is not None and not 0.0 <= config.temperature <= ceiling:
            raise ProviderError(
                ErrorKind.VALIDATION,
                f"temperature must be between 0.0 and {ceiling:.1f} for Anthropic",
                provider=self.provider_name,
            )

    def _max_tokens(self, requested: Optional[int]) -> int:
        return requested if requested is not None else get_default_max_tokens(self.provider_name)

    def _send(self, payload: AnthropicMessagesRequest, token: Optional[CancellationToken]) -> AnthropicMessagesResponse:
        data = self._post(MESSAGES_PATH, payload.model_dump(exclude_none=True), token)
        return self._decode(AnthropicMessagesResponse, data)

    @staticmethod
    def _usage(wire: AnthropicMessagesResponse) -> Usage:
        return Usage(prompt_tokens=wire.usage.input_tokens, completion_tokens=wire.usage.output_tokens)

    # ----- Completion -----
    def complete(self, request: CompletionRequest, token: Optional[CancellationToken] = None) -> CompletionResponse:
        """Send the prompt as a single user message."""
        return self._observe("complete", self.model, lambda: self._complete(request, token))

    def _complete(self, request: CompletionRequest, token: Optional[CancellationToken]) -> CompletionResponse:
        payload = AnthropicMessagesRequest(
            model=self.model,
            max_tokens=self._max_tokens(request.max_tokens),
            messages=[AnthropicMessage(role="user", content=request.prompt)],
            temperature=request.temperature,
            stop_sequences=list(request.stop) or None,
        )
        wire = self._send(payload, token)
        return CompletionResponse(text=wire.text(), usage=self._usage(wire), finish_reason=wire.stop_reason or "")

    # ----- Chat -----
    def chat_complete(self, request: ChatRequest, token: Optional[CancellationToken] = None) -> ChatResponse:
        """Send the conversation with system messages lifted into ``system``."""
        return self._observe("chat_complete", self.model, lambda: self._chat_complete(request, token))

    def _chat_complete(self, request: ChatRequest, token: Optional[CancellationToken]) -> ChatResponse:
        system, conversation = split_system_messages(request.messages)
        if not conversation:
            raise ProviderError(
                ErrorKind.VALIDATION, "conversation must contain a non-system message", provider=self.provider_name
            )
        payload = AnthropicMessagesRequest(
            model=self.model,
            max_tokens=self._max_tokens(request.max_tokens),
            messages=conversation,
            system=system,
            temperature=request.temperature,
        )
        wire = self._send(payload, token)
        message = Message(role=wire.role or "assistant", content=wire.text())
        return ChatResponse(message=message, usage=self._usage(wire), finish_reason=wire.stop_reason or "")


__all__ = ["AnthropicAdapter", "MESSAGES_PATH", "split_system_messages"]
