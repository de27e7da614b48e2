"""OpenAI provider adapter built on BaseHTTPAdapter.

Maps normalized requests onto OpenAI's legacy completions endpoint
(``POST /completions``) and the chat completions endpoint
(``POST /chat/completions``), authenticating with ``Authorization: Bearer``.

Usage totals are recomputed from the reported prompt and completion counts so
the returned ``Usage`` is always internally consistent. Retry, backoff and
cancellation are inherited from the transport; error bodies are classified by
``parse_provider_error`` using OpenAI's ``{"error": {...}}`` envelope.
"""

from __future__ import annotations

from typing import Dict, Optional

import httpx

from ..base.adapters import BaseHTTPAdapter
from ..base.cancellation import CancellationToken
from ..base.constants import (
    FEATURE_CHAT_COMPLETION,
    FEATURE_COMPLETION,
    FEATURE_FUNCTION_CALLING,
    FEATURE_MAX_TOKENS,
    FEATURE_STOP_SEQUENCES,
    FEATURE_STREAMING,
    FEATURE_SYSTEM_MESSAGES,
    FEATURE_TEMPERATURE,
)
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
from ..config.defaults import (
    OPENAI_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_CHAT_MODEL,
    OPENAI_DEFAULT_COMPLETION_MODEL,
)
from .schemas import (
    OpenAIChatRequest,
    OpenAIChatResponse,
    OpenAICompletionRequest,
    OpenAICompletionResponse,
    OpenAIMessage,
    OpenAIUsage,
)

COMPLETIONS_PATH = "/completions"
CHAT_COMPLETIONS_PATH = "/chat/completions"


def _usage(wire: OpenAIUsage) -> Usage:
    return Usage(prompt_tokens=wire.prompt_tokens, completion_tokens=wire.completion_tokens)


class OpenAIAdapter(BaseHTTPAdapter):
    """Adapter for the OpenAI REST API."""

    provider_name = ProviderType.OPENAI.value
    default_base_url = OPENAI_DEFAULT_BASE_URL
    features = frozenset(
        {
            FEATURE_COMPLETION,
            FEATURE_CHAT_COMPLETION,
            FEATURE_STREAMING,
            FEATURE_TEMPERATURE,
            FEATURE_MAX_TOKENS,
            FEATURE_STOP_SEQUENCES,
            FEATURE_SYSTEM_MESSAGES,
            FEATURE_FUNCTION_CALLING,
        }
    )

    def __init__(
        self,
        config: Config,
        *,
        http_client: Optional[httpx.Client] = None,
        policy: Optional[RetryPolicy] = None,
        completion_model: str = OPENAI_DEFAULT_COMPLETION_MODEL,
        chat_model: str = OPENAI_DEFAULT_CHAT_MODEL,
    ) -> None:
        super().__init__(config, http_client=http_client, policy=policy)
        self.completion_model = completion_model
        self.chat_model = chat_model

    def _auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self._api_key}"}

    # ----- Completion -----
    def complete(self, request: CompletionRequest, token: Optional[CancellationToken] = None) -> CompletionResponse:
        """Run a single-prompt completion against ``/completions``."""
        return self._observe("complete", self.completion_model, lambda: self._complete(request, token))

    def _complete(self, request: CompletionRequest, token: Optional[CancellationToken]) -> CompletionResponse:
        payload = OpenAICompletionRequest(
            model=self.completion_model,
            prompt=request.prompt,
            max_tokens=request.max_tokens,
            temperature=request.temperature,
            stop=list(request.stop) or None,
        )
        data = self._post(COMPLETIONS_PATH, payload.model_dump(exclude_none=True), token)
        wire = self._decode(OpenAICompletionResponse, data)
        choice = wire.choices[0] if wire.choices else None
        return CompletionResponse(
            text=choice.text if choice else "",
            usage=_usage(wire.usage),
            finish_reason=(choice.finish_reason or "") if choice else "",
        )

    # ----- Chat -----
    def chat_complete(self, request: ChatRequest, token: Optional[CancellationToken] = None) -> ChatResponse:
        """Run a chat completion against ``/chat/completions`` (roles preserved)."""
        return self._observe("chat_complete", self.chat_model, lambda: self._chat_complete(request, token))

    def _chat_complete(self, request: ChatRequest, token: Optional[CancellationToken]) -> ChatResponse:
        payload = OpenAIChatRequest(
            model=self.chat_model,
            messages=[OpenAIMessage(role=m.role, content=m.content) for m in request.messages],
            max_tokens=request.max_tokens,
            temperature=request.temperature,
        )
        data = self._post(CHAT_COMPLETIONS_PATH, payload.model_dump(exclude_none=True), token)
        wire = self._decode(OpenAIChatResponse, data)
        if wire.choices:
            choice = wire.choices[0]
            message = Message(role=choice.message.role or "assistant", content=choice.message.content or "")
            finish_reason = choice.finish_reason or ""
        else:
            message = Message(role="assistant", content="")
            finish_reason = ""
        return ChatResponse(message=message, usage=_usage(wire.usage), finish_reason=finish_reason)


__all__ = ["OpenAIAdapter", "COMPLETIONS_PATH", "CHAT_COMPLETIONS_PATH"]
