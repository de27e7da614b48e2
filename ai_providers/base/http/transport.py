"""Retrying HTTP transport used by provider adapters.

Purpose:
    Issue one logical request as one or more sequential HTTP attempts,
    replaying a fully buffered body, with exponential backoff between
    attempts and prompt cancellation.

External dependencies:
    - ``httpx`` for the synchronous client (pooled via ``get_httpx_client``
      unless a client is injected).

Retry semantics:
    - Total attempts are ``max_retries + 1``.
    - ``httpx.TransportError`` (connect, DNS, read/connect timeouts) is always
      eligible for another attempt. When the budget is exhausted a
      ``ProviderError(kind=network)`` is raised carrying the attempt count and
      the last httpx exception as cause.
    - Status 429 and any 5xx are eligible for another attempt; the discarded
      response is closed first. On the final attempt the response is returned
      so the adapter can classify it. Every other status is returned
      immediately.
    - Backoff after attempt ``n`` (0-based) is ``min(30, 2**n)`` seconds by
      default, interruptible by the cancellation token.
    - A timeout of 0 resolves to ``DEFAULT_TIMEOUT_SECONDS`` per attempt.

Failure modes:
    - ``CancelledError`` when the token fires before an attempt or during a
      backoff sleep.
"""

from __future__ import annotations

import json
import time
from typing import Any, Mapping, Optional, Union

import httpx

from ...config.defaults import DEFAULT_TIMEOUT_SECONDS
from ..cancellation import CancellationToken, CancelledError
from ..errors import ErrorKind, ProviderError
from ..log_support import LogContext
from ..logging import get_logger, normalized_log_event
from ..resilience.retry import DEFAULT_RETRY_POLICY, RetryPolicy
from .client import get_httpx_client

Body = Union[bytes, str, Mapping[str, Any], None]


def buffer_body(body: Body) -> bytes:
    """Return ``body`` as bytes so it can be replayed verbatim on retry."""
    if body is None:
        return b""
    if isinstance(body, bytes):
        return body
    if isinstance(body, str):
        return body.encode("utf-8")
    return json.dumps(body, ensure_ascii=False).encode("utf-8")


class TransportClient:
    """Send HTTP requests with bounded retries and cooperative cancellation.

    Instances hold no per-call state, so one transport may serve concurrent
    calls from many threads.
    """

    def __init__(
        self,
        timeout: float,
        max_retries: int,
        provider: str,
        *,
        http_client: Optional[httpx.Client] = None,
        policy: Optional[RetryPolicy] = None,
    ) -> None:
        # Zero (or negative) means "use the default", never "wait forever".
        self.timeout = timeout if timeout > 0 else DEFAULT_TIMEOUT_SECONDS
        self.max_retries = max(0, max_retries)
        self.provider = provider
        self.policy = policy or DEFAULT_RETRY_POLICY
        self._http_client = http_client
        self._logger = get_logger("ai_providers.transport")

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def _client(self) -> httpx.Client:
        if self._http_client is not None:
            return self._http_client
        return get_httpx_client(self.provider, self.timeout)

    def _backoff(self, attempt: int, token: Optional[CancellationToken]) -> float:
        delay = self.policy.delay_for(attempt)
        if token is None:
            time.sleep(delay)
        elif token.wait(delay):
            raise CancelledError(token.reason or "operation cancelled")
        return delay

    def _record(
        self,
        attempt: int,
        *,
        status: Optional[int],
        will_retry: bool,
        delay: Optional[float],
        error: Optional[BaseException] = None,
    ) -> None:
        normalized_log_event(
            self._logger,
            "http.attempt",
            LogContext(provider=self.provider),
            phase="attempt",
            attempt=attempt + 1,
            error_code=type(error).__name__ if error is not None else None,
            max_attempts=self.max_attempts,
            status=status,
            will_retry=will_retry,
            delay=delay,
        )
        if self.policy.attempt_logger is not None:
            self.policy.attempt_logger(
                attempt=attempt + 1,
                max_attempts=self.max_attempts,
                status=status,
                delay=delay,
                error=error,
            )

    def send(
        self,
        method: str,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Body = None,
        token: Optional[CancellationToken] = None,
    ) -> httpx.Response:
        """Send the request, retrying per policy, and return the final response.

        Raises:
            ProviderError: kind ``network`` once transport failures exhaust the
                attempt budget.
            CancelledError: when ``token`` is cancelled or its deadline passes.
        """
        content = buffer_body(body)
        client = self._client()
        last_attempt = self.max_attempts - 1

        for attempt in range(self.max_attempts):
            if token is not None:
                token.raise_if_cancelled()
            try:
                response = client.request(
                    method,
                    url,
                    headers=dict(headers or {}),
                    content=content,
                    timeout=self.timeout,
                )
            except httpx.TransportError as exc:
                if attempt < last_attempt:
                    delay = self.policy.delay_for(attempt)
                    self._record(attempt, status=None, will_retry=True, delay=delay, error=exc)
                    self._backoff(attempt, token)
                    continue
                self._record(attempt, status=None, will_retry=False, delay=None, error=exc)
                raise ProviderError(
                    ErrorKind.NETWORK,
                    f"HTTP request failed after {attempt + 1} attempts: {exc}",
                    provider=self.provider,
                    cause=exc,
                    attempts=attempt + 1,
                ) from exc

            status = response.status_code
            if attempt < last_attempt and self.policy.should_retry_status(status):
                delay = self.policy.delay_for(attempt)
                self._record(attempt, status=status, will_retry=True, delay=delay)
                response.close()
                self._backoff(attempt, token)
                continue
            self._record(attempt, status=status, will_retry=False, delay=None)
            return response

        # Unreachable: the final attempt either returns or raises.
        raise RuntimeError("transport loop exited without a result")  # pragma: no cover


__all__ = ["TransportClient", "buffer_body"]
