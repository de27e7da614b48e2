"""BaseHTTPAdapter shared by the JSON-over-HTTPS provider adapters.

Purpose:
- Hold the per-adapter state every provider needs (copied Config, resolved
  base URL, one ``TransportClient``, a logger) and implement the common
  request/response plumbing so concrete adapters only map wire schemas.

External dependencies:
- ``httpx`` through :class:`~ai_providers.base.http.TransportClient`.
- ``pydantic`` v2 for wire schema validation in subclasses;
  ``ValidationError`` raised while decoding a success body is reported as a
  ``provider`` kind error.

Failure semantics:
- Non-200 statuses are handed to ``parse_provider_error`` with status, body
  and headers. Malformed success bodies raise ``ProviderError(kind=provider)``.
- The response is closed on every exit path.
- Adapters never retry; the transport owns the retry loop.
"""

from __future__ import annotations

import time
from dataclasses import replace
from typing import Any, Callable, Dict, FrozenSet, Mapping, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ...config import Config
from ..cancellation import CancellationToken, CancelledError
from ..constants import JSON_CONTENT_TYPE
from ..errors import ErrorKind, ProviderError, classify_exception, parse_provider_error
from ..http import TransportClient
from ..logging import LogContext, get_logger, normalized_log_event
from ..resilience.retry import RetryPolicy
from ..validation import validate_config as validate_shared_config

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class BaseHTTPAdapter:
    """Reusable base for adapters speaking JSON over HTTPS.

    Subclasses set ``provider_name``, ``default_base_url`` and ``features`` and
    implement ``_auth_headers``.
    """

    provider_name: str = ""
    default_base_url: str = ""
    features: FrozenSet[str] = frozenset()

    def __init__(
        self,
        config: Config,
        *,
        http_client: Optional[httpx.Client] = None,
        policy: Optional[RetryPolicy] = None,
    ) -> None:
        self._config = replace(config)
        self._api_key = (config.api_key or "").strip()
        self._base_url = (config.base_url or self.default_base_url).rstrip("/")
        self._transport = TransportClient(
            config.timeout,
            config.max_retries,
            self.provider_name,
            http_client=http_client,
            policy=policy,
        )
        self._logger = get_logger(f"ai_providers.{self.provider_name}")

    # ----- Capability & basic info -----
    @property
    def name(self) -> str:
        return self.provider_name

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def config(self) -> Config:
        return self._config

    def supported_features(self) -> FrozenSet[str]:
        return self.features

    def validate_config(self, config: Config) -> None:
        """Run the shared configuration checks for this provider."""
        validate_shared_config(config, self.provider_name)

    # ----- Wire plumbing -----
    def _auth_headers(self) -> Dict[str, str]:  # pragma: no cover - abstract
        raise NotImplementedError

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": JSON_CONTENT_TYPE}
        headers.update(self._auth_headers())
        return headers

    def _post(self, path: str, payload: Mapping[str, Any], token: Optional[CancellationToken]) -> Any:
        """POST ``payload`` to ``path`` and return the decoded JSON body."""
        url = f"{self._base_url}{path}"
        try:
            response = self._transport.send("POST", url, self._headers(), dict(payload), token)
        except httpx.HTTPError as exc:
            raise classify_exception(exc, self.provider_name) from exc
        try:
            if response.status_code != 200:
                raise parse_provider_error(
                    self.provider_name, response.status_code, response.content, response.headers
                )
            try:
                return response.json()
            except ValueError as exc:
                raise ProviderError.wrap(
                    exc, ErrorKind.PROVIDER, self.provider_name, f"failed to decode response: {exc}"
                ) from exc
        finally:
            response.close()

    def _decode(self, schema: Type[M], data: Any) -> M:
        """Validate ``data`` against a pydantic wire ``schema``."""
        try:
            return schema.model_validate(data)
        except ValidationError as exc:
            raise ProviderError.wrap(
                exc, ErrorKind.PROVIDER, self.provider_name, f"malformed response body: {exc.error_count()} error(s)"
            ) from exc

    def _observe(self, operation: str, model: str, call: Callable[[], T]) -> T:
        """Run ``call`` wrapped in ``chat.start``/``chat.end``/``chat.error`` events."""
        ctx = LogContext.for_call(self.provider_name, model)
        normalized_log_event(self._logger, "chat.start", ctx, phase="start", operation=operation)
        started = time.perf_counter()
        try:
            result = call()
        except ProviderError as e:
            normalized_log_event(
                self._logger,
                "chat.error",
                ctx,
                phase="finalize",
                error_code=e.kind.value,
                operation=operation,
                error=e.message,
                attempts=e.attempts,
            )
            raise
        except CancelledError as e:
            normalized_log_event(
                self._logger, "chat.error", ctx, phase="finalize", error_code="cancelled", operation=operation, error=str(e)
            )
            raise
        latency_ms = int((time.perf_counter() - started) * 1000)
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            emitted=True,
            tokens=getattr(result, "usage", None),
            operation=operation,
            latency_ms=latency_ms,
        )
        return result


__all__ = ["BaseHTTPAdapter"]
