"""
Error classification helpers mapping HTTP outcomes to normalized ErrorKind values.

Implements status-to-kind mapping, provider error envelope parsing, Retry-After
parsing and exception classification for transport failures. Provider envelope
parsers are registered by provider name; unknown providers fall back to a
generic message carrying the raw status.
"""
from __future__ import annotations

import json
import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import httpx

from .error_kind import ErrorKind
from .provider_error import ProviderError

# Seconds suggested to callers when a 429 carries no usable Retry-After hint.
DEFAULT_RETRY_AFTER_SECONDS = 60

_TOKEN_COUNT_RE = re.compile(r"(\d[\d,]*)\s+tokens")
_TOKEN_LIMIT_CODES = frozenset({"context_length_exceeded", "string_above_max_length"})
_TOKEN_LIMIT_PHRASES = ("prompt is too long", "maximum context length", "too many tokens")


def kind_for_status(status: Optional[int]) -> ErrorKind:
    """Map an HTTP status code to an :class:`ErrorKind`.

    401/403 -> authentication, 429 -> rate_limit, other 4xx -> validation,
    5xx -> provider. Anything else (including no response at all) -> network.
    """
    if status in (401, 403):
        return ErrorKind.AUTHENTICATION
    if status == 429:
        return ErrorKind.RATE_LIMIT
    if status is not None and 400 <= status < 500:
        return ErrorKind.VALIDATION
    if status is not None and status >= 500:
        return ErrorKind.PROVIDER
    return ErrorKind.NETWORK


def parse_retry_after(value: Optional[str], *, now: Optional[datetime] = None) -> Optional[int]:
    """Parse a ``Retry-After`` header value into whole seconds.

    Accepts delta-seconds (``"60"``) or an HTTP-date. Returns ``None`` for
    missing, malformed, or non-positive values.
    """
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None
    if text.isdigit():
        seconds = int(text)
        return seconds if seconds > 0 else None
    try:
        when = parsedate_to_datetime(text)
    except (TypeError, ValueError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    current = now or datetime.now(timezone.utc)
    seconds = int((when - current).total_seconds())
    return seconds if seconds > 0 else None


def _extract_token_count(message: str) -> Optional[int]:
    """Return the largest ``N tokens`` figure mentioned in ``message``."""
    counts = [int(m.replace(",", "")) for m in _TOKEN_COUNT_RE.findall(message or "")]
    return max(counts) if counts else None


def _looks_like_token_limit(message: str, code: Optional[str]) -> bool:
    if code and code in _TOKEN_LIMIT_CODES:
        return True
    lowered = (message or "").lower()
    return any(p in lowered for p in _TOKEN_LIMIT_PHRASES)


# ---- Provider envelopes -----------------------------------------------------
# Each parser returns (message, code) or raises ValueError when the body does
# not match the provider's envelope.

def _error_object(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, dict) or not isinstance(data.get("error"), dict):
        raise ValueError("missing error object")
    return data["error"]


def _parse_openai_envelope(data: Any, status: int) -> Tuple[str, Optional[str]]:
    err = _error_object(data)
    message = err.get("message") or "Unknown OpenAI error"
    code = err.get("code") or err.get("type")
    return str(message), (str(code) if code else None)


def _parse_anthropic_envelope(data: Any, status: int) -> Tuple[str, Optional[str]]:
    err = _error_object(data)
    message = err.get("message") or "Unknown Anthropic error"
    code = err.get("type") or str(status)
    return str(message), str(code)


def _parse_google_envelope(data: Any, status: int) -> Tuple[str, Optional[str]]:
    err = _error_object(data)
    message = err.get("message") or "Unknown Google AI error"
    code = err.get("status") or (str(err["code"]) if err.get("code") is not None else str(status))
    return str(message), str(code)


_ENVELOPE_PARSERS: Dict[str, Callable[[Any, int], Tuple[str, Optional[str]]]] = {
    "openai": _parse_openai_envelope,
    "anthropic": _parse_anthropic_envelope,
    "google": _parse_google_envelope,
}


def parse_provider_error(
    provider: str,
    status: int,
    body: bytes | str | None,
    headers: Optional[Mapping[str, str]] = None,
) -> ProviderError:
    """Classify a non-success HTTP response into a :class:`ProviderError`.

    The generic status mapping picks the kind; the provider's own envelope then
    supplies message and code. Rate-limit errors carry ``retry_after`` from the
    ``Retry-After`` header (default 60 seconds). Context-length failures are
    promoted to ``token_limit``. Unparsable bodies yield a message containing
    the raw status and body.
    """
    kind = kind_for_status(status)
    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else (body or "")
    parser = _ENVELOPE_PARSERS.get(provider)
    if parser is None:
        return ProviderError(kind, "Unknown provider error", provider=provider, code=str(status))

    try:
        message, code = parser(json.loads(text), status)
    except ValueError:
        label = provider.capitalize() if provider != "openai" else "OpenAI"
        return ProviderError(
            kind,
            f"{label} API error (status {status}): {text}",
            provider=provider,
            code=str(status),
            retry_after=_retry_hint(kind, headers),
        )

    if kind is ErrorKind.RATE_LIMIT:
        return ProviderError.rate_limit(provider, message, _retry_hint(kind, headers) or DEFAULT_RETRY_AFTER_SECONDS, code=code)
    if kind is ErrorKind.VALIDATION and _looks_like_token_limit(message, code):
        return ProviderError.token_limit(provider, message, _extract_token_count(message), code=code)
    return ProviderError(kind, message, provider=provider, code=code)


def _retry_hint(kind: ErrorKind, headers: Optional[Mapping[str, str]]) -> Optional[int]:
    if kind is not ErrorKind.RATE_LIMIT:
        return None
    value = None
    if headers is not None:
        value = headers.get("Retry-After") or headers.get("retry-after")
    return parse_retry_after(value) or DEFAULT_RETRY_AFTER_SECONDS


def classify_exception(exc: BaseException, provider: str) -> ProviderError:
    """Classify an arbitrary exception into a :class:`ProviderError`.

    Precedence:
        1. ProviderError passthrough.
        2. httpx transport failures (connect, DNS, timeouts) -> network.
        3. Anything else -> provider.
    The original exception is kept as the cause.
    """
    if isinstance(exc, ProviderError):
        return exc
    if isinstance(exc, (httpx.TransportError, TimeoutError, ConnectionError)):
        return ProviderError.wrap(exc, ErrorKind.NETWORK, provider, f"network error: {exc}")
    return ProviderError.wrap(exc, ErrorKind.PROVIDER, provider, f"unexpected error: {exc}")


def should_retry(err: BaseException, attempt: int, max_retries: int) -> bool:
    """Return True when ``err`` is retryable and attempts remain."""
    if attempt >= max_retries:
        return False
    return isinstance(err, ProviderError) and err.is_retryable()


__all__ = [
    "DEFAULT_RETRY_AFTER_SECONDS",
    "kind_for_status",
    "parse_retry_after",
    "parse_provider_error",
    "classify_exception",
    "should_retry",
]
