"""
Structured provider error exception type.

Wraps validation failures, transport failures and provider error bodies with a
normalized `ErrorKind` for consistent handling, retry decisions, and structured
logging. Two errors compare equal when they share ``(kind, provider)``;
message, code and hints do not take part in equality.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .error_kind import RETRYABLE_KINDS, ErrorKind


@dataclass(eq=False)
class ProviderError(Exception):
    """Represents a classified failure from the client stack.

    Attributes:
        kind: Normalized :class:`ErrorKind` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Provider key where the error originated (e.g., ``"openai"``).
        code: Optional provider-native error code.
        retry_after: Suggested wait in seconds before retrying (rate limits).
        token_count: Offending token count for token limit failures.
        cause: Optional original exception for diagnostics.
        attempts: Number of HTTP attempts made when the error came from the
            transport loop.
    """

    kind: ErrorKind
    message: str
    provider: str = ""
    code: Optional[str] = None
    retry_after: Optional[int] = None
    token_count: Optional[int] = None
    cause: Optional[BaseException] = None
    attempts: Optional[int] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if self.cause is not None:
            self.__cause__ = self.cause

    def __str__(self) -> str:
        """Return ``[provider] kind (code): message``; the code part is optional."""
        if self.code:
            return f"[{self.provider}] {self.kind.value} ({self.code}): {self.message}"
        return f"[{self.provider}] {self.kind.value}: {self.message}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProviderError):
            return NotImplemented
        return self.kind is other.kind and self.provider == other.provider

    def __hash__(self) -> int:
        return hash((self.kind, self.provider))

    def is_retryable(self) -> bool:
        """Return True only for ``rate_limit`` and ``network`` failures."""
        return self.kind in RETRYABLE_KINDS

    def unwrap(self) -> Optional[BaseException]:
        """Return the wrapped underlying exception, if any."""
        return self.cause

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "type": self.kind.value,
            "message": self.message,
            "provider": self.provider,
        }
        if self.code:
            data["code"] = self.code
        if self.retry_after is not None:
            data["retry_after"] = self.retry_after
        if self.token_count is not None:
            data["token_count"] = self.token_count
        return data

    @classmethod
    def rate_limit(cls, provider: str, message: str, retry_after: int, code: Optional[str] = None) -> "ProviderError":
        """Build a ``rate_limit`` error carrying a retry hint in seconds."""
        return cls(ErrorKind.RATE_LIMIT, message, provider=provider, code=code, retry_after=retry_after)

    @classmethod
    def token_limit(cls, provider: str, message: str, token_count: Optional[int], code: Optional[str] = None) -> "ProviderError":
        """Build a ``token_limit`` error carrying the offending token count."""
        return cls(ErrorKind.TOKEN_LIMIT, message, provider=provider, code=code, token_count=token_count)

    @classmethod
    def wrap(
        cls,
        exc: BaseException,
        kind: ErrorKind,
        provider: str,
        message: str,
        code: Optional[str] = None,
    ) -> "ProviderError":
        """Wrap ``exc`` so it stays retrievable through :meth:`unwrap`."""
        return cls(kind, message, provider=provider, code=code, cause=exc)


__all__ = ["ProviderError"]
