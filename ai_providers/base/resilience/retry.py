"""Retry and backoff policy used by the transport loop.

Only the transport retries. The policy decides which outcomes are eligible
and how long to back off; the transport owns the loop, the sleeps and the
cancellation checks.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from ...config.defaults import DEFAULT_BACKOFF_BASE_SECONDS, DEFAULT_BACKOFF_MAX_SECONDS

# Rate limiting is retried alongside every 5xx status.
RATE_LIMIT_STATUS = 429


class AttemptLogger(Protocol):  # pragma: no cover - structural protocol
    def __call__(
        self,
        *,
        attempt: int,
        max_attempts: int,
        status: Optional[int],
        delay: Optional[float],
        error: Optional[BaseException],
    ) -> None: ...


@dataclass(frozen=True)
class RetryPolicy:
    """Exponential backoff policy.

    Attributes:
        base_delay: Delay after the first failed attempt, doubled per attempt.
        max_delay: Ceiling applied to every delay.
        attempt_logger: Optional hook called once per attempt.
    """

    base_delay: float = DEFAULT_BACKOFF_BASE_SECONDS
    max_delay: float = DEFAULT_BACKOFF_MAX_SECONDS
    attempt_logger: Optional[AttemptLogger] = None

    def delay_for(self, attempt: int) -> float:
        """Return ``min(max_delay, base_delay * 2**attempt)`` for a 0-based attempt."""
        return min(self.max_delay, self.base_delay * (2 ** attempt))

    def should_retry_status(self, status: int) -> bool:
        """Return True for 429 and any 5xx status."""
        return status == RATE_LIMIT_STATUS or 500 <= status <= 599


DEFAULT_RETRY_POLICY = RetryPolicy()


__all__ = [
    "AttemptLogger",
    "RetryPolicy",
    "DEFAULT_RETRY_POLICY",
    "RATE_LIMIT_STATUS",
]
