"""Resilience helpers (retry/backoff policy) for the transport layer."""

from .retry import DEFAULT_RETRY_POLICY, RATE_LIMIT_STATUS, AttemptLogger, RetryPolicy

__all__ = ["RetryPolicy", "DEFAULT_RETRY_POLICY", "RATE_LIMIT_STATUS", "AttemptLogger"]
