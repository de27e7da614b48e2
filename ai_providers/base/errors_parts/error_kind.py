"""
Normalized provider error kinds (taxonomy).

Defines the closed `ErrorKind` enumeration used by the validator, the
normalizer, the transport and every provider adapter. Values are lowercase
snake_case and are considered a stable public contract for logging and
analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Enumerated failure categories shared by all providers."""

    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    RATE_LIMIT = "rate_limit"
    NETWORK = "network"
    PROVIDER = "provider"
    TOKEN_LIMIT = "token_limit"


RETRYABLE_KINDS = frozenset({ErrorKind.RATE_LIMIT, ErrorKind.NETWORK})


__all__ = ["ErrorKind", "RETRYABLE_KINDS"]
