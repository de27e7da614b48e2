"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `ai_providers.base.errors` for the stable surface.
"""

from .error_kind import RETRYABLE_KINDS, ErrorKind
from .provider_error import ProviderError
from .classification import (
    DEFAULT_RETRY_AFTER_SECONDS,
    classify_exception,
    kind_for_status,
    parse_provider_error,
    parse_retry_after,
    should_retry,
)

__all__ = [
    "ErrorKind",
    "RETRYABLE_KINDS",
    "ProviderError",
    "DEFAULT_RETRY_AFTER_SECONDS",
    "classify_exception",
    "kind_for_status",
    "parse_provider_error",
    "parse_retry_after",
    "should_retry",
]
