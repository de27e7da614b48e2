"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``ai_providers.base.errors_parts`` so callers keep a single stable import path.
"""

from .errors_parts.error_kind import RETRYABLE_KINDS, ErrorKind
from .errors_parts.provider_error import ProviderError
from .errors_parts.classification import (
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
