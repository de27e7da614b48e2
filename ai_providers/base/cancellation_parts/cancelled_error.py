"""Cancellation error type.

Defines the public ``CancelledError`` raised when a request observes a
cancellation or an expired deadline. Kept isolated to satisfy the
one-class-per-file layout.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively.

    Distinct from ``ProviderError``: cancellation is never classified into an
    error kind and is never retried by the transport loop.
    """


__all__ = ["CancelledError"]
