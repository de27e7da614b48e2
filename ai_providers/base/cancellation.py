"""Cooperative cancellation primitives (public API facade).

Purpose
-------
Expose the cancellation constructs via the canonical
``ai_providers.base.cancellation`` import path while the implementations live
under ``cancellation_parts``.

Notes
-----
- ``CancellationToken`` carries an optional deadline (``timeout=`` seconds)
  and an interruptible ``wait`` used for retry backoff.
- ``CancelledError`` is raised by operations that observe a cancellation.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import DEADLINE_EXCEEDED_REASON, CancellationToken

__all__ = ["CancellationToken", "CancelledError", "DEADLINE_EXCEEDED_REASON"]
