"""Cooperative cancellation token implementation.

Exposes the ``CancellationToken`` class threaded through adapter and transport
calls. The transport polls it before each attempt and sleeps on it between
attempts, so a cancel (or an expired deadline) aborts the backoff promptly.
"""

from __future__ import annotations

import time
from threading import Event, Lock
from typing import List, Optional

from .cancelled_error import CancelledError

DEADLINE_EXCEEDED_REASON = "deadline exceeded"


class CancellationToken:
    """A cooperative cancellation token with cascading and deadline semantics.

    Thread-safe for ``cancel`` + ``raise_if_cancelled`` + ``wait`` usage. Child
    tokens inherit cancellation when the parent is cancelled and never outlive
    the parent's deadline.
    """

    def __init__(self, *, parent: "CancellationToken | None" = None, timeout: Optional[float] = None) -> None:
        self._cancelled = False
        self._reason: Optional[str] = None
        self._deadline: Optional[float] = None
        self._lock = Lock()
        self._event = Event()
        self._children: List[CancellationToken] = []
        if timeout is not None:
            self._deadline = time.monotonic() + max(0.0, timeout)
        if parent is not None:
            parent_deadline = parent.deadline
            if parent_deadline is not None and (self._deadline is None or parent_deadline < self._deadline):
                self._deadline = parent_deadline
            parent.link_child(self)

    @property
    def deadline(self) -> Optional[float]:
        """Monotonic deadline (``time.monotonic`` clock) or ``None``."""
        return self._deadline

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline (``None`` when there is none)."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def _check_deadline(self) -> None:
        if self._deadline is not None and not self._cancelled and time.monotonic() >= self._deadline:
            self.cancel(DEADLINE_EXCEEDED_REASON)

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested or the deadline passed."""
        self._check_deadline()
        return self._cancelled

    @property
    def reason(self) -> str | None:  # noqa: D401 - short form
        """Reason string supplied at cancel time (if any)."""
        return self._reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cooperative cancellation and cascade to children."""
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
            self._reason = reason
            children = list(self._children)
        self._event.set()
        for child in children:
            child.cancel(reason)

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Link a child token so parent cancellation cascades (returns child)."""
        with self._lock:
            self._children.append(token)
            should_cancel = self._cancelled
            reason = self._reason
        if should_cancel:
            token.cancel(reason)
        return token

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` if the token is cancelled or expired."""
        if self.cancelled:
            raise CancelledError(self._reason or "operation cancelled")

    def wait(self, seconds: float) -> bool:
        """Block for up to ``seconds``; return True if cancelled meanwhile.

        The wait is shortened to the deadline when one is set, in which case
        the token is cancelled with reason ``"deadline exceeded"``.
        """
        if self.cancelled:
            return True
        timeout = max(0.0, seconds)
        remaining = self.remaining()
        if remaining is not None and remaining <= timeout:
            if self._event.wait(remaining):
                return True
            self._check_deadline()
            return self.cancelled
        return self._event.wait(timeout)

    def child(self) -> "CancellationToken":
        """Create and link a child token (shortcut)."""
        return CancellationToken(parent=self)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"CancellationToken(cancelled={self._cancelled}, "
            f"reason={self._reason!r}, children={len(self._children)})"
        )


__all__ = ["CancellationToken", "DEADLINE_EXCEEDED_REASON"]
