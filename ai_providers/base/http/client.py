"""Shared HTTP client pool for adapters.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances so adapters do not allocate a connection pool per request.

External dependencies:
    - ``httpx`` for the underlying synchronous HTTP client.

Timeout strategy:
    - Clients are keyed by ``(purpose, timeout)`` so two adapters configured
      with different timeouts never share a client. The timeout applies per
      attempt; the transport loop enforces the retry budget on top of it.

Lifecycle & cleanup:
    - All pooled clients are closed at interpreter exit via ``atexit``. Tests
      may also call :func:`close_all_clients` explicitly.
    - Injected clients (passed to ``TransportClient``) never enter the pool.
"""

from __future__ import annotations

import atexit
import contextlib
import threading
from typing import Dict, Optional, Tuple

import httpx

# Internal cache keyed by (purpose, timeout)
_CLIENTS: Dict[Tuple[str, Optional[float]], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(purpose: str, timeout: Optional[float]) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for ``purpose`` and ``timeout``.

    Parameters:
        purpose: Short discriminator for separate pools (e.g. ``"openai"``).
        timeout: Per-request timeout in seconds; ``None`` or ``0`` disables it.

    Thread-safety:
        Safe for concurrent use; per-key creation is guarded by a lock.
    """
    effective = timeout if timeout else None
    key = (purpose, effective)
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        client = httpx.Client(timeout=effective)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            # Pool teardown failures at shutdown are not actionable.
            with contextlib.suppress(Exception):  # nosec B110
                c.close()
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
