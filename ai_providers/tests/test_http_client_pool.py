"""Unit tests for the shared httpx client pool.

Covers:
- Same key (purpose, timeout) returns the same instance.
- Different purpose or timeout yields different instances.
- Closed clients are replaced on the next lookup.
"""
from __future__ import annotations

from ai_providers.base.http import close_all_clients, get_httpx_client


def setup_function(_):
    # Ensure a clean slate for each test
    close_all_clients()


def test_same_key_returns_same_instance():
    c1 = get_httpx_client("openai", 30.0)
    c2 = get_httpx_client("openai", 30.0)
    assert c1 is c2, "Expected pooled client instances to be identical for same key"  # nosec B101 - asserts are appropriate in unit tests


def test_different_purpose_or_timeout_returns_different_instances():
    base = get_httpx_client("openai", 30.0)
    assert get_httpx_client("anthropic", 30.0) is not base  # nosec B101 - asserts are appropriate in unit tests
    assert get_httpx_client("openai", 5.0) is not base  # nosec B101 - asserts are appropriate in unit tests


def test_closed_client_is_replaced():
    first = get_httpx_client("openai", None)
    close_all_clients()
    assert first.is_closed  # nosec B101 - asserts are appropriate in unit tests
    assert get_httpx_client("openai", None) is not first  # nosec B101 - asserts are appropriate in unit tests
