"""Pytest configuration for the ai_providers test suite.

Provides ready-made configurations for each provider, a fixture that removes
backoff sleeps, respx routers for both providers, and a teardown that closes
pooled HTTP clients so mocks never leak connections between tests.
"""

from __future__ import annotations

import time
from typing import Iterator, List

import pytest
import respx

from ai_providers.base.http import close_all_clients
from ai_providers.config import Config
from ai_providers.tests.utils import ANTHROPIC_BASE, ANTHROPIC_KEY, OPENAI_BASE, OPENAI_KEY


@pytest.fixture()
def openai_config() -> Config:
    return Config(api_key=OPENAI_KEY, max_retries=0)


@pytest.fixture()
def anthropic_config() -> Config:
    return Config(api_key=ANTHROPIC_KEY, max_retries=0)


@pytest.fixture()
def no_sleep(monkeypatch: pytest.MonkeyPatch) -> List[float]:
    """Replace ``time.sleep`` and record the requested delays."""
    delays: List[float] = []
    monkeypatch.setattr(time, "sleep", lambda seconds: delays.append(seconds))
    return delays


@pytest.fixture()
def mock_openai() -> Iterator[respx.MockRouter]:
    with respx.mock(base_url=OPENAI_BASE, assert_all_called=False) as respx_mock:
        yield respx_mock


@pytest.fixture()
def mock_anthropic() -> Iterator[respx.MockRouter]:
    with respx.mock(base_url=ANTHROPIC_BASE, assert_all_called=False) as respx_mock:
        yield respx_mock


@pytest.fixture(autouse=True)
def close_pooled_clients() -> Iterator[None]:
    yield
    close_all_clients()
