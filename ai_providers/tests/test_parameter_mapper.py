from __future__ import annotations

import pytest

from ai_providers.base.models import ProviderType
from ai_providers.base.normalization import ParameterMapper

TO_ANTHROPIC = ParameterMapper(ProviderType.OPENAI, ProviderType.ANTHROPIC)
TO_OPENAI = ParameterMapper(ProviderType.ANTHROPIC, ProviderType.OPENAI)


@pytest.mark.parametrize(
    "mapper, value, expected",
    [
        (TO_ANTHROPIC, 1.6, 0.8),
        (TO_ANTHROPIC, 3.0, 1.0),
        (TO_ANTHROPIC, 0.7, 0.7),
        (ParameterMapper(ProviderType.ANTHROPIC, ProviderType.GOOGLE), 1.6, 1.0),
        (TO_OPENAI, 2.4, 2.0),
        (TO_OPENAI, -1.0, 0.0),
    ],
)
def test_map_temperature(mapper, value, expected):
    assert mapper.map_temperature(value) == pytest.approx(expected)  # nosec B101 - asserts are appropriate in unit tests


def test_map_max_tokens():
    assert TO_OPENAI.map_max_tokens(50000) == 4096  # nosec B101 - asserts are appropriate in unit tests
    assert TO_ANTHROPIC.map_max_tokens(50000) == 50000  # nosec B101 - asserts are appropriate in unit tests
    assert TO_ANTHROPIC.map_max_tokens(0) == 1024  # nosec B101 - asserts are appropriate in unit tests


def test_map_stop_sequences_truncates():
    stops = [str(i) for i in range(8)]
    assert TO_OPENAI.map_stop_sequences(stops) == tuple(stops[:4])  # nosec B101 - asserts are appropriate in unit tests
    assert TO_ANTHROPIC.map_stop_sequences(stops) == tuple(stops)  # nosec B101 - asserts are appropriate in unit tests
