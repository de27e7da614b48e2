"""ai_providers.config.env
=======================

Environment variable mapping and loading for client configuration.

Purpose
-------
- Provide a single source of truth for mapping provider identifiers to their
  environment variable names (API key and base URL).
- Build a finished :class:`~ai_providers.config.Config` from the process
  environment so the rest of the package never reads ``os.environ`` itself.

Design Notes
------------
- Provider-namespaced variables: ``<PROVIDER>_API_KEY`` and
  ``<PROVIDER>_BASE_URL``.
- Shared overrides: ``AI_TIMEOUT`` (seconds or durations such as ``45s``,
  ``2m``, ``500ms``, ``1h30m``), ``AI_MAX_RETRIES``, ``AI_TEMPERATURE`` and
  ``AI_MAX_TOKENS``.

Failure Modes
-------------
- Unparsable or out-of-range shared overrides are ignored and the default is
  kept; the returned Config is still validated later by the client.
- Unknown providers yield a Config without credentials.
"""

from __future__ import annotations

import os
import re
from dataclasses import replace
from typing import Dict, Mapping, Optional

from . import Config

# Canonical provider → env var mapping
ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "google": "GOOGLE_API_KEY",
}

BASE_URL_ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_BASE_URL",
    "anthropic": "ANTHROPIC_BASE_URL",
    "google": "GOOGLE_BASE_URL",
}

TIMEOUT_ENV = "AI_TIMEOUT"
MAX_RETRIES_ENV = "AI_MAX_RETRIES"
TEMPERATURE_ENV = "AI_TEMPERATURE"
MAX_TOKENS_ENV = "AI_MAX_TOKENS"

_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)(ms|us|µs|ns|h|m|s)")
_UNIT_SECONDS = {"h": 3600.0, "m": 60.0, "s": 1.0, "ms": 1e-3, "us": 1e-6, "µs": 1e-6, "ns": 1e-9}


def get_env_var_name(provider: str) -> Optional[str]:
    """Return the API key environment variable name for ``provider``."""
    return ENV_MAP.get(provider.lower()) if provider else None


def parse_duration(value: str) -> Optional[float]:
    """Parse ``value`` into seconds.

    Accepts a bare number (seconds) or a concatenation of ``<number><unit>``
    parts with units ``h``, ``m``, ``s``, ``ms``, ``us`` and ``ns``. Returns
    ``None`` when the text does not parse.
    """
    text = (value or "").strip()
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        pass
    pos = 0
    total = 0.0
    for match in _DURATION_PART.finditer(text):
        if match.start() != pos:
            return None
        total += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
        pos = match.end()
    if pos != len(text):
        return None
    return total


def _parse_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def _parse_float(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value.strip())
    except ValueError:
        return None


def load_config_from_env(provider: str, environ: Optional[Mapping[str, str]] = None) -> Config:
    """Build a :class:`Config` for ``provider`` from environment variables.

    Parameters
    ----------
    provider: str
        Provider identifier (case-insensitive).
    environ: Optional[Mapping[str, str]]
        Mapping to read instead of ``os.environ`` (tests).

    Returns
    -------
    Config
        Defaults overlaid with whatever variables are set and parse cleanly.
    """
    env = os.environ if environ is None else environ
    key = (provider or "").lower()
    config = Config()

    if name := ENV_MAP.get(key):
        config = replace(config, api_key=env.get(name, ""))
    if name := BASE_URL_ENV_MAP.get(key):
        config = replace(config, base_url=env.get(name, ""))

    if (raw := env.get(TIMEOUT_ENV)) is not None:
        timeout = parse_duration(raw)
        if timeout is not None and timeout >= 0:
            config = replace(config, timeout=timeout)

    retries = _parse_int(env.get(MAX_RETRIES_ENV))
    if retries is not None and retries >= 0:
        config = replace(config, max_retries=retries)

    temperature = _parse_float(env.get(TEMPERATURE_ENV))
    if temperature is not None:
        config = replace(config, temperature=temperature)

    max_tokens = _parse_int(env.get(MAX_TOKENS_ENV))
    if max_tokens is not None and max_tokens > 0:
        config = replace(config, max_tokens=max_tokens)

    return config


__all__ = [
    "ENV_MAP",
    "BASE_URL_ENV_MAP",
    "TIMEOUT_ENV",
    "MAX_RETRIES_ENV",
    "TEMPERATURE_ENV",
    "MAX_TOKENS_ENV",
    "get_env_var_name",
    "parse_duration",
    "load_config_from_env",
]
