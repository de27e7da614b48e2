"""Client configuration value type.

Goals
-----
* One immutable ``Config`` value per client, copied into the adapter at
  construction and never mutated afterwards.
* Builder helpers (``with_api_key`` and friends) return modified copies so a
  base configuration can be shared safely between clients.
* Environment loading lives in :mod:`ai_providers.config.env`; this module does
  no I/O.

Public API
----------
* Config
* default_config() -> Config
* load_config_from_env(provider) -> Config
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from .defaults import DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True)
class Config:
    """Provider client configuration.

    Attributes:
        api_key: Provider credential; never logged.
        base_url: Optional endpoint override; empty means the provider default.
        timeout: Per-attempt HTTP timeout in seconds.
        max_retries: Retries after the first attempt.
        temperature: Optional default temperature for requests that omit one.
        max_tokens: Optional default completion budget.
    """

    api_key: str = ""
    base_url: str = ""
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    max_retries: int = DEFAULT_MAX_RETRIES
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None

    def with_api_key(self, api_key: str) -> "Config":
        return replace(self, api_key=api_key)

    def with_base_url(self, base_url: str) -> "Config":
        return replace(self, base_url=base_url)

    def with_timeout(self, timeout: float) -> "Config":
        return replace(self, timeout=timeout)

    def with_max_retries(self, max_retries: int) -> "Config":
        return replace(self, max_retries=max_retries)

    def with_temperature(self, temperature: Optional[float]) -> "Config":
        return replace(self, temperature=temperature)

    def with_max_tokens(self, max_tokens: Optional[int]) -> "Config":
        return replace(self, max_tokens=max_tokens)

    def validate(self, provider: str) -> None:
        """Raise ``ProviderError(kind=validation)`` when invalid for ``provider``."""
        from ..base.validation import validate_config

        validate_config(self, provider)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly view with the API key redacted."""
        return {
            "api_key": "***" if self.api_key else "",
            "base_url": self.base_url,
            "timeout": self.timeout,
            "max_retries": self.max_retries,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    def __repr__(self) -> str:
        return (
            f"Config(api_key={'***' if self.api_key else ''!r}, base_url={self.base_url!r}, "
            f"timeout={self.timeout!r}, max_retries={self.max_retries!r}, "
            f"temperature={self.temperature!r}, max_tokens={self.max_tokens!r})"
        )


def default_config() -> Config:
    """Return a configuration populated with defaults only (no credential)."""
    return Config()


from .env import load_config_from_env  # noqa: E402 - env imports Config

__all__ = ["Config", "default_config", "load_config_from_env"]
