"""High-level client facade.

Purpose
-------
Bind one provider identifier and one :class:`~ai_providers.config.Config` to
exactly one adapter for the client's lifetime, and run every request through
the normalizer before delegating to that adapter.

Construction order
------------------
1. provider membership  -> ``"unsupported provider: <name>"``
2. shared config checks -> ``"invalid configuration: ..."``
3. adapter construction through the factory (``google`` fails here with a
   ``provider`` kind error)
4. adapter-specific checks -> ``"adapter validation failed: ..."``

Concurrency
-----------
A client holds no mutable state after construction, so one instance may be
shared across threads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from .base.cancellation import CancellationToken
from .base.errors import ErrorKind, ProviderError
from .base.factory import DEFAULT_FACTORY, AdapterFactory
from .base.interfaces import ProviderAdapter
from .base.models import ChatRequest, ChatResponse, CompletionRequest, CompletionResponse, ProviderType
from .base.normalization import normalize_chat_request, normalize_completion_request
from .base.validation import is_valid_provider, supported_providers
from .config import Config, load_config_from_env


def _provider_name(provider: "str | ProviderType") -> str:
    return provider.value if isinstance(provider, ProviderType) else str(provider)


def _wrap_validation(prefix: str, err: ProviderError, provider: str) -> ProviderError:
    return ProviderError(ErrorKind.VALIDATION, f"{prefix}: {err.message}", provider=provider, cause=err)


class Client:
    """Provider-bound client.

    Attributes:
        provider: Canonical provider identifier.
        config: The validated configuration.
        adapter: The single adapter serving this client.
    """

    def __init__(
        self,
        provider: "str | ProviderType",
        config: Config,
        *,
        factory: Optional[AdapterFactory] = None,
        **adapter_kwargs: Any,
    ) -> None:
        name = _provider_name(provider)
        if not is_valid_provider(name):
            raise ProviderError(ErrorKind.VALIDATION, f"unsupported provider: {name}", provider=name)
        try:
            config.validate(name)
        except ProviderError as e:
            raise _wrap_validation("invalid configuration", e, name) from e

        adapter = (factory or DEFAULT_FACTORY).create(name, config, **adapter_kwargs)
        try:
            adapter.validate_config(config)
        except ProviderError as e:
            raise _wrap_validation("adapter validation failed", e, name) from e

        self._provider = name
        self._config = config
        self._adapter: ProviderAdapter = adapter

    @property
    def provider(self) -> str:
        return self._provider

    @property
    def config(self) -> Config:
        return self._config

    @property
    def adapter(self) -> ProviderAdapter:
        return self._adapter

    def complete(self, request: CompletionRequest, token: Optional[CancellationToken] = None) -> CompletionResponse:
        """Normalize ``request`` for this provider and run it."""
        try:
            normalized = normalize_completion_request(request, self._config, self._provider)
        except ProviderError as e:
            raise _wrap_validation("request validation failed", e, self._provider) from e
        return self._adapter.complete(normalized, token)

    def chat_complete(self, request: ChatRequest, token: Optional[CancellationToken] = None) -> ChatResponse:
        """Normalize the conversation for this provider and run it."""
        try:
            normalized = normalize_chat_request(request, self._config, self._provider)
        except ProviderError as e:
            raise _wrap_validation("request validation failed", e, self._provider) from e
        return self._adapter.chat_complete(normalized, token)

    def close(self) -> None:
        """Release client resources.

        Pooled HTTP clients are shared process-wide and closed at exit, so
        there is nothing to release per client today.
        """

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Client(provider={self._provider!r})"


@dataclass(frozen=True)
class ClientFactory:
    """Immutable factory for :class:`Client` instances.

    Construct one explicitly and pass it where clients are built; there is no
    module-level singleton.
    """

    adapters: AdapterFactory = field(default_factory=AdapterFactory)

    def create_client(self, provider: "str | ProviderType", config: Config, **adapter_kwargs: Any) -> Client:
        return Client(provider, config, factory=self.adapters, **adapter_kwargs)

    def supported_providers(self) -> Tuple[str, ...]:
        return supported_providers()


def create_client(provider: "str | ProviderType", config: Config, **adapter_kwargs: Any) -> Client:
    """Create a client for ``provider`` with a fully populated ``config``."""
    return Client(provider, config, **adapter_kwargs)


def create_client_with_defaults(provider: "str | ProviderType", api_key: str, **adapter_kwargs: Any) -> Client:
    """Create a client using default settings and ``api_key``."""
    return Client(provider, Config(api_key=api_key), **adapter_kwargs)


def create_client_from_env(provider: "str | ProviderType", **adapter_kwargs: Any) -> Client:
    """Create a client from ``<PROVIDER>_API_KEY`` and the shared ``AI_*`` variables."""
    name = _provider_name(provider)
    return Client(name, load_config_from_env(name), **adapter_kwargs)


__all__ = [
    "Client",
    "ClientFactory",
    "create_client",
    "create_client_with_defaults",
    "create_client_from_env",
]
