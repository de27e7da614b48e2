"""Adapter factory.

Purpose
-------
Map the closed set of provider identifiers to adapter constructors. Adapters
are imported lazily with ``importlib`` so importing the package does not pull
in every provider module.

Failure modes
-------------
- Identifiers outside the known set raise ``ProviderError(kind=validation)``
  with ``"unsupported provider: <name>"``.
- Declared providers without an adapter (``google``) raise
  ``ProviderError(kind=provider)`` naming themselves.
- Import failures and constructor errors raise ``ProviderError(kind=provider)``
  with the original exception as cause.

The factory performs no retries and no network I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import import_module
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from .errors import ErrorKind, ProviderError
from .interfaces import ProviderAdapter
from .models import ProviderType


@dataclass(frozen=True)
class AdapterSpec:
    """Import location of an adapter class."""

    module: str
    cls: str


# ``None`` marks a declared provider whose adapter does not exist yet.
DEFAULT_REGISTRY: Mapping[str, Optional[AdapterSpec]] = MappingProxyType(
    {
        ProviderType.OPENAI.value: AdapterSpec("ai_providers.openai.client", "OpenAIAdapter"),
        ProviderType.ANTHROPIC.value: AdapterSpec("ai_providers.anthropic.client", "AnthropicAdapter"),
        ProviderType.GOOGLE.value: None,
    }
)


@dataclass(frozen=True)
class AdapterFactory:
    """Create provider adapters from a canonical identifier.

    Instances are immutable; construct one explicitly (or use the module
    default) and pass it to whoever needs it.
    """

    registry: Mapping[str, Optional[AdapterSpec]] = field(default_factory=lambda: DEFAULT_REGISTRY)

    def supported(self) -> Tuple[str, ...]:
        """Return every declared identifier, implemented or not."""
        return tuple(self.registry.keys())

    def implemented(self) -> Tuple[str, ...]:
        return tuple(name for name, spec in self.registry.items() if spec is not None)

    def create(self, provider: "str | ProviderType", config: Any, **kwargs: Any) -> ProviderAdapter:
        """Construct the adapter for ``provider`` with ``config``.

        Extra keyword arguments (``http_client``, ``policy``, model overrides)
        are forwarded to the adapter constructor.
        """
        name = provider.value if isinstance(provider, ProviderType) else str(provider)
        if name not in self.registry:
            raise ProviderError(ErrorKind.VALIDATION, f"unsupported provider: {name}", provider=name)
        spec = self.registry[name]
        if spec is None:
            raise ProviderError(ErrorKind.PROVIDER, f"{name} adapter not yet implemented", provider=name)

        try:
            klass = getattr(import_module(spec.module), spec.cls)
        except (ImportError, AttributeError) as exc:
            raise ProviderError.wrap(
                exc, ErrorKind.PROVIDER, name, f"failed to load adapter '{spec.module}.{spec.cls}': {exc}"
            ) from exc

        try:
            return klass(config, **kwargs)
        except TypeError as exc:
            raise ProviderError.wrap(
                exc, ErrorKind.PROVIDER, name, f"invalid arguments for '{name}' adapter constructor: {exc}"
            ) from exc


DEFAULT_FACTORY = AdapterFactory()


def create_adapter(provider: "str | ProviderType", config: Any, **kwargs: Any) -> ProviderAdapter:
    """Shortcut for ``DEFAULT_FACTORY.create``."""
    return DEFAULT_FACTORY.create(provider, config, **kwargs)


__all__ = ["AdapterSpec", "AdapterFactory", "DEFAULT_REGISTRY", "DEFAULT_FACTORY", "create_adapter"]
