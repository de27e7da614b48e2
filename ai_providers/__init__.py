"""ai_providers package

Provider-agnostic client for text and chat generation services.

Purpose:
    Callers build a generic request and receive a generic response whichever
    provider answers it. Requests are validated and reconciled against each
    provider's bounds, dispatched through a uniform adapter contract, and
    retried safely by a resilient transport.

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`Client`, :class:`ClientFactory`, :func:`create_client`,
      :func:`create_client_with_defaults`, :func:`create_client_from_env`
    - Configuration: :class:`Config`, :func:`default_config`,
      :func:`load_config_from_env`
    - Models: requests, responses, :class:`Message`, :class:`Usage`,
      :class:`ProviderType`
    - Errors: :class:`ProviderError`, :class:`ErrorKind`
    - Cancellation: :class:`CancellationToken`, :class:`CancelledError`
"""

from .base.cancellation import CancellationToken, CancelledError
from .base.errors import ErrorKind, ProviderError
from .base.interfaces import ProviderAdapter
from .base.models import (
    ChatRequest,
    ChatResponse,
    CompletionRequest,
    CompletionResponse,
    Message,
    ProviderType,
    Usage,
)
from .base.validation import is_valid_provider, supported_providers
from .client import (
    Client,
    ClientFactory,
    create_client,
    create_client_from_env,
    create_client_with_defaults,
)
from .config import Config, default_config, load_config_from_env

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "Client",
    "ClientFactory",
    "create_client",
    "create_client_with_defaults",
    "create_client_from_env",
    "Config",
    "default_config",
    "load_config_from_env",
    "ProviderType",
    "Message",
    "CompletionRequest",
    "ChatRequest",
    "Usage",
    "CompletionResponse",
    "ChatResponse",
    "ProviderAdapter",
    "ErrorKind",
    "ProviderError",
    "CancellationToken",
    "CancelledError",
    "is_valid_provider",
    "supported_providers",
]
