"""
ai_providers base package

Exports the provider-agnostic building blocks used by adapters and the client:

- Models (DTOs): immutable request/response values
- Errors: the ``ErrorKind`` taxonomy and ``ProviderError``
- Validation & normalization: pure checks run before any network call
- Transport: pooled httpx clients with bounded retries and cancellation
- Factory: lazy creation of provider adapters by canonical name
"""

from .cancellation import CancellationToken, CancelledError
from .errors import (
    ErrorKind,
    ProviderError,
    classify_exception,
    kind_for_status,
    parse_provider_error,
    parse_retry_after,
    should_retry,
)
from .factory import DEFAULT_FACTORY, AdapterFactory, create_adapter
from .interfaces import ProviderAdapter
from .limits import MAX_SYSTEM_MESSAGES, PROVIDER_LIMITS, ProviderLimits, get_provider_limits
from .models import (
    ChatRequest,
    ChatResponse,
    CompletionRequest,
    CompletionResponse,
    Message,
    ProviderType,
    Usage,
)
from .normalization import ParameterMapper, normalize
from .validation import is_valid_provider, supported_providers, validate_config, validate_provider_type

__all__ = [
    # Models
    "ProviderType",
    "Message",
    "CompletionRequest",
    "ChatRequest",
    "Usage",
    "CompletionResponse",
    "ChatResponse",
    # Errors
    "ErrorKind",
    "ProviderError",
    "classify_exception",
    "kind_for_status",
    "parse_provider_error",
    "parse_retry_after",
    "should_retry",
    # Limits
    "ProviderLimits",
    "PROVIDER_LIMITS",
    "MAX_SYSTEM_MESSAGES",
    "get_provider_limits",
    # Validation & normalization
    "validate_config",
    "validate_provider_type",
    "is_valid_provider",
    "supported_providers",
    "normalize",
    "ParameterMapper",
    # Adapters
    "ProviderAdapter",
    "AdapterFactory",
    "DEFAULT_FACTORY",
    "create_adapter",
    # Cancellation
    "CancellationToken",
    "CancelledError",
]
