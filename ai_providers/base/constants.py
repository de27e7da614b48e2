"""Base shared constants for provider adapters.

Central location to avoid scattering magic strings across adapters and tests.

Security
--------
This module contains only generic sentinel strings and feature names. There are
no credentials or tokens embedded.

# pragma: allowlist secret
"""
from __future__ import annotations

# Feature names reported by ``ProviderAdapter.supported_features``.
FEATURE_COMPLETION = "completion"
FEATURE_CHAT_COMPLETION = "chat_completion"
FEATURE_STREAMING = "streaming"
FEATURE_TEMPERATURE = "temperature"
FEATURE_MAX_TOKENS = "max_tokens"
FEATURE_STOP_SEQUENCES = "stop_sequences"
FEATURE_SYSTEM_MESSAGES = "system_messages"
FEATURE_FUNCTION_CALLING = "function_calling"

# Separator used when lifting several system messages into one field.
SYSTEM_MESSAGE_SEPARATOR = "\n\n"

# Prefix added to conversation-structure failures raised by the normalizer.
CONVERSATION_ERROR_PREFIX = "invalid conversation structure: "

# Content type sent with every JSON request.
JSON_CONTENT_TYPE = "application/json"

__all__ = [
    "FEATURE_COMPLETION",
    "FEATURE_CHAT_COMPLETION",
    "FEATURE_STREAMING",
    "FEATURE_TEMPERATURE",
    "FEATURE_MAX_TOKENS",
    "FEATURE_STOP_SEQUENCES",
    "FEATURE_SYSTEM_MESSAGES",
    "FEATURE_FUNCTION_CALLING",
    "SYSTEM_MESSAGE_SEPARATOR",
    "CONVERSATION_ERROR_PREFIX",
    "JSON_CONTENT_TYPE",
]
