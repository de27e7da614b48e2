"""Request normalization and cross-provider parameter mapping."""

from .mapping import ParameterMapper
from .normalizer import (
    clamp_max_tokens,
    clamp_stop_sequences,
    clamp_temperature,
    normalize,
    normalize_chat_request,
    normalize_completion_request,
    validate_chat_request,
    validate_completion_request,
    validate_conversation_structure,
    validate_message,
)

__all__ = [
    "ParameterMapper",
    "normalize",
    "normalize_completion_request",
    "normalize_chat_request",
    "validate_message",
    "validate_completion_request",
    "validate_chat_request",
    "validate_conversation_structure",
    "clamp_temperature",
    "clamp_max_tokens",
    "clamp_stop_sequences",
]
