"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``ai_providers.base.models_parts``. All value types are frozen dataclasses;
normalization returns new copies rather than mutating inputs.
"""

from .models_parts.provider_type import ProviderType
from .models_parts.message import VALID_ROLES, Message, Role
from .models_parts.completion_request import CompletionRequest
from .models_parts.chat_request import ChatRequest
from .models_parts.usage import Usage
from .models_parts.completion_response import CompletionResponse
from .models_parts.chat_response import ChatResponse

__all__ = [
    "ProviderType",
    "Message",
    "Role",
    "VALID_ROLES",
    "CompletionRequest",
    "ChatRequest",
    "Usage",
    "CompletionResponse",
    "ChatResponse",
]
