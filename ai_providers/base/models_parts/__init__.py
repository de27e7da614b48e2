"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`ai_providers.base.models_parts` if needed, while `ai_providers.base.models`
remains the primary stable import path.
"""

from .provider_type import ProviderType
from .message import VALID_ROLES, Message, Role
from .completion_request import CompletionRequest
from .chat_request import ChatRequest
from .usage import Usage
from .completion_response import CompletionResponse
from .chat_response import ChatResponse

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
