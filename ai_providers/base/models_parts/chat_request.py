"""
ChatRequest DTO for provider-agnostic chat invocations.

Adapters map this normalized request shape to each provider's wire schema. The
message sequence is stored as a tuple so requests stay immutable once built.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .message import Message


@dataclass(frozen=True)
class ChatRequest:
    """Normalized chat request sent to provider adapters.

    Attributes:
        messages: Ordered `Message` instances (lists are converted to tuples).
        temperature: Optional sampling temperature.
        max_tokens: Optional positive completion budget.
        stream: Inert streaming flag.

    Methods:
        system_messages: Return the system messages in order.
        to_dict: Return a JSON-serializable dictionary of the request.
    """

    messages: Tuple[Message, ...]
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    stream: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.messages, tuple):
            object.__setattr__(self, "messages", tuple(self.messages or ()))

    def system_messages(self) -> Tuple[Message, ...]:
        return tuple(m for m in self.messages if m.is_system())

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the request."""
        return {
            "messages": [m.to_dict() for m in self.messages],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "stream": self.stream,
        }


__all__ = ["ChatRequest"]
