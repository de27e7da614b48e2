"""
ChatResponse DTO representing a normalized assistant reply.

The reply is always carried as a `Message` with role ``assistant`` regardless of
how the provider shapes it on the wire.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from .message import Message
from .usage import Usage


@dataclass(frozen=True)
class ChatResponse:
    """Provider-agnostic response from a chat invocation.

    Attributes:
        message: Assistant reply.
        usage: Token accounting for the exchange.
        finish_reason: Provider-native stop reason.
    """

    message: Message
    usage: Usage = field(default_factory=Usage)
    finish_reason: str = ""

    @property
    def text(self) -> str:
        """Shortcut for ``message.content``."""
        return self.message.content

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message.to_dict(),
            "usage": self.usage.to_dict(),
            "finish_reason": self.finish_reason,
        }


__all__ = ["ChatResponse"]
