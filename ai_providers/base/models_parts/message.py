"""
Message DTO used by chat requests and responses.

Defines the `Message` dataclass and the `Role` literal. Construction performs no
validation; the request normalizer reports role and content problems with the
offending message index so callers get actionable errors.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Tuple

# Message roles accepted by every provider.
Role = Literal["user", "assistant", "system"]

VALID_ROLES: Tuple[str, ...] = ("user", "assistant", "system")


@dataclass(frozen=True)
class Message:
    """A single chat message.

    Attributes:
        role: Author role (``"user"``, ``"assistant"`` or ``"system"``).
        content: Plain text content.
    """

    role: str
    content: str

    def is_system(self) -> bool:
        """Return True for system messages."""
        return self.role == "system"

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


__all__ = ["Message", "Role", "VALID_ROLES"]
