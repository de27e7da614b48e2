"""Pydantic wire schemas for the Anthropic Messages API.

Both completion and chat requests target ``POST /messages``; ``max_tokens`` is
mandatory on the wire, and system prompts travel in a dedicated ``system``
field rather than as messages.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Wire(BaseModel):
    model_config = ConfigDict(extra="ignore")


class AnthropicMessage(_Wire):
    role: str
    content: str


class AnthropicMessagesRequest(_Wire):
    model: str
    max_tokens: int
    messages: List[AnthropicMessage]
    system: Optional[str] = None
    temperature: Optional[float] = None
    stop_sequences: Optional[List[str]] = None


class AnthropicContentBlock(_Wire):
    type: str = "text"
    text: str = ""


class AnthropicUsage(_Wire):
    input_tokens: int = Field(default=0, ge=0)
    output_tokens: int = Field(default=0, ge=0)


class AnthropicMessagesResponse(_Wire):
    id: str = ""
    type: str = ""
    role: str = "assistant"
    model: str = ""
    content: List[AnthropicContentBlock] = Field(default_factory=list)
    stop_reason: Optional[str] = None
    stop_sequence: Optional[str] = None
    usage: AnthropicUsage = Field(default_factory=AnthropicUsage)

    def text(self) -> str:
        """Concatenate the text blocks in order."""
        return "".join(block.text for block in self.content if block.type == "text")


__all__ = [
    "AnthropicMessage",
    "AnthropicMessagesRequest",
    "AnthropicContentBlock",
    "AnthropicUsage",
    "AnthropicMessagesResponse",
]
