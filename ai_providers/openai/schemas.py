"""Pydantic wire schemas for the OpenAI completions and chat endpoints.

Only the fields the adapter reads or writes are modelled; unknown response
fields are ignored so additive API changes do not break decoding.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Wire(BaseModel):
    model_config = ConfigDict(extra="ignore")


class OpenAIMessage(_Wire):
    role: str
    content: Optional[str] = ""


class OpenAIUsage(_Wire):
    prompt_tokens: int = Field(default=0, ge=0)
    completion_tokens: int = Field(default=0, ge=0)
    total_tokens: int = Field(default=0, ge=0)


class OpenAICompletionRequest(_Wire):
    model: str
    prompt: str
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    stop: Optional[List[str]] = None


class OpenAICompletionChoice(_Wire):
    text: str = ""
    index: int = 0
    finish_reason: Optional[str] = None


class OpenAICompletionResponse(_Wire):
    id: str = ""
    model: str = ""
    choices: List[OpenAICompletionChoice] = Field(default_factory=list)
    usage: OpenAIUsage = Field(default_factory=OpenAIUsage)


class OpenAIChatRequest(_Wire):
    model: str
    messages: List[OpenAIMessage]
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None


class OpenAIChatChoice(_Wire):
    index: int = 0
    message: OpenAIMessage
    finish_reason: Optional[str] = None


class OpenAIChatResponse(_Wire):
    id: str = ""
    model: str = ""
    choices: List[OpenAIChatChoice] = Field(default_factory=list)
    usage: OpenAIUsage = Field(default_factory=OpenAIUsage)


__all__ = [
    "OpenAIMessage",
    "OpenAIUsage",
    "OpenAICompletionRequest",
    "OpenAICompletionChoice",
    "OpenAICompletionResponse",
    "OpenAIChatRequest",
    "OpenAIChatChoice",
    "OpenAIChatResponse",
]
