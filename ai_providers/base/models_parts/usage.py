"""
Token usage accounting DTO.

``total_tokens`` is derived from the prompt and completion counts and can never
be supplied independently, so the three figures always agree.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Usage:
    """Provider-reported token counts for one exchange."""

    prompt_tokens: int = 0
    completion_tokens: int = 0

    def __post_init__(self) -> None:
        if self.prompt_tokens < 0 or self.completion_tokens < 0:
            raise ValueError(
                f"token counts must be non-negative, got prompt={self.prompt_tokens} "
                f"completion={self.completion_tokens}"
            )

    @property
    def total_tokens(self) -> int:
        return self.prompt_tokens + self.completion_tokens

    def to_dict(self) -> Dict[str, int]:
        return {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.total_tokens,
        }


__all__ = ["Usage"]
