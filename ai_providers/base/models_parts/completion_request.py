"""
CompletionRequest DTO for single-prompt text generation.

The ``stream`` flag is carried for forward compatibility only; adapters always
perform a buffered request/response exchange.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class CompletionRequest:
    """Provider-agnostic completion request.

    Attributes:
        prompt: Prompt text; must be non-blank.
        temperature: Optional sampling temperature.
        max_tokens: Optional positive completion budget.
        stop: Ordered stop sequences (bounded per provider).
        stream: Inert streaming flag.
    """

    prompt: str
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    stop: Tuple[str, ...] = ()
    stream: bool = False

    def __post_init__(self) -> None:
        # Accept any sequence from callers but store an immutable tuple.
        if not isinstance(self.stop, tuple):
            object.__setattr__(self, "stop", tuple(self.stop or ()))

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the request."""
        return {
            "prompt": self.prompt,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "stop": list(self.stop),
            "stream": self.stream,
        }


__all__ = ["CompletionRequest"]
