"""Per-call logging context for adapter events.

``LogContext`` carries the fields every adapter event repeats (provider, model
and a request id). ``LogContext.for_call`` mints a fresh request id so the
``chat.start``/``chat.end``/``chat.error`` lines of one call can be joined.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class LogContext:
    provider: Optional[str] = None
    model: Optional[str] = None
    request_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def for_call(cls, provider: str, model: str) -> "LogContext":
        return cls(provider=provider, model=model, request_id=uuid.uuid4().hex[:12])

    def to_dict(self) -> Dict[str, Any]:
        """Flatten ``extra`` into the top level, dropping ``None`` values."""
        data: Dict[str, Any] = {"provider": self.provider, "model": self.model, "request_id": self.request_id}
        data.update(self.extra)
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
