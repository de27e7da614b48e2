"""
Closed enumeration of provider identifiers.

Adding a provider means extending this enum and the adapter registry in
``ai_providers.base.factory``; call sites never branch on provider names.
"""
from __future__ import annotations

from enum import Enum
from typing import Tuple


class ProviderType(str, Enum):
    """Known provider identifiers (string-valued for logging and config keys)."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"

    @classmethod
    def values(cls) -> Tuple[str, ...]:
        """Return the identifiers in declaration order."""
        return tuple(member.value for member in cls)


__all__ = ["ProviderType"]
