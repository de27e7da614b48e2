"""
Provider-agnostic interfaces (Protocols) for the adapter layer.

Re-exports the single-class modules under
``ai_providers.base.interfaces_parts`` to keep imports stable.
"""

from __future__ import annotations

from .interfaces_parts import ProviderAdapter

__all__ = ["ProviderAdapter"]
