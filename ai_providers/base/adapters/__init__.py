"""Shared adapter building blocks."""

from .base import BaseHTTPAdapter

__all__ = ["BaseHTTPAdapter"]
