"""ai_providers.config.defaults
============================

Central place for small, stable default values used across the ai_providers
package. Callers may override any of these through ``Config``; the values here
are the fallbacks applied when a field is left empty.

Module Purpose
--------------
- Provide a single import location for conservative default constants (no I/O).
- Keep adapters free of magic literals (URLs, model names, API versions).

This module intentionally avoids importing from other ai_providers packages to
prevent circular dependencies. Only plain constants should live here.
"""

from __future__ import annotations

# ---- Client defaults ----
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_MAX_RETRIES = 3

# ---- Backoff ----
# Base delay doubled per attempt and the ceiling applied to every sleep.
DEFAULT_BACKOFF_BASE_SECONDS = 1.0
DEFAULT_BACKOFF_MAX_SECONDS = 30.0

# ---- OpenAI ----
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"
OPENAI_DEFAULT_COMPLETION_MODEL = "gpt-3.5-turbo-instruct"
OPENAI_DEFAULT_CHAT_MODEL = "gpt-3.5-turbo"

# ---- Anthropic ----
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com/v1"
ANTHROPIC_DEFAULT_MODEL = "claude-3-haiku-20240307"
ANTHROPIC_API_VERSION = "2023-06-01"

# ---- Google (declared, no adapter yet) ----
GOOGLE_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_BACKOFF_BASE_SECONDS",
    "DEFAULT_BACKOFF_MAX_SECONDS",
    "OPENAI_DEFAULT_BASE_URL",
    "OPENAI_DEFAULT_COMPLETION_MODEL",
    "OPENAI_DEFAULT_CHAT_MODEL",
    "ANTHROPIC_DEFAULT_BASE_URL",
    "ANTHROPIC_DEFAULT_MODEL",
    "ANTHROPIC_API_VERSION",
    "GOOGLE_DEFAULT_BASE_URL",
]
