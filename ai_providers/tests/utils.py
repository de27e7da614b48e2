"""Shared constants and payload builders for the ai_providers tests.

Exports:
    - Provider-shaped API keys that pass the configuration validator.
    - Default base URLs used by the respx routers.
    - Canned success bodies for the OpenAI and Anthropic endpoints.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List

OPENAI_KEY = "sk-test-0123456789abcdefghij"  # pragma: allowlist secret
ANTHROPIC_KEY = "sk-ant-REDACTED"  # pragma: allowlist secret
GOOGLE_KEY = "AIzaSyTest0123456789abcdef"  # pragma: allowlist secret

OPENAI_BASE = "https://api.openai.com/v1"
ANTHROPIC_BASE = "https://api.anthropic.com/v1"


def openai_completion_body(text: str = "Hello!", prompt_tokens: int = 5, completion_tokens: int = 3) -> Dict[str, Any]:
    return {
        "id": "cmpl-1",
        "object": "text_completion",
        "created": 1700000000,
        "model": "gpt-3.5-turbo-instruct",
        "choices": [{"text": text, "index": 0, "finish_reason": "stop"}],
        "usage": {
            "prompt_tokens": prompt_tokens,
            "completion_tokens": completion_tokens,
            # Deliberately inconsistent: the adapter recomputes the total.
            "total_tokens": 999,
        },
    }


def openai_chat_body(content: str = "Hi there", prompt_tokens: int = 9, completion_tokens: int = 4) -> Dict[str, Any]:
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-3.5-turbo",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}],
        "usage": {"prompt_tokens": prompt_tokens, "completion_tokens": completion_tokens, "total_tokens": 13},
    }


def anthropic_body(text: str = "Hello!", input_tokens: int = 10, output_tokens: int = 5) -> Dict[str, Any]:
    return {
        "id": "msg_123",
        "type": "message",
        "role": "assistant",
        "model": "claude-3-haiku-20240307",
        "content": [{"type": "text", "text": text}],
        "stop_reason": "end_turn",
        "stop_sequence": None,
        "usage": {"input_tokens": input_tokens, "output_tokens": output_tokens},
    }


def events(captured_err: str) -> List[Dict[str, Any]]:
    """Parse JSON log lines from captured stderr (non-JSON lines are skipped)."""
    out: List[Dict[str, Any]] = []
    for line in captured_err.splitlines():
        line = line.strip()
        if not line.startswith("{"):
            continue
        try:
            out.append(json.loads(line))
        except ValueError:
            continue
    return out


def reset_log_level() -> None:
    logging.getLogger("ai_providers").setLevel(logging.INFO)
