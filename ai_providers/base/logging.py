"""Structured logging utilities for the ai_providers package.

Rationale:
- Central place to configure consistent JSON logging.
- Avoid ad-hoc logger setup across adapters and the transport.

Every logger returned by ``get_logger`` is a child of the shared
``ai_providers`` logger, which owns a single stderr handler. The level comes
from ``AI_PROVIDERS_LOG_LEVEL`` (default INFO). ``normalized_log_event`` injects
the canonical keys ``phase``, ``attempt``, ``error_code``, ``emitted`` and
``tokens`` so adapter events share one schema. API keys are never passed to
these helpers.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Dict, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "ai_providers"
LOG_LEVEL_ENV = "AI_PROVIDERS_LOG_LEVEL"

_BASE_LOGGER_ATTR = "_ai_providers_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_ai_providers_console_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


_LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Map a level name (any case) to its constant; unknown names give ``default``."""
    return _LEVELS.get((value or "").strip().upper(), default)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize and return the shared ``ai_providers`` logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    desired_level = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        if logger.level != desired_level:
            logger.setLevel(desired_level)
        # Follow stderr replacements (pytest capture, embedding hosts).
        for handler in logger.handlers:
            if getattr(handler, _CONSOLE_HANDLER_ATTR, False) and isinstance(handler, logging.StreamHandler):
                if handler.stream is sys.stderr:
                    continue
                if getattr(handler.stream, "closed", False):
                    handler.stream = sys.stderr
                else:
                    handler.setStream(sys.stderr)
        return logger

    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [h for h in logger.handlers if not getattr(h, _CONSOLE_HANDLER_ATTR, False)]
    logger.addHandler(handler)
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return a logger under the shared ``ai_providers`` hierarchy.

    Names outside the hierarchy are nested under it so every event flows
    through the single managed handler.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(*, level: int | str | None = None, json_mode: bool = True) -> logging.Logger:
    """Adjust the shared logger level and formatter at runtime."""
    logger = _ensure_base_logger(json_mode=json_mode, level=logging.INFO)
    if level is not None:
        logger.setLevel(_parse_level(level, default=logger.level) if isinstance(level, str) else level)
    for handler in logger.handlers:
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            handler.setFormatter(JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT))
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Write ``event`` plus ``ctx`` and ``fields`` as a single JSON message.

    ``None`` fields are dropped unless ``keep_none`` is set. Values that are
    not JSON serializable are rendered with ``str``. Nothing is serialized
    when ``level`` is disabled.
    """
    if not logger.isEnabledFor(level):
        return
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = ("structured", "phase", "attempt", "error_code", "emitted", "tokens")


def _tokens_payload(tokens: Any) -> Optional[Dict[str, Any]]:
    """Render ``Usage`` (or any mapping) for the ``tokens`` key."""
    if tokens is None:
        return None
    to_dict = getattr(tokens, "to_dict", None)
    return dict(to_dict() if callable(to_dict) else tokens)


def normalized_log_event(  # noqa: PLR0913
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    attempt: int | None = None,
    error_code: str | None = None,
    emitted: bool | None = None,
    tokens: Any = None,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit a structured event guaranteeing the normalized key set.

    ``error_code`` is omitted when ``None``; every other normalized key is
    always present. Extra fields never overwrite normalized values.
    """
    base_fields: Dict[str, Any] = {
        "structured": True,
        "phase": phase,
        "attempt": attempt,
        "emitted": emitted,
        "tokens": _tokens_payload(tokens),
    }
    if error_code is not None:
        base_fields["error_code"] = error_code
    base_fields.update({k: v for k, v in extra_fields.items() if v is not None and k not in base_fields})
    log_event(logger, event, ctx, level=level, keep_none=True, **base_fields)


__all__ = [
    "BASE_LOGGER_NAME",
    "LOG_LEVEL_ENV",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
