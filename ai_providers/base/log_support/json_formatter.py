"""JSON logging formatter used by the package logging setup.

This module defines :class:`JsonFormatter`, which serializes the standard
logging fields and hoists keys from JSON-encoded messages (as emitted by
``log_event``) to the top level so each line is a flat JSON object.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

# LogRecord attributes that are never copied into the payload.
_RECORD_INTERNALS = frozenset(
    {
        "msg",
        "args",
        "levelname",
        "levelno",
        "name",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }
)


class JsonFormatter(logging.Formatter):
    """Lightweight JSON formatter for structured logs.

    Output always carries ``ts``, ``level`` and ``logger``. A message that is a
    JSON object is merged into the payload instead of being double encoded;
    other messages land under ``msg``. Extra record attributes are appended
    unless they would overwrite an existing key.
    """

    def format(self, record: logging.LogRecord) -> str:
        base = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
        }
        msg_text = record.getMessage()
        try:
            parsed = json.loads(msg_text)
        except ValueError:
            parsed = None
        if isinstance(parsed, dict):
            base.update(parsed)
        else:
            base["msg"] = msg_text
        for k, v in record.__dict__.items():
            if k.startswith("_") or k in _RECORD_INTERNALS or k in base:
                continue
            base[k] = v
        if record.exc_info:
            base["exc"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False, default=str)


__all__ = ["JsonFormatter", "ISO"]
