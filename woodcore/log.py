"""Logging setup for the client: plain text or JSON lines on stdout."""
from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Optional

__all__ = ["JsonFormatter", "configure_logging"]

_EXTRA_KEYS = ("service", "endpoint", "method", "status")


class JsonFormatter(logging.Formatter):
    """A minimal JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        for key in _EXTRA_KEYS:
            value = getattr(record, key, None)
            if value is not None:
                payload[key] = value
        return json.dumps(payload, separators=(",", ":"))


class _ServiceFilter(logging.Filter):
    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "service", None) is None:
            record.service = self._service
        return True


def configure_logging(
    fmt: Optional[str] = None,
    *,
    service_name: Optional[str] = None,
    level: Optional[str] = None,
) -> logging.Handler:
    """Install a stdout handler on the ``woodcore`` logger.

    Args:
        fmt: 'json' or 'text'. Defaults to LOG_FORMAT env or 'text'.
        service_name: optional service label injected into every log line.
        level: log level name. Defaults to LOG_LEVEL env or 'INFO'.

    Returns the installed handler so callers (and tests) can remove it.
    """

    fmt = (fmt or os.getenv("LOG_FORMAT", "text")).lower()
    logger = logging.getLogger("woodcore")
    logger.setLevel((level or os.getenv("LOG_LEVEL", "INFO")).upper())

    # replace a handler installed by a previous call
    for h in list(logger.handlers):
        if getattr(h, "_woodcore", False):
            logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stdout)
    handler._woodcore = True  # type: ignore[attr-defined]
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
        )
    if service_name:
        handler.addFilter(_ServiceFilter(service_name))
    logger.addHandler(handler)
    return handler
