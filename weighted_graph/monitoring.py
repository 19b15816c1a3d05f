"""Logging setup for applications embedding the graph library.

The library itself only creates loggers. Nothing here runs on import;
call configure_logging() from the application entry point.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import IO, Any, Dict, Optional

from .config import ObservabilityConfig, get_config

PACKAGE_LOGGER = "weighted_graph"

# Attribute names every LogRecord carries; anything else came from ``extra``.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Formats a record as one JSON object, merging its ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS:
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(
    config: Optional[ObservabilityConfig] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Attach a single handler to the package logger.

    Calling this again replaces the handler installed by the previous call.

    Args:
        config: Observability settings; defaults to get_config().observability.
        stream: Output stream; defaults to stderr.

    Returns:
        The configured package logger.
    """
    config = config or get_config().observability
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        if getattr(handler, "_weighted_graph_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))
    handler._weighted_graph_handler = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(config.level.upper())
    return logger
