"""
Logging configuration.

Every module logs through a child of the `basen` logger. Nothing is
configured on import; `setup_logging` is called once by `basen.initialize`
and installs a single handler writing either text or JSON lines.

Records may carry a `context` dict (operation name, base, bounds). Both
formatters render it: the JSON formatter as top-level keys, the text
formatter as `key=value` pairs after the message.
"""

import sys
import logging
from typing import Any, Dict, Optional
from datetime import datetime, timezone
import json

from .config import Settings, get_settings

LIBRARY_LOGGER = "basen"


def _context(record: logging.LogRecord) -> Dict[str, Any]:
    return getattr(record, "context", None) or {}


class StructuredFormatter(logging.Formatter):
    """One JSON object per record"""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "location": f"{record.module}:{record.lineno}",
            "message": record.getMessage(),
        }
        entry.update(_context(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Single line text with the record context appended"""

    def __init__(self):
        super().__init__(fmt="%(asctime)s %(levelname)-7s %(name)s: %(message)s", datefmt="%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context(record)
        if context:
            line += " [" + " ".join(f"{key}={value}" for key, value in context.items()) + "]"
        return line


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Configure the `basen` logger from the settings.

    Replaces any handler installed by an earlier call and stops
    propagation, so applications see library records only when they ask
    for them through LOG_LEVEL.
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(StructuredFormatter() if settings.LOG_FORMAT == "json" else TextFormatter())
    handler.setLevel(level)

    logger = logging.getLogger(LIBRARY_LOGGER)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class LoggerAdapter(logging.LoggerAdapter):
    """Logger that attaches a fixed context to every record"""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        context = {**self.extra, **kwargs.pop("context", {})}
        kwargs.setdefault("extra", {})["context"] = context
        return msg, kwargs

    def bind(self, **context) -> "LoggerAdapter":
        """A new adapter with additional context."""
        return LoggerAdapter(self.logger, {**self.extra, **context})


def get_context_logger(name: str, **context) -> LoggerAdapter:
    """
    Get a logger whose records carry the given context.

    Example:
        >>> log = get_context_logger(__name__, operation="NTH_ROOT")
        >>> log.debug("converged", context={"iterations": 7})
    """
    return LoggerAdapter(get_logger(name), context)
