"""Structured logging setup. Read-only config; no business logic."""

import logging
import sys
from typing import Any

from indexdef.config.settings import get_settings

# Attributes every LogRecord has; anything else on a record came in through extra=
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}


class StructuredFormatter(logging.Formatter):
    """Formatter that appends fields passed via extra= as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRS}
        if not fields:
            return line
        rendered = " ".join(f"{k}={v!r}" for k, v in sorted(fields.items()))
        return f"{line} | {rendered}"


def configure_logging(level_name: str | None = None) -> None:
    """Configure structured logging for the application. level_name overrides settings.log_level."""
    settings = get_settings()
    level = getattr(logging, (level_name or settings.log_level).upper(), logging.INFO)

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt = "%Y-%m-%dT%H:%M:%S"

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(StructuredFormatter(fmt=fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    # Node creation is logged per node; keep it out of INFO output
    logging.getLogger("indexdef.builder").setLevel(max(level, logging.INFO) if not settings.debug else level)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)


def log_extra(extra: dict[str, Any]) -> dict[str, Any]:
    """Build a dict suitable for logger.info(..., **log_extra({...})) for structured fields."""
    return {"extra": extra}
