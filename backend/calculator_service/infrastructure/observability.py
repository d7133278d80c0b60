"""Structured Logging — JSON formatter and setup for the console and two log files.

Invariants:
    - Every record carries timestamp, level, service, logger name, and message
    - Extra fields (method, url, operation, num1, num2, error_code, path) surfaced when present
    - error.log receives ERROR and above only; combined.log receives every level
    - File output is always JSON; console output is JSON or human-readable

Design Decisions:
    - JSONFormatter on stdlib logging: zero dependencies, full control
    - setup_logging called once on startup via lifespan; re-running replaces
      only the handlers it installed
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

ERROR_LOG = "error.log"
COMBINED_LOG = "combined.log"

_EXTRA_KEYS = (
    "method", "url", "operation", "num1", "num2",
    "error_code", "path", "user_id", "store_operation",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def __init__(self, service: str):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname.lower(),
            "service": self.service,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _ManagedHandler:
    """Marker mixin so setup_logging can find and replace its own handlers."""


class _ManagedStreamHandler(_ManagedHandler, logging.StreamHandler):
    pass


class _ManagedFileHandler(_ManagedHandler, logging.FileHandler):
    pass


def setup_logging(
    level: str = "INFO",
    fmt: str = "json",
    log_dir: str | Path = "logs",
    service: str = "calculator-microservice",
) -> None:
    """Configure console + error.log + combined.log on the root logger."""
    root = logging.root
    for handler in list(root.handlers):
        if isinstance(handler, _ManagedHandler):
            root.removeHandler(handler)
            handler.close()

    json_formatter = JSONFormatter(service)

    console = _ManagedStreamHandler()
    if fmt == "json":
        console.setFormatter(json_formatter)
    else:
        console.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    root.addHandler(console)

    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)

    errors = _ManagedFileHandler(directory / ERROR_LOG, encoding="utf-8")
    errors.setLevel(logging.ERROR)
    errors.setFormatter(json_formatter)
    root.addHandler(errors)

    combined = _ManagedFileHandler(directory / COMBINED_LOG, encoding="utf-8")
    combined.setFormatter(json_formatter)
    root.addHandler(combined)

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
