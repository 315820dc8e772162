"""Structured Logging — JSON formatter and setup for the fireworks model.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (show_name, show_index, vendor, launch_time, error_code)
      surfaced when present
    - JSON format for machine consumption, human-readable text otherwise

Design Decisions:
    - JSONFormatter keys mirror the extras the core modules log (show, vendor, launch)
    - setup_logging called once by the entry point; core modules only log
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_KEYS: tuple[str, ...] = (
    "show_name", "show_index", "vendor", "launch_time", "error_code",
)


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
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


def setup_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """Configure root logging. Returns the installed handler."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
