"""Structured Logging - one JSON object per line for the PlaceShare API.

Invariants:
    - Every line carries timestamp, level, logger and message
    - Request context (method, path, status_code) and entity ids (place_id,
      user_id, error_code) are copied from `extra=` when present; any other
      extra attribute is dropped
    - setup_logging replaces the handler it installed before, so repeated
      lifespan startups (tests, reloads) never duplicate lines

Design Decisions:
    - "text" format for local runs, JSON everywhere else
"""

import json
import logging
from datetime import datetime, timezone

_CONTEXT_FIELDS = ("method", "path", "status_code")
_ENTITY_FIELDS = ("error_code", "place_id", "user_id")

_HANDLER_NAME = "placeshare"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _CONTEXT_FIELDS + _ENTITY_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                log[key] = value
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
