"""Structured Logging — one root handler emitting JSON lines or plain text.

Invariants:
    - Each JSON line carries timestamp, level, logger, message
    - timestamp is the moment the record was created (UTC), not when it was formatted
    - Known extras (boat_id, principal, error_code, path, method) appear only when set
    - Repeated setup_logging calls replace the Boatyard handler instead of stacking

Design Decisions:
    - JSONFormatter on stdlib logging: no logging dependency to install
    - Handler looked up by name so apps built in the same process (tests,
      reloads) share one stream handler
"""

import json
import logging
from datetime import datetime, timezone

HANDLER_NAME = "boatyard"
EXTRA_FIELDS = ("boat_id", "principal", "error_code", "path", "method")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, getattr(record, key))
            for key in EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the Boatyard handler on the root logger."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
