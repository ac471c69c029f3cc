"""Logging setup — called once from the app lifespan.

JSON lines in production (LOG_FORMAT=json), plain text otherwise.
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("path", "method", "error_kind", "status")


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))

    root = logging.getLogger()
    # lifespan can run more than once per process (tests, reload)
    for existing in list(root.handlers):
        if getattr(existing, "_biztime", False):
            root.removeHandler(existing)
    handler._biztime = True
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
