from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator, Optional

LOG_FILE_NAME = "todo_clock.jsonl"

# attributes every LogRecord carries; anything else came in through `extra=`
_STANDARD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}

# third-party loggers and the level they run at, relative to ours
_QUIET = {
    "uvicorn.access": logging.CRITICAL,  # AccessLogMiddleware covers requests
}


def _extras(record: logging.LogRecord) -> Iterator[tuple[str, Any]]:
    for key, value in vars(record).items():
        if key not in _STANDARD_ATTRS:
            yield key, value


class JsonFormatter(logging.Formatter):
    """One JSON object per line: ts, level, logger, msg, then the structured extras."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, timezone.utc)
        payload: dict[str, Any] = {
            "ts": ts.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        payload.update(_extras(record))

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def _attach(root: logging.Logger, handler: logging.Handler, level: str, fmt: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(fmt)
    root.addHandler(handler)


def setup_logging(level: str = "INFO", log_dir: Optional[Path] = None) -> None:
    """Route every logger through JSON handlers on the root.

    Console output is always on. With ``log_dir`` set, records also go to a
    rotating ``todo_clock.jsonl`` there (10MB x 10).
    """
    level = level.upper()
    fmt = JsonFormatter()

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()  # create_app() may run more than once per process

    _attach(root, logging.StreamHandler(), level, fmt)
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        rotating = RotatingFileHandler(log_dir / LOG_FILE_NAME, maxBytes=10_000_000, backupCount=10, encoding="utf-8")
        _attach(root, rotating, level, fmt)

    for name, quiet_level in _QUIET.items():
        logging.getLogger(name).setLevel(quiet_level)
    logging.getLogger("uvicorn.error").setLevel(level)
