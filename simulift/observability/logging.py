from __future__ import annotations

import json
import logging
import sys
import time
from typing import Any

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


class JsonLogFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": float(time.time()),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def _install(handler: logging.Handler, level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers = [handler]
    # Route warnings.warn (RangeWarning) through logging as well.
    logging.captureWarnings(True)


def setup_json_logging(level: str = "INFO") -> None:
    # stderr keeps stdout free for reports.
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonLogFormatter())
    _install(handler, level)


def setup_plain_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    _install(handler, level)


def setup_logging(cfg: Any) -> None:
    """Configure the root logger from a LoggingCfg-like object."""
    level = str(getattr(cfg, "level", "INFO") or "INFO")
    if bool(getattr(cfg, "json_logs", False)):
        setup_json_logging(level)
    else:
        setup_plain_logging(level)
