from __future__ import annotations

import logging
import sys
from typing import TextIO

LogLevels = [
    "error",
    "warn",
    "info",
    "debug",
]


class AuwebFormatter(logging.Formatter):
    default_time_format = "%H:%M:%S"
    default_msec_format = "%s.%03d"

    def format(self, record: logging.LogRecord) -> str:
        time = self.formatTime(record)
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return f"[{time}] {message}"


class AuwebLogHandler(logging.StreamHandler):
    def __init__(self, stream: TextIO | None = None):
        super().__init__(stream or sys.stderr)
        self.setFormatter(AuwebFormatter())

    def install(self) -> None:
        logging.getLogger().addHandler(self)

    def uninstall(self) -> None:
        logging.getLogger().removeHandler(self)


def log_tier(level: str) -> int:
    return dict(
        error=logging.ERROR,
        warn=logging.WARNING,
        info=logging.INFO,
        debug=logging.DEBUG,
    )[level]


def setup_logging(level: str = "warn", stream: TextIO | None = None) -> AuwebLogHandler:
    handler = AuwebLogHandler(stream)
    handler.setLevel(log_tier(level))
    logging.getLogger().setLevel(logging.DEBUG)
    handler.install()
    return handler
