"""Logging setup for the TfL Status Display app."""

from __future__ import annotations

import logging
from pathlib import Path

from tfl_status.config import LoggingConfig
from tfl_status.data.tfl_client import APP_KEY_PATTERN, REDACTED

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_FILENAME = "tfl_status.log"

USAGE_LINES = [
    "Super simple TfL status",
    "Usage instructions:",
    '1. mode: the transport modes to show. Default is "tube,elizabeth-line". '
    "Recommended list of modes: tube,elizabeth-line,dlr,overground.",
    "   Any value is passed to the TfL API, which may return an error (check the log).",
    "   Example: ?mode=tube",
    "2. names: whether to show line names. Default is false.",
    "   Example: ?names=true",
    "3. The parameters can be combined.",
    "   Example: ?names=true&mode=tube,elizabeth-line",
]


class AppKeyFilter(logging.Filter):
    """Redact TfL app keys from fully formatted log messages.

    Arguments are merged into the message first, so keys carried by
    exceptions or other non-string arguments are masked too.
    """

    def __init__(self, name: str = "", mask: str = REDACTED) -> None:
        super().__init__(name)
        self.mask = mask

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            message = str(record.msg)
        record.msg = self._sanitize(message)
        record.args = None
        return True

    def _sanitize(self, message: str) -> str:
        return APP_KEY_PATTERN.sub(lambda m: f"{m.group(1)}{self.mask}", message)


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Install console and file handlers on the root logger."""
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.level}")

    root = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.log_dir:
        log_dir = Path(config.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_dir / LOG_FILENAME, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(AppKeyFilter())
        root.addHandler(handler)

    # urllib3 logs full request URLs, including the app_key query parameter.
    logging.getLogger("urllib3").setLevel(max(level, logging.WARNING))
    return root


def log_usage_instructions(dev_mode: bool, logger: logging.Logger | None = None) -> None:
    """Log the query parameter help when running in development mode."""
    if not dev_mode:
        return
    target = logger or logging.getLogger("tfl_status")
    for line in USAGE_LINES:
        target.info(line)


__all__ = ["AppKeyFilter", "configure_logging", "log_usage_instructions"]
