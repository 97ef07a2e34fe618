import json
import logging
import socket
from typing import Optional

from wordslugs.core.config import get_settings

PACKAGE_LOGGER = "wordslugs"

# Structured fields copied into JSON records when present
EXTRA_FIELDS = ("pattern", "case_style", "word_count", "part_of_speech", "categories")


class ContextFilter(logging.Filter):
    def filter(self, record):
        record.hostname = socket.gethostname()
        return True


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "hostname": getattr(record, "hostname", ""),
            "pathname": record.pathname,
            "lineno": record.lineno,
        }

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


class AppLogger:
    _instance: Optional["AppLogger"] = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        self._initialized = True
        self.settings = get_settings()
        self._setup_logging()

    def _setup_logging(self):
        # Only the package logger is configured; the root logger belongs to the host application
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(getattr(logging, self.settings.logging.level))
        # Handled here only, never by root handlers
        package_logger.propagate = False

        for handler in package_logger.handlers[:]:
            package_logger.removeHandler(handler)

        if self.settings.logging.format == "json":
            formatter = JSONFormatter(datefmt="%Y-%m-%dT%H:%M:%S")
        else:
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler.addFilter(ContextFilter())
        package_logger.addHandler(console_handler)

    @classmethod
    def reset(cls) -> None:
        """Forget the current configuration so the next logger call reapplies settings."""
        cls._instance = None
        cls._initialized = False

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        cls()
        return logging.getLogger(name)


def get_logger(name: str) -> logging.Logger:
    return AppLogger.get_logger(name)
