"""Centralized logging configuration for the queue dashboard."""

import json
import logging
import logging.handlers
import os
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from queue_dashboard.utils.logging_utils import _ContextFilter, sanitize_sensitive_data

if TYPE_CHECKING:
    from queue_dashboard.config.settings import DashboardConfig

# Libraries whose DEBUG output drowns the poll loop
NOISY_LOGGERS = ("urllib3", "requests")

# Standard LogRecord attributes that are not user-supplied extras
_RECORD_FIELDS = set(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Fields passed through ``extra={}`` or ``LogContext`` are included, with
    tokens and keys redacted.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_FIELDS and not key.startswith("_")
        }
        log_data.update(sanitize_sensitive_data(extras))

        return json.dumps(log_data, default=str)


class LoggingConfig:
    """
    Configuration for centralized logging.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Format type ('standard' or 'json')
        log_file: Path to a rotating log file; no file output when None
        max_file_size: Maximum log file size in bytes (default: 5MB)
        backup_count: Number of backup files to keep (default: 3)
    """

    VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    VALID_FORMATS = {"standard", "json"}

    def __init__(
        self,
        log_level: str = "INFO",
        log_format: str = "standard",
        log_file: Optional[str] = None,
        max_file_size: int = 5 * 1024 * 1024,
        backup_count: int = 3,
    ):
        """
        Initialize logging configuration.

        Raises:
            ValueError: If invalid log level or format
        """
        if log_level.upper() not in self.VALID_LEVELS:
            raise ValueError(
                f"Invalid log level: {log_level}. "
                f"Must be one of {', '.join(sorted(self.VALID_LEVELS))}"
            )

        if log_format not in self.VALID_FORMATS:
            raise ValueError(
                f"Invalid log format: {log_format}. "
                f"Must be one of {', '.join(sorted(self.VALID_FORMATS))}"
            )

        self.log_level = log_level.upper()
        self.log_format = log_format
        self.log_file = log_file
        self.max_file_size = max_file_size
        self.backup_count = backup_count

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """
        Create configuration from environment variables.

        Environment Variables:
            LOG_LEVEL: Log level (default: INFO)
            LOG_FORMAT: Log format (default: standard)
            LOG_FILE: Log file path (default: None)
            LOG_MAX_FILE_SIZE: Max file size in bytes (default: 5242880)
            LOG_BACKUP_COUNT: Backup file count (default: 3)
        """
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            log_file=os.getenv("LOG_FILE") or None,
            max_file_size=int(os.getenv("LOG_MAX_FILE_SIZE", str(5 * 1024 * 1024))),
            backup_count=int(os.getenv("LOG_BACKUP_COUNT", "3")),
        )

    @classmethod
    def from_settings(cls, settings: "DashboardConfig") -> "LoggingConfig":
        """Create configuration from dashboard settings (DEBUG forces DEBUG level)."""
        base = cls.from_env()
        base.log_level = "DEBUG" if settings.debug else settings.log_level
        return base


def configure_logging(config: LoggingConfig) -> None:
    """
    Configure the root logger for the dashboard.

    Replaces existing root handlers with a console handler and, when a log
    file is configured, a rotating file handler.

    Args:
        config: LoggingConfig instance
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    level = getattr(logging, config.log_level)
    root_logger.setLevel(level)

    if config.log_format == "json":
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    context_filter = _ContextFilter()
    handlers: list = [logging.StreamHandler()]

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                filename=config.log_file,
                maxBytes=config.max_file_size,
                backupCount=config.backup_count,
            )
        )

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def reset_logging() -> None:
    """
    Reset logging configuration to defaults.

    Useful for testing and cleanup.
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(logging.WARNING)
