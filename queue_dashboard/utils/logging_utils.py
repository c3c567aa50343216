"""Structured logging utilities with context support."""

import functools
import logging
import threading
import time
import uuid
from typing import Any, Callable, Dict, Optional, cast

# Thread-local storage for log context
_thread_local = threading.local()

# Field names whose values never reach the logs
SENSITIVE_FIELDS = {
    "token",
    "api_key",
    "apikey",
    "secret",
    "password",
    "authorization",
    "bearer",
}


def generate_poll_id() -> str:
    """
    Generate a unique id for one poll cycle.

    Every log line emitted while a cycle runs carries this id, so a failed
    refresh can be traced across the client, retry handler and poller.
    """
    return uuid.uuid4().hex[:12]


def get_log_context() -> Dict[str, Any]:
    """Copy of the fields currently attached to log records."""
    return dict(getattr(_thread_local, "context", {}))


class LogContext:
    """
    Context manager for adding structured fields to log records.

    Fields are stored in thread-local storage and added to every record
    by ``_ContextFilter``. Nested contexts merge; leaving a context restores
    the previous fields.

    Example:
        with LogContext(poll_id=generate_poll_id(), queue="waiting"):
            logger.info("Fetching contacts")
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self.previous_context: Optional[Dict[str, Any]] = None

    def __enter__(self) -> "LogContext":
        if not hasattr(_thread_local, "context"):
            _thread_local.context = {}

        self.previous_context = _thread_local.context.copy()
        _thread_local.context.update(self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        _thread_local.context = self.previous_context or {}


class _ContextFilter(logging.Filter):
    """Logging filter that adds context fields to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in getattr(_thread_local, "context", {}).items():
            setattr(record, key, value)
        return True


def sanitize_sensitive_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Redact sensitive values in a dictionary, recursively.

    A key is sensitive when it contains one of ``SENSITIVE_FIELDS``
    (case-insensitive), e.g. ``Authorization`` or ``SURI_API_KEY``.

    Example:
        >>> sanitize_sensitive_data({"Authorization": "Bearer abc", "queue": 1})
        {'Authorization': '***REDACTED***', 'queue': 1}
    """
    if not isinstance(data, dict):
        return data

    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if any(sensitive in str(key).lower() for sensitive in SENSITIVE_FIELDS):
            sanitized[key] = "***REDACTED***" if value is not None else None
        elif isinstance(value, dict):
            sanitized[key] = sanitize_sensitive_data(cast(Dict[str, Any], value))
        else:
            sanitized[key] = value

    return sanitized


def log_duration(func: Optional[Callable] = None, *, level: str = "DEBUG") -> Callable:
    """
    Decorator logging how long a call took, and any exception it raised.

    Example:
        @log_duration
        def poll(self):
            ...
    """

    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            logger = logging.getLogger(f.__module__)
            log_level = getattr(logging, level.upper())
            started = time.monotonic()
            try:
                result = f(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"{f.__qualname__} failed after "
                    f"{time.monotonic() - started:.2f}s: {type(e).__name__}: {e}"
                )
                raise
            logger.log(
                log_level, f"{f.__qualname__} took {time.monotonic() - started:.2f}s"
            )
            return result

        return wrapper

    if func is None:
        return decorator
    return decorator(func)
