"""
Error classification for Suri API calls: retryable versus fatal.
"""

import logging
import socket
from enum import Enum
from typing import Dict, Optional

import requests.exceptions

from queue_dashboard.services.errors import SuriApiError

logger = logging.getLogger(__name__)


class ErrorType(Enum):
    """Classification of error types."""

    RETRYABLE = "retryable"  # 429, 5xx, network errors
    FATAL = "fatal"  # other 4xx, including auth failures
    UNKNOWN = "unknown"


def status_code_of(exception: Exception) -> Optional[int]:
    """HTTP status carried by a requests or Suri API error, if any."""
    if isinstance(exception, SuriApiError):
        return exception.status_code
    if isinstance(exception, requests.exceptions.HTTPError):
        response = exception.response
        return response.status_code if response is not None else None
    return None


class ErrorClassifier:
    """
    Classifies fetch errors to decide whether a retry can help.

    Keeps per-type counts so the CLI can report them after a session.
    """

    def __init__(self):
        self._stats: Dict[str, int] = {
            "retryable": 0,
            "fatal": 0,
            "unknown": 0,
            "total": 0,
        }

    def classify(self, exception: Exception) -> ErrorType:
        """
        Classify an exception into retryable, fatal, or unknown.

        Args:
            exception: The exception to classify

        Returns:
            ErrorType classification
        """
        error_type = self._classify(exception)
        self._stats["total"] += 1
        self._stats[error_type.value] += 1
        return error_type

    def _classify(self, exception: Exception) -> ErrorType:
        status_code = status_code_of(exception)
        if status_code is not None:
            if status_code == 429 or 500 <= status_code < 600:
                return ErrorType.RETRYABLE
            if 400 <= status_code < 500:
                return ErrorType.FATAL

        if isinstance(
            exception,
            (
                socket.timeout,
                requests.exceptions.ConnectionError,
                requests.exceptions.Timeout,
            ),
        ):
            return ErrorType.RETRYABLE

        return ErrorType.UNKNOWN

    def is_retryable(self, exception: Exception) -> bool:
        """Check if an exception should be retried."""
        return self.classify(exception) == ErrorType.RETRYABLE

    def get_error_description(self, exception: Exception) -> str:
        """
        Get a human-readable error description.

        Example:
            >>> ErrorClassifier().get_error_description(SuriApiError("x", 503))
            'Server error (HTTP 503) - retryable'
        """
        error_type = self.classify(exception)
        status_code = status_code_of(exception)

        if status_code == 401:
            return f"Authentication failed (HTTP 401) - {error_type.value}"
        if status_code == 429:
            return f"Rate limit error (HTTP 429) - {error_type.value}"
        if status_code is not None and 500 <= status_code < 600:
            return f"Server error (HTTP {status_code}) - {error_type.value}"
        if status_code is not None and 400 <= status_code < 500:
            return f"Client error (HTTP {status_code}) - {error_type.value}"

        if isinstance(exception, (socket.timeout, requests.exceptions.Timeout)):
            return f"Network timeout error - {error_type.value}"

        if isinstance(exception, requests.exceptions.ConnectionError):
            return f"Network connection error - {error_type.value}"

        return f"{type(exception).__name__}: {exception} - {error_type.value}"

    def get_statistics(self) -> Dict[str, int]:
        return self._stats.copy()

    def reset_statistics(self):
        self._stats = {"retryable": 0, "fatal": 0, "unknown": 0, "total": 0}
