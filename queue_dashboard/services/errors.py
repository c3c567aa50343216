"""
Exceptions raised by the Suri fetch layer.
"""

from typing import Optional


class SuriApiError(Exception):
    """Raised when the Suri API request fails or reports ``success: false``.

    Attributes:
        status_code: HTTP status of the failed response, if there was one
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class RetryExhaustedException(Exception):
    """Raised when all retry attempts have been exhausted."""

    pass


class CircuitBreakerError(Exception):
    """Raised when circuit breaker is open."""

    pass
