"""Fetch layer: Suri API client, retry policy and dashboard poller."""

from queue_dashboard.services.error_classifier import ErrorClassifier, ErrorType
from queue_dashboard.services.errors import (
    CircuitBreakerError,
    RetryExhaustedException,
    SuriApiError,
)
from queue_dashboard.services.poller import DashboardPoller, DashboardSnapshot
from queue_dashboard.services.retry_handler import RetryHandler
from queue_dashboard.services.suri_client import SuriClient

__all__ = [
    "ErrorClassifier",
    "ErrorType",
    "CircuitBreakerError",
    "RetryExhaustedException",
    "SuriApiError",
    "DashboardPoller",
    "DashboardSnapshot",
    "RetryHandler",
    "SuriClient",
]
