"""
Suri API client.

Wraps the four endpoints the dashboard reads. Departments, attendants and
the active queue are best-effort: failures are logged and an empty list is
returned so the board keeps running. The waiting queue is the board's
primary data, so its failures raise ``SuriApiError``.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from queue_dashboard.models.attendant import Attendant, Department
from queue_dashboard.models.base import parse_records
from queue_dashboard.models.contact import Contact, parse_contacts
from queue_dashboard.services.error_classifier import status_code_of
from queue_dashboard.services.errors import (
    CircuitBreakerError,
    RetryExhaustedException,
    SuriApiError,
)
from queue_dashboard.services.retry_handler import RetryHandler
from queue_dashboard.utils.logging_utils import LogContext

logger = logging.getLogger(__name__)

DEPARTMENTS_PATH = "/api/departments"
ATTENDANTS_PATH = "/api/attendants"
CONTACTS_LIST_PATH = "/api/contacts/list"

# Queue 1: waiting for a human, oldest first, customer-initiated sessions
WAITING_QUEUE_PAYLOAD = {
    "queue": 1,
    "limit": 100,
    "orderBy": "lastActivity",
    "orderType": "asc",
    "sessionType": 0,
}

# Queue 2: in attendance, most recent activity first
ACTIVE_QUEUE_PAYLOAD = {
    "queue": 2,
    "limit": 100,
    "orderBy": "lastActivity",
    "orderType": "desc",
}


class SuriClient:
    """Client for the Suri chatbot platform API."""

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 10.0,
        retry_handler: Optional[RetryHandler] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API root, e.g. ``https://suri.example.com``
            token: Bearer token
            timeout: Per-request timeout in seconds
            retry_handler: Retry policy; defaults to ``RetryHandler()``
            session: HTTP session to reuse (mainly for tests)
        """
        self.base_url = base_url.strip().rstrip("/")
        self.timeout = timeout
        self.retry_handler = retry_handler or RetryHandler()
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/json",
            }
        )

    @classmethod
    def from_config(cls, config) -> "SuriClient":
        """Build a client from ``DashboardConfig``."""
        return cls(
            base_url=config.api_url,
            token=config.api_key,
            timeout=config.request_timeout,
            retry_handler=RetryHandler(
                max_retries=config.max_retries, base_delay=config.retry_delay
            ),
        )

    def _send(
        self, method: str, path: str, payload: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Perform one request and unwrap the ``{success, data, error}`` envelope."""
        response = self.session.request(
            method, f"{self.base_url}{path}", json=payload, timeout=self.timeout
        )

        if not response.ok:
            raise SuriApiError(
                f"API request failed: {response.status_code} {response.reason}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise SuriApiError(
                f"Invalid JSON from {path}: {e}", status_code=response.status_code
            ) from e

        if not isinstance(body, dict) or not body.get("success"):
            error = body.get("error") if isinstance(body, dict) else None
            raise SuriApiError(error or "Unknown API error")

        return body.get("data")

    def _request(
        self, method: str, path: str, payload: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Run ``_send`` under the retry policy; every failure becomes ``SuriApiError``."""
        with LogContext(endpoint=path):
            try:
                return self.retry_handler.execute_with_retry(
                    self._send, method, path, payload
                )
            except SuriApiError:
                raise
            except RetryExhaustedException as e:
                raise SuriApiError(str(e), status_code_of(e.__cause__)) from e
            except CircuitBreakerError as e:
                raise SuriApiError(f"{path} skipped: {e}") from e
            except requests.exceptions.RequestException as e:
                raise SuriApiError(f"{type(e).__name__}: {e}") from e

    def _list_contacts(self, payload: Dict[str, Any]) -> List[Contact]:
        data = self._request("POST", CONTACTS_LIST_PATH, payload)
        items = data.get("items") if isinstance(data, dict) else None
        return parse_contacts(items or [])

    def fetch_departments(self) -> List[Department]:
        """List departments; ``[]`` on any failure."""
        try:
            data = self._request("GET", DEPARTMENTS_PATH)
        except SuriApiError as e:
            logger.warning(f"Department fetch failed: {e}")
            return []
        return parse_records(Department, data if isinstance(data, list) else [])

    def fetch_attendants(self) -> List[Attendant]:
        """List attendants; ``[]`` on any failure."""
        try:
            data = self._request("GET", ATTENDANTS_PATH)
        except SuriApiError as e:
            logger.warning(f"Attendant fetch failed: {e}")
            return []
        return parse_records(Attendant, data if isinstance(data, list) else [])

    def fetch_waiting_contacts(self) -> List[Contact]:
        """
        List contacts waiting for a human, oldest first.

        Raises:
            SuriApiError: If the request fails or the API reports an error
        """
        try:
            contacts = self._list_contacts(WAITING_QUEUE_PAYLOAD)
        except SuriApiError as e:
            logger.error(f"Waiting queue fetch failed: {e}")
            raise
        logger.debug(f"Fetched {len(contacts)} waiting contact(s)")
        return contacts

    def fetch_active_contacts(self) -> List[Contact]:
        """List contacts in attendance; ``[]`` on any failure."""
        try:
            contacts = self._list_contacts(ACTIVE_QUEUE_PAYLOAD)
        except SuriApiError as e:
            logger.warning(f"Active queue fetch failed: {e}")
            return []
        logger.debug(f"Fetched {len(contacts)} active contact(s)")
        return contacts

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "SuriClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
