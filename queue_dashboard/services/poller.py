"""
Dashboard poller: one refresh cycle of the fetch layer.
"""

import datetime as dt
import logging
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

from queue_dashboard.aggregators.departments import build_department_map
from queue_dashboard.models.attendant import Attendant
from queue_dashboard.models.contact import Contact
from queue_dashboard.services.errors import SuriApiError
from queue_dashboard.services.suri_client import SuriClient
from queue_dashboard.utils.logging_utils import LogContext, generate_poll_id, log_duration

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardSnapshot:
    """Data fetched by one poll.

    Attributes:
        waiting: Waiting queue, oldest first
        active: Contacts in attendance
        attendants: Attendant roster as reported by the API
        department_map: Normalized department id to name
        error: Waiting-queue failure message; the queues then hold the
            previous poll's data
        fetched_at: UTC instant the poll finished
    """

    waiting: Tuple[Contact, ...] = ()
    active: Tuple[Contact, ...] = ()
    attendants: Tuple[Attendant, ...] = ()
    department_map: Dict[str, str] = field(default_factory=dict)
    error: Optional[str] = None
    fetched_at: Optional[dt.datetime] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DashboardPoller:
    """
    Fetches queues, attendants and departments for the dashboard.

    Departments are loaded on the first poll and again whenever the map is
    empty. A failing waiting queue does not raise: the snapshot keeps the
    previous data and carries the error message.

    Example:
        >>> poller = DashboardPoller(SuriClient.from_config(config))
        >>> snapshot = poller.poll()
        >>> len(snapshot.waiting)
        3
    """

    def __init__(
        self,
        client: SuriClient,
        default_department_map: Optional[Mapping[str, str]] = None,
    ):
        self.client = client
        self.default_department_map = dict(default_department_map or {})
        self._department_map: Dict[str, str] = {}
        self._departments_loaded = False
        self._last = DashboardSnapshot()

    @property
    def department_map(self) -> Dict[str, str]:
        return dict(self._department_map)

    def load_departments(self) -> Dict[str, str]:
        """Refresh the department map from the API, merged over the defaults."""
        departments = self.client.fetch_departments()
        self._department_map = build_department_map(
            departments, self.default_department_map
        )
        self._departments_loaded = True
        logger.info(f"Loaded {len(self._department_map)} department name(s)")
        return self.department_map

    @log_duration
    def poll(self) -> DashboardSnapshot:
        """Run one refresh cycle."""
        with LogContext(poll_id=generate_poll_id()):
            if not self._departments_loaded or not self._department_map:
                self.load_departments()

            try:
                waiting = self.client.fetch_waiting_contacts()
            except SuriApiError as e:
                logger.error(f"Poll failed, keeping previous data: {e}")
                snapshot = DashboardSnapshot(
                    waiting=self._last.waiting,
                    active=self._last.active,
                    attendants=self._last.attendants,
                    department_map=self.department_map,
                    error=str(e) or "Failed to fetch data",
                    fetched_at=dt.datetime.now(dt.timezone.utc),
                )
                self._last = snapshot
                return snapshot

            active = self.client.fetch_active_contacts()
            attendants = self.client.fetch_attendants()

            snapshot = DashboardSnapshot(
                waiting=tuple(waiting),
                active=tuple(active),
                attendants=tuple(attendants),
                department_map=self.department_map,
                fetched_at=dt.datetime.now(dt.timezone.utc),
            )
            logger.info(
                f"Poll complete: {len(waiting)} waiting, {len(active)} active, "
                f"{len(attendants)} attendant(s)"
            )
            self._last = snapshot
            return snapshot
