"""Unit tests for headline dashboard metrics."""

import datetime as dt

from queue_dashboard.aggregators.metrics import (
    DashboardMetrics,
    calculate_dashboard_metrics,
)
from queue_dashboard.models.contact import Contact

UTC = dt.timezone.utc
NOW = dt.datetime(2024, 3, 4, 10, 0, tzinfo=UTC)


def waiting_since(contact_id, last_activity) -> Contact:
    return Contact.model_validate({"id": contact_id, "lastActivity": last_activity})


class TestCalculateDashboardMetrics:
    """Test the board header metrics."""

    def test_empty_queues_give_zeroes(self, utc_calculator):
        assert calculate_dashboard_metrics([], [], utc_calculator, 15, now=NOW) == DashboardMetrics()

    def test_waiting_metrics(self, utc_calculator):
        waiting = [
            waiting_since("c1", "2024-03-04T09:40:00Z"),  # 20 min
            waiting_since("c2", "2024-03-04T09:55:00Z"),  # 5 min
            waiting_since("c3", "2024-03-04T09:45:00Z"),  # 15 min
        ]

        metrics = calculate_dashboard_metrics(waiting, [], utc_calculator, 15, now=NOW)

        assert metrics.total_waiting == 3
        assert metrics.avg_wait_seconds == 800
        assert metrics.longest_wait_seconds == 1200
        assert metrics.sla_breached_count == 2

    def test_active_metrics_use_answer_time(self, utc_calculator):
        active = [
            Contact.model_validate(
                {
                    "id": "a1",
                    "lastActivity": "2024-03-04T09:59:00Z",
                    "agent": {"dateAnswer": "2024-03-04T09:00:00Z"},
                }
            ),
            waiting_since("a2", "2024-03-04T09:30:00Z"),
        ]

        metrics = calculate_dashboard_metrics([], active, utc_calculator, 15, now=NOW)

        assert metrics.total_active == 2
        assert metrics.avg_active_seconds == 2700
