"""Unit tests for the base model and bulk record parsing."""

import logging

from queue_dashboard.models.attendant import Department
from queue_dashboard.models.base import BaseDataModel, parse_records


class Queue(BaseDataModel):
    name: str
    size: int = 0


class TestBaseDataModel:
    """Test shared model configuration."""

    def test_unknown_fields_ignored(self):
        queue = Queue.model_validate({"name": "Sales", "color": "blue"})
        assert queue.model_dump() == {"name": "Sales", "size": 0}

    def test_assignment_is_validated(self):
        queue = Queue(name="Sales")
        queue.size = "3"
        assert queue.size == 3


class TestParseRecords:
    """Test validating raw API records in bulk."""

    def test_valid_records_keep_order(self):
        records = parse_records(
            Department, [{"id": "cb1", "Name": "Sales"}, {"id": "cb2", "name": "Support"}]
        )
        assert [d.name for d in records] == ["Sales", "Support"]

    def test_invalid_records_skipped_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING):
            records = parse_records(Queue, [{"name": "ok"}, {"size": 2}, None])

        assert [q.name for q in records] == ["ok"]
        assert "Skipping invalid Queue record" in caplog.text

    def test_empty_input(self):
        assert parse_records(Queue, []) == []
