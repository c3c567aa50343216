"""Unit tests for the snapshot command."""

import importlib
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from queue_dashboard.cli.commands.snapshot import snapshot
from queue_dashboard.services.poller import DashboardSnapshot

# The commands package rebinds the submodule names to the click commands
snapshot_module = importlib.import_module("queue_dashboard.cli.commands.snapshot")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def poller(dashboard_snapshot):
    mock_poller = MagicMock()
    mock_poller.poll.return_value = dashboard_snapshot
    with patch.object(snapshot_module, "create_poller", return_value=mock_poller):
        yield mock_poller


class TestSnapshotCommand:
    """Test suite for the snapshot command."""

    def test_prints_boards_and_summary(self, runner, mock_env, poller):
        result = runner.invoke(snapshot, [])

        assert result.exit_code == 0, result.output
        assert "Fetching queues" in result.output
        assert "Waiting queue, page 1" in result.output
        assert "In attendance, page 1" in result.output
        assert "2 waiting, 1 in attendance" in result.output
        poller.poll.assert_called_once()

    def test_view_filter(self, runner, mock_env, poller):
        result = runner.invoke(snapshot, ["--view", "waiting"])

        assert result.exit_code == 0, result.output
        assert "Waiting queue, page 1" in result.output
        assert "In attendance, page" not in result.output

    def test_poll_error_exits_with_api_code(self, runner, mock_env, poller):
        poller.poll.return_value = DashboardSnapshot(error="API request failed: 503")

        result = runner.invoke(snapshot, [])

        assert result.exit_code == 2
        assert "API Error: API request failed: 503" in result.output

    def test_missing_api_settings(self, runner, mock_env, monkeypatch, poller):
        monkeypatch.setenv("SURI_API_KEY", "")

        result = runner.invoke(snapshot, [])

        assert result.exit_code == 1
        assert "SURI_API_URL and SURI_API_KEY must be set" in result.output
        poller.poll.assert_not_called()

    def test_invalid_view_rejected(self, runner, mock_env, poller):
        result = runner.invoke(snapshot, ["--view", "nope"])

        assert result.exit_code != 0
