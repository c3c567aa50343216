"""Unit tests for the console command."""

import importlib
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from queue_dashboard.cli.commands.console import console
from queue_dashboard.services.poller import DashboardSnapshot

# The commands package rebinds the submodule names to the click commands
console_module = importlib.import_module("queue_dashboard.cli.commands.console")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def poller(dashboard_snapshot):
    mock_poller = MagicMock()
    mock_poller.poll.return_value = dashboard_snapshot
    with patch.object(console_module, "create_poller", return_value=mock_poller):
        yield mock_poller


class TestConsoleCommand:
    """Test suite for the console command."""

    def test_waiting_tab_lists_all_waiting(self, runner, mock_env, poller):
        result = runner.invoke(console, [])

        assert result.exit_code == 0, result.output
        assert "Contact c1" in result.output
        assert "Contact c2" in result.output
        assert "Contact c3" not in result.output

    def test_department_filter(self, runner, mock_env, poller):
        result = runner.invoke(console, ["--department", "Support"])

        assert result.exit_code == 0, result.output
        assert "Contact c2" in result.output
        assert "Contact c1" not in result.output

    def test_active_tab_for_attendant(self, runner, mock_env, poller):
        result = runner.invoke(console, ["--tab", "active", "--attendant", "u1"])

        assert result.exit_code == 0, result.output
        assert "Contact c3" in result.output
        assert "Sales" in result.output

    def test_active_tab_other_attendant_is_empty(self, runner, mock_env, poller):
        result = runner.invoke(console, ["--tab", "active", "--attendant", "u2"])

        assert result.exit_code == 0, result.output
        assert "No matching contacts" in result.output

    def test_no_match_lists_departments(self, runner, mock_env, poller):
        result = runner.invoke(console, ["--search", "nobody"])

        assert result.exit_code == 0, result.output
        assert "No matching contacts" in result.output
        assert "Departments:" in result.output
        assert "Sales" in result.output

    def test_poll_error(self, runner, mock_env, poller):
        poller.poll.return_value = DashboardSnapshot(error="Failed to fetch data")

        result = runner.invoke(console, [])

        assert result.exit_code == 2
