"""
Unit tests for configuration management.
"""

import pytest
from pydantic import ValidationError

from queue_dashboard.aggregators.rotation import parse_external_urls
from queue_dashboard.config.settings import (
    DashboardConfig,
    get_config,
    load_config,
    reload_config,
)


class TestDashboardConfig:
    """Test cases for DashboardConfig."""

    def test_config_with_valid_env_vars(self, test_config):
        """Test configuration loads correctly with valid environment variables."""
        assert test_config.api_url == "https://suri.test"
        assert test_config.api_key == "test-token"
        assert test_config.timezone == "UTC"
        assert test_config.environment == "testing"
        assert test_config.debug is False
        assert test_config.log_level == "DEBUG"
        assert test_config.is_api_configured is True

    def test_default_values(self, mock_env, monkeypatch):
        """Test default configuration values."""
        for key in mock_env:
            monkeypatch.delenv(key)

        config = DashboardConfig()

        assert config.refresh_interval == 15
        assert config.sla_limit == 15
        assert config.business_start_hour == 8
        assert config.business_end_hour == 16
        assert config.timezone == "America/Sao_Paulo"
        assert config.avg_time_alert_limit == 30
        assert config.no_department_label == "General"
        assert config.items_per_column == 5
        assert config.columns_per_page == 5
        assert config.excluded_departments == []
        assert config.external_urls == []
        assert config.is_api_configured is False

    def test_comma_separated_lists(self, mock_env, monkeypatch):
        monkeypatch.setenv("EXCLUDED_DEPARTMENTS", "Internal, Test ,,")
        monkeypatch.setenv("EXTERNAL_URLS", "https://a.example,https://b.example")

        config = DashboardConfig()

        assert config.excluded_departments == ["Internal", "Test"]
        assert config.external_urls == ["https://a.example", "https://b.example"]

    def test_external_urls_match_rotation_parser(self, mock_env, monkeypatch):
        raw = " https://a.example , ,https://b.example"
        monkeypatch.setenv("EXTERNAL_URLS", raw)

        assert DashboardConfig().external_urls == parse_external_urls(raw)

    def test_business_hours(self, test_config):
        hours = test_config.business_hours()

        assert hours.start_hour == 8
        assert hours.end_hour == 16
        assert hours.timezone == "UTC"

    def test_invalid_business_window(self, mock_env, monkeypatch):
        monkeypatch.setenv("BUSINESS_START_HOUR", "18")
        monkeypatch.setenv("BUSINESS_END_HOUR", "9")

        with pytest.raises(ValidationError, match="must be after"):
            DashboardConfig()

    def test_invalid_timezone(self, mock_env, monkeypatch):
        monkeypatch.setenv("BUSINESS_TIMEZONE", "Nowhere/Land")

        with pytest.raises(ValidationError):
            DashboardConfig()

    def test_invalid_log_level(self, mock_env, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError):
            DashboardConfig()

    def test_log_level_normalized(self, mock_env, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        assert DashboardConfig().log_level == "WARNING"

    def test_invalid_environment(self, mock_env, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "staging")

        with pytest.raises(ValidationError):
            DashboardConfig()

    @pytest.mark.parametrize("key", ["SLA_LIMIT", "REFRESH_INTERVAL", "ITEMS_PER_COLUMN"])
    def test_non_positive_values_rejected(self, mock_env, monkeypatch, key):
        monkeypatch.setenv(key, "0")

        with pytest.raises(ValidationError):
            DashboardConfig()


class TestConfigLoading:
    """Test the global configuration accessors."""

    def test_get_config_is_cached(self, mock_env):
        assert get_config() is get_config()

    def test_reload_config_rebuilds(self, mock_env, monkeypatch):
        first = get_config()
        monkeypatch.setenv("SLA_LIMIT", "20")

        second = reload_config()

        assert second is not first
        assert second.sla_limit == 20
        assert get_config() is second

    def test_load_config_from_env_file(self, mock_env, monkeypatch, tmp_path):
        # Recorded so the value loaded from the file is removed afterwards
        monkeypatch.setenv("COLUMNS_PER_PAGE", "5")
        monkeypatch.delenv("COLUMNS_PER_PAGE")
        env_file = tmp_path / "dashboard.env"
        env_file.write_text("COLUMNS_PER_PAGE=3\n")

        config = load_config(str(env_file))

        assert config.columns_per_page == 3
