"""
Global pytest configuration and fixtures.
"""
import os
import pytest
from typing import Any, Dict, List
from queue_dashboard.calculators.business_time import BusinessHours, BusinessTimeCalculator
from queue_dashboard.config import DashboardConfig, reload_config
from queue_dashboard.models.attendant import Attendant
from queue_dashboard.models.base import parse_records
from queue_dashboard.models.contact import parse_contacts
from queue_dashboard.services.poller import DashboardSnapshot


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        'SURI_API_URL': 'https://suri.test/',
        'SURI_API_KEY': 'test-token',
        'REFRESH_INTERVAL': '15',
        'SLA_LIMIT': '15',
        'BUSINESS_START_HOUR': '8',
        'BUSINESS_END_HOUR': '16',
        'BUSINESS_TIMEZONE': 'UTC',
        'AVG_TIME_ALERT_LIMIT': '30',
        'EXCLUDED_DEPARTMENTS': '',
        'EXTERNAL_URLS': '',
        'MAX_RETRIES': '0',
        'RETRY_DELAY': '0',
        'ENVIRONMENT': 'testing',
        'DEBUG': 'false',
        'LOG_LEVEL': 'DEBUG'
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)

    # Clear the global config to force reload with test values
    import queue_dashboard.config.settings
    queue_dashboard.config.settings._config = None

    yield test_env_vars

    # Clean up
    queue_dashboard.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> DashboardConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def utc_calculator() -> BusinessTimeCalculator:
    """Calculator with the default 08:00-16:00 window in UTC."""
    return BusinessTimeCalculator(BusinessHours(timezone='UTC'))


def make_contact_payload(contact_id: str, **overrides: Any) -> Dict[str, Any]:
    """Raw contact record as returned by /api/contacts/list."""
    payload = {
        'id': contact_id,
        'name': f'Contact {contact_id}',
        'phone': '5511999990000',
        'lastActivity': '2024-03-04T09:00:00Z',
        'dateCreate': '2024-03-04T08:55:00Z',
        'departmentId': 'cb1',
        'agent': None,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def contact_payload_factory():
    """Factory building raw contact records."""
    return make_contact_payload


@pytest.fixture
def sample_contact_payloads() -> List[Dict[str, Any]]:
    """Two waiting contacts and one in attendance."""
    return [
        make_contact_payload('c1'),
        make_contact_payload('c2', lastActivity='2024-03-04T09:30:00Z', departmentId='CB2'),
        make_contact_payload(
            'c3',
            lastActivity='2024-03-04T10:00:00Z',
            agent={
                'status': 1,
                'departmentId': 'cb1',
                'dateRequest': '2024-03-04T09:10:00Z',
                'dateAnswer': '2024-03-04T09:40:00Z',
                'platformUserId': 'u1',
            },
        ),
    ]


@pytest.fixture
def sample_department_payloads() -> List[Dict[str, Any]]:
    """Departments as returned by /api/departments."""
    return [
        {'id': 'cb1', 'Name': 'Sales'},
        {'id': 'CB2', 'name': 'Support'},
    ]


@pytest.fixture
def sample_attendant_payloads() -> List[Dict[str, Any]]:
    """Attendants as returned by /api/attendants."""
    return [
        {'id': 'u1', 'name': 'Ana', 'email': 'ana@example.com', 'status': 1},
        {'id': 'u2', 'name': 'Bruno', 'email': 'bruno@example.com', 'status': 0},
        {'id': 'u3', 'name': 'Atendente', 'status': 1},
    ]


@pytest.fixture
def dashboard_snapshot(sample_contact_payloads, sample_attendant_payloads) -> DashboardSnapshot:
    """Snapshot with c1 and c2 waiting, c3 in attendance with Ana."""
    contacts = parse_contacts(sample_contact_payloads)
    return DashboardSnapshot(
        waiting=tuple(contacts[:2]),
        active=(contacts[2],),
        attendants=tuple(parse_records(Attendant, sample_attendant_payloads)),
        department_map={'cb1': 'Sales', 'cb2': 'Support'},
    )


@pytest.fixture(autouse=True)
def cleanup_test_files():
    """Clean up any test files created during testing."""
    yield

    # Remove test coverage files in case they're created
    test_files = ['coverage.xml', '.coverage']
    for file in test_files:
        if os.path.exists(file):
            os.remove(file)


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "api: mark test as exercising the Suri API client"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "suri" in item.name.lower() or "api" in item.name.lower():
            item.add_marker(pytest.mark.api)
