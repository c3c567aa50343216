"""Settings and service wiring shared by the CLI commands."""

from pydantic import ValidationError

from queue_dashboard.cli.error_handlers import ConfigurationError
from queue_dashboard.config.settings import DashboardConfig, get_config
from queue_dashboard.services.poller import DashboardPoller
from queue_dashboard.services.suri_client import SuriClient


def load_settings(require_api: bool = False) -> DashboardConfig:
    """Load settings, turning validation failures into ``ConfigurationError``."""
    try:
        config = get_config()
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'settings'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigurationError(
            problems, recovery_hint="Check the values in your .env file"
        ) from e

    if require_api and not config.is_api_configured:
        raise ConfigurationError(
            "SURI_API_URL and SURI_API_KEY must be set",
            recovery_hint="Add them to your .env file or the environment",
        )
    return config


def create_poller(config: DashboardConfig) -> DashboardPoller:
    return DashboardPoller(SuriClient.from_config(config))
