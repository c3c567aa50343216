"""
Configuration module for the queue dashboard.
"""
from .settings import (
    DashboardConfig,
    get_config,
    load_config,
    reload_config
)

__all__ = [
    'DashboardConfig',
    'get_config',
    'load_config',
    'reload_config'
]
