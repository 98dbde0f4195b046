"""Utility modules for clockiReport."""

from .date_utils import day_window, rfc3339, report_date_str
from .config_utils import Config, ConfigError, load_config

__all__ = [
    'day_window', 'rfc3339', 'report_date_str',
    'Config', 'ConfigError', 'load_config'
]
