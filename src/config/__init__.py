"""Configuration for the gas price watch job.

Example usage:
    from src.config import load_config

    config = load_config()
    lookback = config.watch.lookback_hours
"""

from .exceptions import (
    ConfigurationError,
    ConfigurationFileError,
    ConfigurationValidationError,
)
from .loader import ConfigurationLoader, load_config
from .models import (
    DEFAULT_TRACKED_FIELDS,
    Config,
    GasPriceSourceSettings,
    GitHubSettings,
    LogLevel,
    SlackConfig,
    SystemConfig,
    WatchSettings,
)

__all__ = [
    "DEFAULT_TRACKED_FIELDS",
    "Config",
    "ConfigurationError",
    "ConfigurationFileError",
    "ConfigurationLoader",
    "ConfigurationValidationError",
    "GasPriceSourceSettings",
    "GitHubSettings",
    "LogLevel",
    "SlackConfig",
    "SystemConfig",
    "WatchSettings",
    "load_config",
]
