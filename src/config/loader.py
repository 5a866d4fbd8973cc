"""Configuration loading.

The scheduled job always runs on ``load_default()``: built-in values only,
no environment variables and no files. ``load_from_file`` exists for local
runs against a fork or a test webhook.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .exceptions import ConfigurationFileError, ConfigurationValidationError
from .models import Config


class ConfigurationLoader:
    """Builds validated ``Config`` instances from defaults, dicts or YAML."""

    def __init__(self) -> None:
        self._config: Config | None = None
        self._config_file_path: Path | None = None

    @property
    def config(self) -> Config | None:
        """Most recently loaded configuration."""
        return self._config

    @property
    def config_file_path(self) -> Path | None:
        """Resolved path of the file last loaded, if any."""
        return self._config_file_path

    def load_default(self) -> Config:
        """Load configuration with built-in values only."""
        self._config = Config()
        self._config_file_path = None
        return self._config

    def load_from_dict(self, config_data: dict[str, Any]) -> Config:
        """Load configuration from a dictionary of overrides.

        Args:
            config_data: Partial configuration; missing keys keep defaults

        Returns:
            Loaded and validated configuration

        Raises:
            ConfigurationValidationError: If configuration validation fails
        """
        try:
            self._config = Config(**config_data)
        except ValidationError as e:
            raise ConfigurationValidationError(
                f"Configuration validation failed: {e}",
                validation_errors=e.errors(),
            ) from e
        except TypeError as e:
            raise ConfigurationValidationError(
                f"Configuration validation failed: {e}"
            ) from e

        return self._config

    def load_from_file(self, config_path: str | Path) -> Config:
        """Load configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            Loaded and validated configuration

        Raises:
            ConfigurationFileError: If file cannot be read or parsed
            ConfigurationValidationError: If configuration validation fails
        """
        config_path = Path(config_path)

        if not config_path.is_file():
            raise ConfigurationFileError(
                f"Configuration file not found: {config_path}",
                file_path=str(config_path),
            )

        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationFileError(
                f"Failed to parse YAML configuration: {e}", file_path=str(config_path)
            ) from e
        except OSError as e:
            raise ConfigurationFileError(
                f"Failed to read configuration file: {e}", file_path=str(config_path)
            ) from e

        if config_data is None:
            config_data = {}
        if not isinstance(config_data, dict):
            raise ConfigurationFileError(
                "Configuration file must contain a mapping at the top level",
                file_path=str(config_path),
            )

        config = self.load_from_dict(config_data)
        self._config_file_path = config_path.resolve()
        return config


def load_config(config_path: str | Path | None = None) -> Config:
    """Load the default configuration, or a YAML file when a path is given."""
    loader = ConfigurationLoader()
    if config_path is None:
        return loader.load_default()
    return loader.load_from_file(config_path)
