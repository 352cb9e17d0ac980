"""Configuration loader for application settings."""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .converter_config import AppConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""

    pass


class ConfigLoader:
    """Load and validate application configuration."""

    DEFAULT_CONFIG_PATHS = [
        Path("~/.emlbox/app_config.json"),
        Path("config/app_config.json"),
    ]

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Optional custom config file path
        """
        self.config_path = config_path
        self._config: Optional[AppConfig] = None

    def load_app_config(self) -> AppConfig:
        """
        Load application configuration from file.

        An explicit config path must exist. Without one, the default
        locations are searched and built-in defaults are used when none
        of them exists.

        Returns:
            AppConfig instance

        Raises:
            ConfigError: If the config file is missing, unreadable or invalid
        """
        if self._config is not None:
            return self._config

        if self.config_path is not None and not self.config_path.expanduser().exists():
            raise ConfigError(f"Config file not found: {self.config_path}")

        config_paths = [self.config_path] if self.config_path else self.DEFAULT_CONFIG_PATHS

        for config_path in config_paths:
            if config_path and config_path.expanduser().exists():
                try:
                    with open(config_path.expanduser(), "r", encoding="utf-8") as f:
                        config_data = json.load(f)
                    self._config = AppConfig(**config_data)
                except OSError as e:
                    raise ConfigError(f"Cannot read config {config_path}: {e}") from e
                except (json.JSONDecodeError, TypeError, ValidationError) as e:
                    raise ConfigError(f"Invalid config in {config_path}: {e}") from e
                logger.debug("Loaded configuration from %s", config_path)
                return self._config

        # Return default config if no file found
        self._config = AppConfig()
        return self._config
