"""Configuration management"""

from .config_loader import ConfigError, ConfigLoader
from .converter_config import AppConfig

__all__ = ["AppConfig", "ConfigError", "ConfigLoader"]
