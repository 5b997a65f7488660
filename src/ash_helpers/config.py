"""
Configuration Management - Centralized configuration for the helpers

Part of the Ash Helpers library.

License: MIT
"""

import os
from typing import Dict, Any, Optional
from dataclasses import dataclass, field, is_dataclass
from pathlib import Path
import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"
    format_type: str = "simple"
    log_file: Optional[str] = None


@dataclass
class HelpersConfig:
    """Main helpers configuration."""

    # Environment
    environment: str = "development"

    # Timezone used for parsed and current dates
    timezone: str = "UTC"

    # Component configurations
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigManager:
    """
    Configuration manager for loading and validating configuration.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to YAML configuration file (optional)
        """
        self.config_path = config_path
        self._config: Optional[HelpersConfig] = None

    def load_config(self) -> HelpersConfig:
        """
        Load configuration from environment variables and files.

        Returns:
            HelpersConfig instance

        Raises:
            ValueError: If the resulting configuration is invalid
        """
        if self._config is not None:
            return self._config

        # Start with default configuration
        config = HelpersConfig()

        # Load from file if specified
        if self.config_path and Path(self.config_path).exists():
            config = self._load_from_file(config, self.config_path)

        # Override with environment variables
        config = self._load_from_env(config)

        self._validate_config(config)

        self._config = config
        logger.debug(f"Configuration loaded for environment: {config.environment}")

        return config

    def _load_from_file(self, config: HelpersConfig, file_path: str) -> HelpersConfig:
        """Load configuration from YAML file."""
        with open(file_path, "r", encoding="utf-8") as f:
            file_config = yaml.safe_load(f) or {}

        if not isinstance(file_config, dict):
            raise ValueError(f"Configuration file must contain a mapping: {file_path}")

        self._update_config_from_dict(config, file_config)
        logger.info(f"Configuration loaded from file: {file_path}")

        return config

    def _load_from_env(self, config: HelpersConfig) -> HelpersConfig:
        """Load configuration from environment variables."""

        config.environment = os.getenv("ENVIRONMENT", config.environment)
        config.timezone = os.getenv("APP_TIMEZONE", config.timezone)

        # Logging
        config.logging.level = os.getenv("LOG_LEVEL", config.logging.level)
        config.logging.format_type = os.getenv("LOG_FORMAT", config.logging.format_type)
        config.logging.log_file = os.getenv("LOG_FILE", config.logging.log_file)

        return config

    def _update_config_from_dict(self, config: HelpersConfig, config_dict: Dict[str, Any]) -> None:
        """Update configuration from dictionary."""
        for section_name, section_config in config_dict.items():
            if not hasattr(config, section_name):
                continue

            section_obj = getattr(config, section_name)
            if is_dataclass(section_obj):
                if not isinstance(section_config, dict):
                    raise ValueError(
                        f"Configuration section '{section_name}' must be a mapping, "
                        f"got {type(section_config).__name__}"
                    )
                for key, value in section_config.items():
                    if hasattr(section_obj, key):
                        setattr(section_obj, key, value)
            else:
                setattr(config, section_name, section_config)

    def _validate_config(self, config: HelpersConfig) -> None:
        """Validate configuration values."""
        errors = []

        try:
            ZoneInfo(config.timezone)
        except (ZoneInfoNotFoundError, ValueError, TypeError):
            errors.append(f"Unknown timezone: {config.timezone}")

        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if str(config.logging.level).upper() not in valid_log_levels:
            errors.append(f"Log level must be one of: {', '.join(valid_log_levels)}")

        valid_formats = ["simple", "detailed", "json", "structured"]
        if str(config.logging.format_type).lower() not in valid_formats:
            errors.append(f"Log format must be one of: {', '.join(valid_formats)}")

        if errors:
            error_message = "Configuration validation errors:\n" + "\n".join(
                f"- {error}" for error in errors
            )
            raise ValueError(error_message)

    def get_config(self) -> HelpersConfig:
        """Get the current configuration, loading if necessary."""
        if self._config is None:
            return self.load_config()
        return self._config

    def reload_config(self) -> HelpersConfig:
        """Reload configuration from sources."""
        self._config = None
        return self.load_config()

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        config = self.get_config()

        def dataclass_to_dict(obj):
            if hasattr(obj, "__dataclass_fields__"):
                return {
                    field_name: dataclass_to_dict(getattr(obj, field_name))
                    for field_name in obj.__dataclass_fields__
                }
            else:
                return obj

        return dataclass_to_dict(config)


# Global configuration manager instance
_config_manager = None


def get_config_manager(config_path: Optional[str] = None) -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager(config_path)
    return _config_manager


def get_config() -> HelpersConfig:
    """Get the current helpers configuration."""
    return get_config_manager().get_config()


def reset_config_manager() -> None:
    """Drop the global configuration manager so the next call reloads."""
    global _config_manager
    _config_manager = None
