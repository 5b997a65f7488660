"""
Unit Tests for Configuration

Tests ConfigManager including:
- Defaults
- YAML file and environment overrides
- Validation errors
"""

import pytest

from ash_helpers.config import ConfigManager, HelpersConfig, get_config, get_config_manager


class TestConfigManager:
    """Test cases for ConfigManager."""

    def test_defaults(self):
        """Test default configuration values."""
        config = ConfigManager().load_config()

        assert isinstance(config, HelpersConfig)
        assert config.environment == "development"
        assert config.timezone == "UTC"
        assert config.logging.level == "INFO"
        assert config.logging.format_type == "simple"
        assert config.logging.log_file is None

    def test_environment_overrides(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("APP_TIMEZONE", "Europe/Berlin")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_FILE", "/tmp/helpers.log")

        config = ConfigManager().load_config()

        assert config.environment == "production"
        assert config.timezone == "Europe/Berlin"
        assert config.logging.level == "DEBUG"
        assert config.logging.log_file == "/tmp/helpers.log"

    def test_yaml_file(self, tmp_path):
        """Test loading values from a YAML file."""
        config_file = tmp_path / "helpers.yml"
        config_file.write_text(
            "timezone: Asia/Tokyo\nlogging:\n  level: WARNING\n  format_type: json\n",
            encoding="utf-8",
        )

        config = ConfigManager(str(config_file)).load_config()

        assert config.timezone == "Asia/Tokyo"
        assert config.logging.level == "WARNING"
        assert config.logging.format_type == "json"

    def test_environment_beats_file(self, tmp_path, monkeypatch):
        """Test that environment variables win over the file."""
        config_file = tmp_path / "helpers.yml"
        config_file.write_text("timezone: Asia/Tokyo\n", encoding="utf-8")
        monkeypatch.setenv("APP_TIMEZONE", "Europe/Paris")

        assert ConfigManager(str(config_file)).load_config().timezone == "Europe/Paris"

    def test_missing_file_ignored(self, tmp_path):
        """Test that a missing file leaves the defaults."""
        config = ConfigManager(str(tmp_path / "absent.yml")).load_config()
        assert config.timezone == "UTC"

    def test_invalid_values(self, monkeypatch):
        """Test that every invalid value is reported."""
        monkeypatch.setenv("APP_TIMEZONE", "Mars/Olympus_Mons")
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ValueError) as exc_info:
            ConfigManager().load_config()

        message = str(exc_info.value)
        assert "Unknown timezone: Mars/Olympus_Mons" in message
        assert "Log level must be one of" in message

    def test_non_mapping_file(self, tmp_path):
        """Test that a YAML file without a mapping is rejected."""
        config_file = tmp_path / "helpers.yml"
        config_file.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(ValueError, match="must contain a mapping"):
            ConfigManager(str(config_file)).load_config()

    @pytest.mark.parametrize("section", ["logging: verbose\n", "logging:\n  - DEBUG\n"])
    def test_scalar_section_rejected(self, tmp_path, section):
        """Test that a section backed by a dataclass must be a mapping."""
        config_file = tmp_path / "helpers.yml"
        config_file.write_text(section, encoding="utf-8")

        with pytest.raises(ValueError, match="section 'logging' must be a mapping"):
            ConfigManager(str(config_file)).load_config()

    def test_non_string_timezone_reported(self, tmp_path):
        """Test that a numeric timezone is a validation error."""
        config_file = tmp_path / "helpers.yml"
        config_file.write_text("timezone: 5\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Unknown timezone: 5"):
            ConfigManager(str(config_file)).load_config()

    def test_cached_and_reloaded(self, monkeypatch):
        """Test caching and reload."""
        manager = ConfigManager()
        first = manager.get_config()
        assert manager.get_config() is first

        monkeypatch.setenv("APP_TIMEZONE", "Europe/Rome")
        assert manager.get_config().timezone == "UTC"
        assert manager.reload_config().timezone == "Europe/Rome"

    def test_to_dict(self):
        """Test conversion to a plain dictionary."""
        data = ConfigManager().to_dict()
        assert data == {
            "environment": "development",
            "timezone": "UTC",
            "logging": {"level": "INFO", "format_type": "simple", "log_file": None},
        }

    def test_global_manager(self):
        """Test the module-level accessors."""
        assert get_config_manager() is get_config_manager()
        assert get_config() is get_config_manager().get_config()
