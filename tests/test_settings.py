"""Tests for loading renderer settings."""

import logging

import pytest
from pydantic import ValidationError

from lxcconfig.settings import configure, load_settings


class TestLoadSettings:
    """Test YAML settings loading."""

    def test_load_settings(self, tmp_path):
        """Test loading a full settings file."""
        settings_file = tmp_path / "renderer.yaml"
        settings_file.write_text("""
emit_sequences: true
mapping_order: sorted
log_level: debug
""")

        settings = load_settings(settings_file)

        assert settings.emit_sequences is True
        assert settings.mapping_order == "sorted"
        assert settings.log_level == "DEBUG"

    def test_empty_file_gives_defaults(self, tmp_path):
        """Test that an empty file yields default settings."""
        settings_file = tmp_path / "renderer.yaml"
        settings_file.write_text("")

        settings = load_settings(str(settings_file))

        assert settings.emit_sequences is False
        assert settings.mapping_order == "insertion"

    def test_extra_keys_ignored(self, tmp_path):
        """Test that unknown keys are ignored."""
        settings_file = tmp_path / "renderer.yaml"
        settings_file.write_text("unknown: 1\nemit_sequences: true\n")

        settings = load_settings(settings_file)

        assert settings.emit_sequences is True
        assert not hasattr(settings, "unknown")

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "missing.yaml")

    def test_invalid_settings(self, tmp_path):
        """Test that invalid values raise ValidationError."""
        settings_file = tmp_path / "renderer.yaml"
        settings_file.write_text("mapping_order: random\n")

        with pytest.raises(ValidationError) as exc_info:
            load_settings(settings_file)

        assert "mapping_order" in str(exc_info.value)


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigure:
    """Test applying loaded settings."""

    def test_applies_log_level(self, tmp_path, restore_root_logger):
        """Test that the configured log level reaches the root logger."""
        restore_root_logger.setLevel(logging.WARNING)
        settings_file = tmp_path / "renderer.yaml"
        settings_file.write_text("log_level: debug\n")

        settings = configure(settings_file)

        assert settings.log_level == "DEBUG"
        assert restore_root_logger.level == logging.DEBUG

    def test_default_log_level(self, tmp_path, restore_root_logger):
        """Test that an empty settings file applies INFO."""
        restore_root_logger.setLevel(logging.WARNING)
        settings_file = tmp_path / "renderer.yaml"
        settings_file.write_text("")

        configure(settings_file)

        assert restore_root_logger.level == logging.INFO

    def test_missing_file_leaves_logging_alone(self, tmp_path, restore_root_logger):
        """Test that a missing file raises before logging is touched."""
        restore_root_logger.setLevel(logging.WARNING)

        with pytest.raises(FileNotFoundError):
            configure(tmp_path / "missing.yaml")

        assert restore_root_logger.level == logging.WARNING
