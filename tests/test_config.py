"""Tests for lending library configuration.

These tests cover:
1. Default values
2. Environment variable loading
3. Validation rules
4. Logging setup
"""

import logging
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from lending_library.config import LibraryConfig, configure_logging, get_config, reset_config


class TestLibraryConfig:
    """Test library configuration behavior."""

    def test_default_configuration(self):
        config = LibraryConfig(_env_file=None)

        assert config.library_name == "lending-library"
        assert config.version == "0.1.0"
        assert config.debug is False
        assert config.log_level == "INFO"
        assert config.tracing_enabled is True
        assert config.is_development is False

    def test_environment_variable_loading(self):
        env_vars = {
            "LENDING_LIBRARY_LIBRARY_NAME": "branch-library",
            "LENDING_LIBRARY_DEBUG": "true",
            "LENDING_LIBRARY_LOG_LEVEL": "warning",
            "LENDING_LIBRARY_TRACING_ENABLED": "false",
        }

        with patch.dict(os.environ, env_vars):
            config = LibraryConfig(_env_file=None)

        assert config.library_name == "branch-library"
        assert config.debug is True
        assert config.log_level == "WARNING"
        assert config.tracing_enabled is False
        assert config.is_development is True

    def test_library_name_validation(self):
        for name in ["main-branch", "lib", "east-42"]:
            assert LibraryConfig(_env_file=None, library_name=name).library_name == name

        for name in ["Main_Branch", "my library", "ab", "x" * 51]:
            with pytest.raises(ValidationError):
                LibraryConfig(_env_file=None, library_name=name)

    def test_log_level_validation(self):
        with pytest.raises(ValidationError):
            LibraryConfig(_env_file=None, log_level="TRACE")

    def test_effective_log_level(self):
        assert LibraryConfig(_env_file=None, log_level="ERROR").effective_log_level == logging.ERROR
        assert LibraryConfig(_env_file=None, debug=True).effective_log_level == logging.DEBUG


class TestConfigSingleton:
    """Test the global configuration instance."""

    def test_get_config_returns_same_instance(self):
        assert get_config() is get_config()

    def test_reset_config(self):
        first = get_config()
        reset_config()

        assert get_config() is not first


class TestConfigureLogging:
    """Test logging setup for hosting applications."""

    def test_configure_logging_uses_config_level(self):
        config = LibraryConfig(_env_file=None, log_level="WARNING")

        with patch("lending_library.config.logging.basicConfig") as basic_config:
            configure_logging(config)

        kwargs = basic_config.call_args.kwargs
        assert kwargs["level"] == logging.WARNING
        assert kwargs["format"] == "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        assert kwargs["force"] is True
