"""Tests for logging configuration and CLI logging setup."""

import argparse
from unittest.mock import patch

import pytest

from apiref.api.cli.main import main, setup_logging
from apiref.api.cli.parsers import create_main_parser
from apiref.core.config.logging_config import FileLoggingConfig, LoggingConfig


class TestFileLoggingConfig:
    """Test FileLoggingConfig validation and functionality."""

    def test_file_logging_config_defaults(self):
        """Test default file logging configuration."""
        config = FileLoggingConfig()
        assert config.enabled is False
        assert config.path == "apiref.log"
        assert config.level == "INFO"
        assert config.rotation == "10 MB"
        assert config.retention == "1 week"
        assert "time" in config.format

    def test_file_logging_level_is_normalized(self):
        """Test that lowercase levels are accepted and upper-cased."""
        assert FileLoggingConfig(level="debug").level == "DEBUG"

    def test_file_logging_invalid_level(self):
        """Test that invalid log levels raise ValueError."""
        with pytest.raises(ValueError, match="Invalid log level"):
            FileLoggingConfig(level="INVALID")

    def test_file_logging_invalid_path_empty(self):
        """Test that empty paths raise ValueError."""
        with pytest.raises(ValueError, match="Log file path cannot be empty"):
            FileLoggingConfig(path="")


class TestLoggingConfig:
    """Test top-level LoggingConfig functionality."""

    def test_logging_config_defaults(self):
        config = LoggingConfig()
        assert isinstance(config.file, FileLoggingConfig)
        assert config.console_level == "WARNING"
        assert config.file.enabled is False

    def test_invalid_console_level(self):
        with pytest.raises(ValueError, match="Invalid console log level"):
            LoggingConfig(console_level="LOUD")

    def test_extract_cli_overrides_no_args(self):
        """Test CLI override extraction with no logging args."""
        assert LoggingConfig.extract_cli_overrides(argparse.Namespace()) is None

    def test_extract_cli_overrides_file_logging(self):
        """Test CLI override extraction for file logging."""
        args = argparse.Namespace(log_file="/tmp/test.log", log_level="DEBUG")
        overrides = LoggingConfig.extract_cli_overrides(args)
        assert overrides == {
            "file": {"enabled": True, "path": "/tmp/test.log", "level": "DEBUG"}
        }

    def test_extract_cli_overrides_partial_file_args(self):
        """Test CLI override extraction with only log_file (no level)."""
        overrides = LoggingConfig.extract_cli_overrides(
            argparse.Namespace(log_file="/tmp/test.log")
        )
        assert overrides is not None
        assert "level" not in overrides["file"]

    def test_from_args_builds_file_config_from_cli(self):
        args = create_main_parser().parse_args(
            ["render", "doc.json", "--log-file", "/tmp/apiref.log", "--log-level", "ERROR"]
        )

        config = LoggingConfig.from_args(args)

        assert config.file.enabled is True
        assert config.file.path == "/tmp/apiref.log"
        assert config.file.level == "ERROR"

    def test_from_args_without_logging_options(self):
        config = LoggingConfig.from_args(argparse.Namespace())
        assert config == LoggingConfig()


class TestSetupLogging:
    """Test setup_logging function behavior."""

    @patch("apiref.api.cli.main.logger")
    def test_setup_logging_no_config(self, mock_logger):
        """Test setup_logging with no config (console only)."""
        setup_logging(verbose=False, config=None)

        mock_logger.remove.assert_called_once()
        assert mock_logger.add.call_count == 1
        assert "WARNING" in str(mock_logger.add.call_args_list[0])

    @patch("apiref.api.cli.main.logger")
    def test_setup_logging_verbose(self, mock_logger):
        """Test that verbose mode logs DEBUG to the console."""
        setup_logging(verbose=True, config=LoggingConfig())

        mock_logger.remove.assert_called_once()
        assert "DEBUG" in str(mock_logger.add.call_args_list[0])

    @patch("apiref.api.cli.main.logger")
    def test_setup_logging_uses_console_level(self, mock_logger):
        setup_logging(verbose=False, config=LoggingConfig(console_level="ERROR"))

        assert mock_logger.add.call_args_list[0][1]["level"] == "ERROR"

    @patch("apiref.api.cli.main.logger")
    def test_setup_logging_file_config(self, mock_logger):
        """Test that an enabled file config adds a rotating file sink."""
        config = LoggingConfig(
            file=FileLoggingConfig(
                enabled=True,
                path="/tmp/test.log",
                level="INFO",
                rotation="10 MB",
                retention="1 week",
            )
        )

        setup_logging(verbose=False, config=config)

        assert mock_logger.add.call_count == 2
        console_call, file_call = mock_logger.add.call_args_list
        assert console_call[1]["level"] == "WARNING"
        assert file_call[0][0] == "/tmp/test.log"
        assert file_call[1]["level"] == "INFO"
        assert file_call[1]["rotation"] == "10 MB"
        assert file_call[1]["retention"] == "1 week"


@patch("apiref.api.cli.commands.render.render_command", return_value=0)
@patch("apiref.api.cli.main.setup_logging")
def test_main_configures_logging_from_cli(mock_setup, mock_render):
    """The CLI's --log-file option is the one source of logging settings."""
    with pytest.raises(SystemExit):
        main(["render", "doc.json", "--package", "p", "--log-file", "/tmp/cli.log", "-v"])

    mock_setup.assert_called_once()
    kwargs = mock_setup.call_args.kwargs
    assert kwargs["verbose"] is True
    assert kwargs["config"].file.enabled is True
    assert kwargs["config"].file.path == "/tmp/cli.log"
