"""Tests for the centralized logging utility."""

from io import StringIO

import pytest

from benchreport.utils.logger import Logger, LoggerNotConfiguredError, LogLevel


def test_logger_unconfigured():
    """Test that using Logger before configuration raises error."""
    with pytest.raises(LoggerNotConfiguredError):
        Logger.get("test")
    with pytest.raises(LoggerNotConfiguredError):
        Logger.set_level("DEBUG")


def test_logger_configuration():
    """Test logger configuration."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)

    assert Logger.is_configured()

    log = Logger.get("test_config")
    log.debug("Debug message")

    assert output.getvalue() == "DEBUG [benchreport.test_config] Debug message\n"


def test_logger_set_level():
    """Test changing log level."""
    output = StringIO()
    Logger.configure(level="INFO", output=output, timestamps=False)

    log = Logger.get("test_level")
    log.debug("Hidden")
    assert "Hidden" not in output.getvalue()

    Logger.set_level(LogLevel.DEBUG)
    log.debug("Visible")
    assert "Visible" in output.getvalue()


def test_logger_file_output(tmp_path):
    """Test logging to a file path."""
    log_file = tmp_path / "benchreport.log"
    Logger.configure(level="INFO", output=log_file, timestamps=False)

    Logger.get().info("To file")

    assert "INFO [benchreport] To file" in log_file.read_text()


def test_invalid_level():
    """Test that unknown level names are rejected."""
    with pytest.raises(ValueError):
        Logger.configure(level="LOUD", output=StringIO())


def test_log_if_configured():
    """Test that library logging is a no-op until configured."""
    Logger.log_if_configured("replay", LogLevel.ERROR, "Dropped")

    output = StringIO()
    Logger.configure(level="WARNING", output=output, timestamps=False)
    Logger.log_if_configured("replay", LogLevel.INFO, "Filtered")
    Logger.log_if_configured("replay", LogLevel.WARNING, "Kept")

    assert output.getvalue() == "WARNING [benchreport.replay] Kept\n"
