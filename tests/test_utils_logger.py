"""Tests for the centralized logging utility."""

from io import StringIO

import pytest

from ipmonitor.utils.logger import Logger, LoggerNotConfiguredError


def test_logger_unconfigured():
    """Test that using Logger before configuration raises error."""
    Logger._configured = False

    with pytest.raises(LoggerNotConfiguredError):
        Logger.get("test")


def test_logger_configuration():
    """Test logger configuration."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)

    assert Logger.is_configured()

    log = Logger.get("test_config")
    log.debug("Debug message")

    content = output.getvalue()
    assert "DEBUG" in content
    assert "[ipmonitor.test_config]" in content
    assert "Debug message" in content


def test_library_loggers_share_the_root_handler():
    """Module loggers (getLogger(__name__)) write through the configured root."""
    import logging

    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)

    logging.getLogger("ipmonitor.backends.network").debug("from the backend")

    assert "[ipmonitor.backends.network] from the backend" in output.getvalue()


def test_logger_set_level():
    """Test changing log level."""
    output = StringIO()
    Logger.configure(level="INFO", output=output, timestamps=False)

    log = Logger.get("test_level")
    log.debug("Hidden")
    assert "Hidden" not in output.getvalue()

    Logger.set_level("DEBUG")
    log.debug("Visible")
    assert "Visible" in output.getvalue()


def test_logger_invalid_level():
    with pytest.raises(ValueError):
        Logger.configure(level="LOUD", output=StringIO())
