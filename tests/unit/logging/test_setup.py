"""Unit tests for localekit.logging.setup module."""

import importlib
import logging

import pytest
import structlog
from structlog.testing import capture_logs

import localekit.logging.setup as logging_setup_module
from localekit.logging.setup import (
    LIBRARY_LOGGER,
    build_processors,
    configure_logging,
    get_module_logger,
)


@pytest.mark.unit
class TestBuildProcessors:
    """Test suite for build_processors."""

    def test_console_renderer_in_development(self):
        assert isinstance(build_processors(False)[-1], structlog.dev.ConsoleRenderer)

    def test_json_renderer_in_production(self):
        processors = build_processors(True)

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert processors[0] is structlog.contextvars.merge_contextvars


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_logger(self, mock_settings):
        """configure_logging returns a logger with the standard methods."""
        result = configure_logging(settings=mock_settings)

        assert hasattr(result, "info")
        assert hasattr(result, "warning")
        assert hasattr(result, "error")

    def test_configure_logging_sets_library_level(self, mock_settings):
        configure_logging(settings=mock_settings, log_level="debug")

        assert logging.getLogger(LIBRARY_LOGGER).level == logging.DEBUG

    def test_configure_logging_production_override(self, mock_settings):
        configure_logging(settings=mock_settings, is_production=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_configure_logging_without_settings(self):
        """configure_logging falls back to the settings singleton."""
        assert configure_logging() is not None


@pytest.mark.unit
class TestImportLeavesHostConfiguration:
    """Importing the logging module must not reconfigure logging."""

    def test_reimport_keeps_host_processors(self):
        host_processors = [structlog.processors.KeyValueRenderer()]
        structlog.configure(processors=host_processors)
        root_level = logging.getLogger().level

        importlib.reload(logging_setup_module)

        assert structlog.get_config()["processors"] == host_processors
        assert logging.getLogger().level == root_level


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger function."""

    def test_get_module_logger_binds_module_context(self):
        """get_module_logger binds component and module_path."""
        logger = get_module_logger()
        context = structlog.get_context(logger)

        assert context["component"] == "test_setup"
        assert context["module_path"].endswith("test_setup")

    def test_explicit_name(self):
        context = structlog.get_context(get_module_logger("localekit.i18n.state"))

        assert context == {
            "component": "state",
            "module_path": "localekit.i18n.state",
        }

    def test_follows_configuration_applied_later(self):
        """A logger created before configuration emits through it."""
        log = get_module_logger()

        with capture_logs() as captured:
            log.info("host_event", key="value")

        assert len(captured) == 1
        assert captured[0]["event"] == "host_event"
        assert captured[0]["key"] == "value"
        assert captured[0]["component"] == "test_setup"

    def test_logging_methods_dont_raise(self, mock_settings):
        """Logging methods execute without raising exceptions."""
        configure_logging(settings=mock_settings)
        log = get_module_logger()

        log.debug("debug_event", extra="data")
        log.info("info_event", key="value")
        log.warning("warning_event")
        log.error("error_event", error_code="E001")
