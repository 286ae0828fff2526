"""Unit tests for structlog configuration and correlation ids."""

import logging
import os
from unittest.mock import patch

import pytest
import structlog

from src.infrastructure.observability import (
    configure_structlog,
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    resolve_log_level,
    set_correlation_id,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore structlog defaults and clear the correlation id."""
    yield
    set_correlation_id("")
    structlog.reset_defaults()


class TestResolveLogLevel:
    """Tests for resolve_log_level."""

    def test_explicit_level(self) -> None:
        """Test a named level is resolved regardless of case."""
        assert resolve_log_level("debug") == logging.DEBUG

    def test_unknown_level_falls_back(self) -> None:
        """Test an unknown name gives INFO."""
        assert resolve_log_level("chatty") == logging.INFO

    def test_reads_environment(self) -> None:
        """Test LOG_LEVEL is used when no level is passed."""
        with patch.dict(os.environ, {"LOG_LEVEL": "WARNING"}):
            assert resolve_log_level() == logging.WARNING


class TestCorrelation:
    """Tests for correlation id handling."""

    def test_generated_ids_are_unique(self) -> None:
        """Test every generated id differs."""
        assert generate_correlation_id() != generate_correlation_id()

    def test_processor_adds_id_when_set(self) -> None:
        """Test the processor copies the current id into the event."""
        set_correlation_id("abc-123")
        event = correlation_id_processor(None, "info", {"event": "x"})
        assert event["correlation_id"] == "abc-123"
        assert get_correlation_id() == "abc-123"

    def test_processor_skips_when_unset(self) -> None:
        """Test nothing is added outside a request."""
        event = correlation_id_processor(None, "info", {"event": "x"})
        assert "correlation_id" not in event


class TestConfigureStructlog:
    """Tests for configure_structlog."""

    @pytest.mark.parametrize("environment", ["production", "development"])
    def test_configures_without_error(self, environment: str) -> None:
        """Test both output modes can be configured and used."""
        configure_structlog(environment=environment, log_level="CRITICAL")
        structlog.get_logger().info("ignored_below_level")
        assert structlog.is_configured()
