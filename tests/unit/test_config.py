"""
Unit tests for settings and logging setup.
"""
from pathlib import Path

import pytest
import structlog
from structlog.testing import capture_logs

from firereport.config import Settings, get_settings
from firereport.logging_config import configure_logging, log_performance


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        """Test defaults when nothing is configured."""
        monkeypatch.delenv("REPORT_LANGUAGE", raising=False)
        monkeypatch.delenv("REPORT_OUTPUT_DIR", raising=False)

        settings = Settings()

        assert settings.report_language == "es"
        assert settings.report_output_dir == Path("./reports")
        assert settings.log_level == "INFO"

    def test_environment_override(self, monkeypatch):
        """Test values are read from the environment."""
        monkeypatch.setenv("REPORT_LANGUAGE", "en")
        monkeypatch.setenv("LOG_JSON", "false")

        settings = get_settings()

        assert settings.report_language == "en"
        assert settings.log_json is False

    def test_settings_cached(self):
        """Test get_settings returns one cached instance."""
        assert get_settings() is get_settings()


class TestLogging:
    """Tests for structlog setup."""

    @pytest.fixture(autouse=True)
    def reset_structlog(self):
        yield
        structlog.reset_defaults()

    def test_configure_logging(self):
        """Test structlog is configured with the stdlib logger factory."""
        configure_logging(level="debug", json_logs=False)

        config = structlog.get_config()
        assert structlog.is_configured()
        assert config["wrapper_class"] is structlog.stdlib.BoundLogger
        assert isinstance(config["processors"][-1], structlog.dev.ConsoleRenderer)

    def test_log_performance_success(self):
        """Test the decorator returns the result and logs completion."""
        @log_performance("unit_operation")
        def double(value):
            return value * 2

        with capture_logs() as logs:
            assert double(4) == 8

        completed = [entry for entry in logs if entry["event"] == "operation_completed"]
        assert completed[0]["operation"] == "unit_operation"
        assert "duration_ms" in completed[0]

    def test_log_performance_failure(self):
        """Test failures are logged and re-raised."""
        @log_performance("unit_operation")
        def explode():
            raise ValueError("boom")

        with capture_logs() as logs:
            with pytest.raises(ValueError):
                explode()

        failed = [entry for entry in logs if entry["event"] == "operation_failed"]
        assert failed[0]["error_type"] == "ValueError"
