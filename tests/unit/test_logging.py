"""Unit tests for logging configuration and step logging."""

import structlog
from structlog.testing import capture_logs

from quantlab.logging.config import (
    configure_logging,
    get_analysis_logger,
    get_logger,
    log_analysis_step,
)


class TestConfigureLogging:
    """Test structlog configuration."""

    def teardown_method(self):
        structlog.reset_defaults()

    def test_configures_structlog(self) -> None:
        """Test configuration is applied."""
        configure_logging(level="DEBUG", format_json=True)
        assert structlog.is_configured()

    def test_console_renderer_by_default(self) -> None:
        """Test human-readable output is the default renderer."""
        configure_logging(level="INFO")
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


class TestLogAnalysisStep:
    """Test standardized analysis step logging."""

    def test_completed_step(self) -> None:
        """Test completed steps log at info level."""
        with capture_logs() as logs:
            log_analysis_step(get_logger("test"), "volatility", completed=True)

        assert logs[0]["event"] == "Analysis step completed"
        assert logs[0]["log_level"] == "info"
        assert logs[0]["step_result"] == "COMPLETED"

    def test_skipped_step(self) -> None:
        """Test skipped steps log a warning with reason and context."""
        with capture_logs() as logs:
            log_analysis_step(
                get_analysis_logger("test"), "pairs", completed=False,
                reason="Price history mismatch", context={"tickers": ["A", "B"]}
            )

        entry = logs[0]
        assert entry["log_level"] == "warning"
        assert entry["step"] == "pairs"
        assert entry["step_result"] == "SKIPPED"
        assert entry["reason"] == "Price history mismatch"
        assert entry["context"] == {"tickers": ["A", "B"]}
        assert entry["subsystem"] == "analysis"
