"""Tests for Structured Logging.

Tests cover:
- configure_logging with JSON and console formats
- get_logger function
- bind_clip and unbind_clip
- SynthesisLogger events
- init_logging function
"""

import structlog
from structlog.testing import capture_logs

from animsynth.observability.logging import (
    configure_logging,
    get_logger,
    bind_clip,
    unbind_clip,
    SynthesisLogger,
    init_logging,
)


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_json_format(self):
        """Configure logging with JSON format."""
        configure_logging(level="INFO", json_format=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_configure_console_format(self):
        """Configure logging with console format."""
        configure_logging(level="DEBUG", json_format=False)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_configure_lowercase_level(self):
        """Level names are case-insensitive."""
        configure_logging(level="warning")


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_with_name(self):
        logger = get_logger("test_module")
        assert hasattr(logger, "bind")

    def test_get_logger_without_name(self):
        assert get_logger() is not None


class TestBindClip:
    """Tests for bind_clip and unbind_clip."""

    def test_bind_clip(self):
        """Clip name is placed in the context."""
        bind_clip("Smile_synth")
        assert structlog.contextvars.get_contextvars()["clip"] == "Smile_synth"

    def test_unbind_clip(self):
        """Clip name is removed from the context."""
        bind_clip("Smile_synth")
        unbind_clip()
        assert "clip" not in structlog.contextvars.get_contextvars()

    def test_unbind_without_bind(self):
        """Unbinding an unbound clip does not raise."""
        unbind_clip()


class TestSynthesisLogger:
    """Tests for SynthesisLogger events."""

    def test_synthesis_started(self):
        with capture_logs() as logs:
            logger = SynthesisLogger("Smile_synth")
            logger.synthesis_started("Base", "Smile")
        assert logs == [{
            "event": "synthesis_started",
            "event_type": "synthesis.started",
            "base": "Base",
            "target": "Smile",
            "clip": "Smile_synth",
            "log_level": "info",
        }]

    def test_channels_extracted_is_debug(self):
        with capture_logs() as logs:
            logger = SynthesisLogger("Smile_synth")
            logger.channels_extracted("base", 12)
        assert logs[0]["log_level"] == "debug"
        assert logs[0]["count"] == 12

    def test_synthesis_completed(self):
        with capture_logs() as logs:
            logger = SynthesisLogger("Smile_synth")
            logger.synthesis_completed(total_channels=10, nonzero_channels=4)
        assert logs[0]["total_channels"] == 10
        assert logs[0]["nonzero_channels"] == 4

    def test_synthesis_failed(self):
        with capture_logs() as logs:
            logger = SynthesisLogger("Smile_synth")
            logger.synthesis_failed({"type": "InvalidInputError", "message": "no base"})
        assert logs[0]["log_level"] == "error"
        assert logs[0]["type"] == "InvalidInputError"

    def test_extra_targets_ignored(self):
        with capture_logs() as logs:
            logger = SynthesisLogger("Smile_synth")
            logger.extra_targets_ignored(2)
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["count"] == 2

    def test_clip_written(self):
        with capture_logs() as logs:
            logger = SynthesisLogger("Smile_synth")
            logger.clip_written("Assets/Smile_synth.anim")
        assert logs[0]["output_path"] == "Assets/Smile_synth.anim"

    def test_write_skipped(self):
        with capture_logs() as logs:
            logger = SynthesisLogger("Smile_synth")
            logger.write_skipped("Assets/Smile_synth.anim")
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["event_type"] == "clip.write_skipped"
        assert logs[0]["output_path"] == "Assets/Smile_synth.anim"

    def test_logger_without_clip(self):
        """Logger can be created without a clip binding."""
        with capture_logs() as logs:
            SynthesisLogger().clip_written("x.anim")
        assert "clip" not in logs[0]


class TestInitLogging:
    """Tests for init_logging."""

    def test_init_logging_defaults(self):
        init_logging()

    def test_init_logging_json(self):
        init_logging(json_format=True, level="DEBUG")
