"""Structured Logging - JSON or console logs with clip correlation.

Provides structured logging for:
- Synthesis runs (start, summary counters, failure)
- Channel extraction per source
- Clip persistence

Logs emitted while a clip is being synthesized carry its name via
``bind_clip``.
"""

import logging
import sys
from typing import Any

import structlog


def configure_logging(
    level: str = "INFO",
    json_format: bool = True,
) -> None:
    """Configure structured logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: If True, output JSON; else human-readable
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper()),
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structured logger.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Bound structlog logger
    """
    return structlog.get_logger(name)


def bind_clip(clip_name: str) -> None:
    """Bind clip name to all logs in current context."""
    structlog.contextvars.bind_contextvars(clip=clip_name)


def unbind_clip() -> None:
    """Remove clip name from log context."""
    structlog.contextvars.unbind_contextvars("clip")


# -----------------------------------------------------------------------------
# Event-specific logging
# -----------------------------------------------------------------------------


class SynthesisLogger:
    """Logger for clip synthesis events."""

    def __init__(self, clip_name: str | None = None) -> None:
        self._log = get_logger("synthesis")
        if clip_name:
            self._log = self._log.bind(clip=clip_name)

    def synthesis_started(self, base_name: str, target_name: str) -> None:
        """Log start of a base/target merge."""
        self._log.info(
            "synthesis_started",
            event_type="synthesis.started",
            base=base_name,
            target=target_name,
        )

    def channels_extracted(self, source: str, count: int) -> None:
        """Log number of blendshape channels read from one source."""
        self._log.debug(
            "channels_extracted",
            event_type="synthesis.extracted",
            source=source,
            count=count,
        )

    def synthesis_completed(
        self,
        total_channels: int,
        nonzero_channels: int,
    ) -> None:
        """Log synthesis summary counters."""
        self._log.info(
            "synthesis_completed",
            event_type="synthesis.completed",
            total_channels=total_channels,
            nonzero_channels=nonzero_channels,
        )

    def synthesis_failed(self, error: dict[str, Any]) -> None:
        """Log a rejected or aborted synthesis."""
        self._log.error(
            "synthesis_failed",
            event_type="synthesis.failed",
            **error,
        )

    def extra_targets_ignored(self, count: int) -> None:
        """Log targets beyond the first that a single merge does not combine."""
        self._log.warning(
            "extra_targets_ignored",
            event_type="synthesis.extra_targets_ignored",
            count=count,
        )

    def clip_written(self, output_path: str) -> None:
        """Log a persisted output clip."""
        self._log.info(
            "clip_written",
            event_type="clip.written",
            output_path=output_path,
        )

    def write_skipped(self, output_path: str) -> None:
        """Log an output path that was given without a writer to persist it."""
        self._log.warning(
            "write_skipped",
            event_type="clip.write_skipped",
            output_path=output_path,
            reason="no writer",
        )


def init_logging(json_format: bool = False, level: str = "INFO") -> None:
    """Initialize logging with defaults.

    Call this once at application startup.
    """
    configure_logging(level=level, json_format=json_format)
