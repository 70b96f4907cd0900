"""Prometheus Metrics - synthesis run observability.

Exports:
- Clips synthesized
- Channels reconciled and emitted (the per-clip summary counters)
- Errors by component

Batch runs are short-lived, so the registry is dumped to a textfile for
the node-exporter textfile collector instead of being scraped.
"""

from pathlib import Path

from prometheus_client import REGISTRY, Counter, Info, write_to_textfile

# -----------------------------------------------------------------------------
# Counters
# -----------------------------------------------------------------------------

CLIPS_SYNTHESIZED = Counter(
    "animsynth_clips_synthesized_total",
    "Total clips synthesized",
)

# Every merged blendshape, zero or not
CHANNELS_RECONCILED = Counter(
    "animsynth_channels_reconciled_total",
    "Blendshape channels produced by reconciliation",
)

# Channels that survived zero suppression
CHANNELS_EMITTED = Counter(
    "animsynth_channels_emitted_total",
    "Non-zero blendshape channels written to output clips",
)

ERRORS = Counter(
    "animsynth_errors_total",
    "Total errors by component",
    ["component", "type"],  # synthesis, storage, cli
)

# -----------------------------------------------------------------------------
# Info
# -----------------------------------------------------------------------------

BUILD_INFO = Info(
    "animsynth_build",
    "Build information",
)


# -----------------------------------------------------------------------------
# Helper functions
# -----------------------------------------------------------------------------


def record_synthesis(total_channels: int, nonzero_channels: int) -> None:
    """Record one synthesized clip and its channel counts."""
    CLIPS_SYNTHESIZED.inc()
    CHANNELS_RECONCILED.inc(total_channels)
    CHANNELS_EMITTED.inc(nonzero_channels)


def record_error(component: str, error_type: str) -> None:
    """Record error by component."""
    ERRORS.labels(component=component, type=error_type).inc()


def set_build_info(version: str) -> None:
    """Set build information."""
    BUILD_INFO.info({"version": version})


def write_metrics(path: str | Path) -> None:
    """Write the default registry in text exposition format."""
    write_to_textfile(str(path), REGISTRY)
