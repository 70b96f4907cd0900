"""Tests for Prometheus Metrics.

Tests cover:
- Synthesis counters
- Error counter labels
- Build info and textfile export
"""

from prometheus_client import REGISTRY

from animsynth.observability.metrics import (
    record_synthesis,
    record_error,
    set_build_info,
    write_metrics,
)


def _value(name, labels=None):
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestRecordSynthesis:
    """Tests for record_synthesis."""

    def test_counts_clip_and_channels(self):
        clips = _value("animsynth_clips_synthesized_total")
        reconciled = _value("animsynth_channels_reconciled_total")
        emitted = _value("animsynth_channels_emitted_total")

        record_synthesis(total_channels=12, nonzero_channels=5)

        assert _value("animsynth_clips_synthesized_total") == clips + 1
        assert _value("animsynth_channels_reconciled_total") == reconciled + 12
        assert _value("animsynth_channels_emitted_total") == emitted + 5

    def test_empty_clip_still_counted(self):
        clips = _value("animsynth_clips_synthesized_total")
        record_synthesis(0, 0)
        assert _value("animsynth_clips_synthesized_total") == clips + 1


class TestRecordError:
    """Tests for record_error."""

    def test_labels(self):
        labels = {"component": "storage", "type": "write"}
        before = _value("animsynth_errors_total", labels)
        record_error("storage", "write")
        assert _value("animsynth_errors_total", labels) == before + 1


class TestExport:
    """Tests for build info and textfile export."""

    def test_build_info(self):
        set_build_info("1.2.3")
        assert _value("animsynth_build_info", {"version": "1.2.3"}) == 1.0

    def test_write_metrics(self, tmp_path):
        record_synthesis(3, 2)
        path = tmp_path / "animsynth.prom"
        write_metrics(path)
        text = path.read_text(encoding="utf-8")
        assert "animsynth_channels_emitted_total" in text
