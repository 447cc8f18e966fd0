"""
Unit Tests for Codec Metrics
============================
Tests for measurement models and Prometheus recording.
"""

import pytest


def _operations(operation, status, charset="v1_standard", strategy="core"):
    from asc100_core.metrics import CODEC_REGISTRY

    value = CODEC_REGISTRY.get_sample_value(
        "asc100_operations_total",
        {"operation": operation, "charset": charset, "strategy": strategy, "status": status},
    )
    return value or 0.0


class TestEncodingMetrics:
    """Tests for EncodingMetrics."""

    def test_summary(self):
        """Should format ratio, duration and throughput."""
        from asc100_core.metrics import EncodingMetrics

        metrics = EncodingMetrics(input_length=10, output_length=12, elapsed_ns=2_000_000)

        assert metrics.compression_ratio == pytest.approx(1.2)
        assert metrics.compression_percentage() == 120
        assert metrics.duration_ms == pytest.approx(2.0)
        assert metrics.throughput_chars_per_ms == pytest.approx(5.0)
        assert metrics.format_summary() == "120% compression, 2.00ms, 5 chars/ms"

    def test_empty_input_ratio(self):
        """Empty input should report a ratio of 1.0."""
        from asc100_core.metrics import EncodingMetrics

        metrics = EncodingMetrics(input_length=0, output_length=0, elapsed_ns=0)

        assert metrics.compression_ratio == 1.0
        assert metrics.throughput_chars_per_ms == 0.0

    def test_timer(self):
        """Timer should produce non-negative elapsed time."""
        from asc100_core.metrics import MetricsTimer

        with MetricsTimer(5) as timer:
            pass
        metrics = timer.finish(6)

        assert metrics.input_length == 5
        assert metrics.output_length == 6
        assert metrics.elapsed_ns >= 0


class TestRecording:
    """Tests for Prometheus recording."""

    def test_timed_encode_counts_success(self):
        """Successful encodes should increment the success counter."""
        from asc100_core.codec import Asc100Codec
        from asc100_core.metrics import timed_encode

        before = _operations("encode", "success")
        encoded, metrics = timed_encode(Asc100Codec(), "AB")

        assert encoded == "Qog"
        assert metrics.output_length == 3
        assert _operations("encode", "success") == before + 1

    def test_timed_decode_counts_errors(self):
        """Failures should be counted by error type and re-raised."""
        from asc100_core.codec import Asc100Codec
        from asc100_core.exceptions import StrategyMismatch
        from asc100_core.metrics import timed_decode

        before = _operations("decode", "StrategyMismatch")
        with pytest.raises(StrategyMismatch):
            timed_decode(Asc100Codec(), "yg")

        assert _operations("decode", "StrategyMismatch") == before + 1

    def test_track_codec_call(self):
        """Decorated callables should be counted without changing results."""
        from asc100_core.metrics import track_codec_call

        @track_codec_call("build_token")
        def build(value):
            return value * 2

        before = _operations("build_token", "success", charset="custom", strategy="custom")

        assert build("ab") == "abab"
        assert _operations("build_token", "success", charset="custom", strategy="custom") == before + 1

    def test_metrics_text(self):
        """Should render the registry in Prometheus text format."""
        from asc100_core.codec import Asc100Codec
        from asc100_core.metrics import get_metrics_text, timed_encode

        timed_encode(Asc100Codec(), "hello")
        text = get_metrics_text()

        assert "asc100_operations_total" in text
        assert "asc100_operation_duration_seconds" in text
