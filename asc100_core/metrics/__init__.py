"""
ASC100 Core - Codec Metrics
===========================
Optional timing and size instrumentation for encode/decode calls.

Usage:
    from asc100_core.codec import Asc100Codec
    from asc100_core.metrics import timed_encode, get_metrics_text

    encoded, metrics = timed_encode(Asc100Codec(), "Hello, World!")
    print(metrics.format_summary())   # "123% compression, 0.01ms, ..."

    # Expose from a service
    body = get_metrics_text()
"""

# Re-export all public APIs
from .models import EncodingMetrics, MetricsTimer, MetricNames

from .prometheus_definitions import (
    CODEC_REGISTRY,
    CODEC_OPERATIONS_TOTAL,
    CODEC_OPERATION_DURATION,
    CODEC_SIZE_RATIO,
)

from .recording import (
    record_operation,
    timed_encode,
    timed_decode,
    track_codec_call,
    get_metrics_text,
)

__all__ = [
    # Models
    "EncodingMetrics",
    "MetricsTimer",
    "MetricNames",
    # Prometheus
    "CODEC_REGISTRY",
    "CODEC_OPERATIONS_TOTAL",
    "CODEC_OPERATION_DURATION",
    "CODEC_SIZE_RATIO",
    # Recording
    "record_operation",
    "timed_encode",
    "timed_decode",
    "track_codec_call",
    "get_metrics_text",
]
