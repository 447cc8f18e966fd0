"""
Prometheus Metrics Definitions
==============================
Prometheus series for codec operations, kept in a private registry so an
embedding service decides where to expose them.
"""

from prometheus_client import CollectorRegistry, Counter, Histogram

from .models import MetricNames

CODEC_REGISTRY = CollectorRegistry()

CODEC_OPERATIONS_TOTAL = Counter(
    name=MetricNames.OPERATIONS_TOTAL,
    documentation="Total ASC100 encode/decode operations",
    labelnames=["operation", "charset", "strategy", "status"],
    registry=CODEC_REGISTRY,
)

CODEC_OPERATION_DURATION = Histogram(
    name=MetricNames.OPERATION_DURATION,
    documentation="Time spent in ASC100 encode/decode operations",
    labelnames=["operation", "charset", "strategy"],
    buckets=[
        0.00001, 0.00005, 0.0001, 0.0005, 0.001,
        0.005, 0.01, 0.05, 0.1, 0.5, 1.0,
    ],
    registry=CODEC_REGISTRY,
)

CODEC_SIZE_RATIO = Histogram(
    name=MetricNames.SIZE_RATIO,
    documentation="Output length divided by input length",
    labelnames=["operation", "charset"],
    buckets=[0.5, 0.75, 0.875, 1.0, 1.17, 1.25, 1.5, 2.0, 5.0],
    registry=CODEC_REGISTRY,
)
