"""
Metrics Recording
=================
Timed wrappers around codec calls. Measuring never changes the result:
errors are counted and re-raised untouched.
"""

import time
from functools import wraps
from typing import Callable, Optional, Tuple, TypeVar

import structlog
from prometheus_client import generate_latest

from ..codec import Asc100Codec
from .models import EncodingMetrics, MetricsTimer
from .prometheus_definitions import (
    CODEC_REGISTRY,
    CODEC_OPERATIONS_TOTAL,
    CODEC_OPERATION_DURATION,
    CODEC_SIZE_RATIO,
)

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def record_operation(
    operation: str,
    charset: str,
    strategy: str,
    status: str,
    metrics: Optional[EncodingMetrics] = None,
    duration_seconds: Optional[float] = None,
) -> None:
    """
    Record one codec operation in Prometheus.

    Args:
        operation: "encode" or "decode"
        charset: Charset version name
        strategy: Strategy value
        status: "success" or the error class name
        metrics: Size/timing measurement for successful calls
        duration_seconds: Elapsed time when no metrics object exists
    """
    CODEC_OPERATIONS_TOTAL.labels(
        operation=operation,
        charset=charset,
        strategy=strategy,
        status=status,
    ).inc()

    if metrics is not None:
        duration_seconds = metrics.duration_seconds
        CODEC_SIZE_RATIO.labels(operation=operation, charset=charset).observe(
            metrics.compression_ratio
        )

    if duration_seconds is not None:
        CODEC_OPERATION_DURATION.labels(
            operation=operation,
            charset=charset,
            strategy=strategy,
        ).observe(duration_seconds)


def _timed(codec: Asc100Codec, operation: str, payload: str) -> Tuple[str, EncodingMetrics]:
    config = codec.config
    labels = {"charset": config.charset.name, "strategy": config.strategy.value}
    timer = MetricsTimer(len(payload))
    call = codec.encode if operation == "encode" else codec.decode

    try:
        result = call(payload)
    except Exception as e:
        elapsed = timer.finish(0).duration_seconds
        record_operation(operation, status=type(e).__name__, duration_seconds=elapsed, **labels)
        raise

    metrics = timer.finish(len(result))
    record_operation(operation, status="success", metrics=metrics, **labels)
    logger.debug(f"asc100 {operation} timed", summary=metrics.format_summary(), **labels)
    return result, metrics


def timed_encode(codec: Asc100Codec, text: str) -> Tuple[str, EncodingMetrics]:
    """Encode and return ``(encoded, metrics)``."""
    return _timed(codec, "encode", text)


def timed_decode(codec: Asc100Codec, encoded: str) -> Tuple[str, EncodingMetrics]:
    """Decode and return ``(decoded, metrics)``."""
    return _timed(codec, "decode", encoded)


def track_codec_call(
    operation: str,
    charset: str = "custom",
    strategy: str = "custom",
):
    """
    Decorator recording duration and outcome of any codec-related callable.

    Example:
        @track_codec_call("encode_query")
        def build_query(params: dict) -> str:
            return "&".join(f"{k}={encode(v)}" for k, v in params.items())
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            start = time.perf_counter()
            status = "success"
            try:
                return func(*args, **kwargs)
            except Exception as e:
                status = type(e).__name__
                raise
            finally:
                record_operation(
                    operation,
                    charset=charset,
                    strategy=strategy,
                    status=status,
                    duration_seconds=time.perf_counter() - start,
                )
        return wrapper
    return decorator


def get_metrics_text() -> str:
    """Get codec metrics in Prometheus text format."""
    return generate_latest(CODEC_REGISTRY).decode("utf-8")
