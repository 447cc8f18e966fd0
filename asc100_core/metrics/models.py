"""
Metrics Models
==============
Per-call measurements for encode/decode operations.
"""

import time
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class EncodingMetrics:
    """Size and timing of one encode or decode call."""
    input_length: int
    output_length: int
    elapsed_ns: int

    @property
    def compression_ratio(self) -> float:
        """Output length over input length (1.0 for empty input)."""
        if self.input_length == 0:
            return 1.0
        return self.output_length / self.input_length

    @property
    def duration_ms(self) -> float:
        return self.elapsed_ns / 1_000_000

    @property
    def duration_seconds(self) -> float:
        return self.elapsed_ns / 1_000_000_000

    @property
    def throughput_chars_per_ms(self) -> float:
        if self.elapsed_ns == 0:
            return 0.0
        return self.input_length * 1_000_000 / self.elapsed_ns

    def compression_percentage(self) -> int:
        return round(self.compression_ratio * 100)

    def format_summary(self) -> str:
        return (
            f"{self.compression_percentage()}% compression, "
            f"{self.duration_ms:.2f}ms, "
            f"{self.throughput_chars_per_ms:.0f} chars/ms"
        )


@dataclass
class MetricsTimer:
    """
    Context manager timing one operation.

    Usage:
        with MetricsTimer(len(text)) as timer:
            encoded = codec.encode(text)
        metrics = timer.finish(len(encoded))
    """
    input_length: int
    _start: Optional[int] = field(default=None, repr=False)
    _end: Optional[int] = field(default=None, repr=False)

    def __post_init__(self):
        self._start = time.perf_counter_ns()

    def __enter__(self):
        self._start = time.perf_counter_ns()
        return self

    def __exit__(self, *args):
        self._end = time.perf_counter_ns()

    def finish(self, output_length: int) -> EncodingMetrics:
        end = self._end if self._end is not None else time.perf_counter_ns()
        return EncodingMetrics(
            input_length=self.input_length,
            output_length=output_length,
            elapsed_ns=end - self._start,
        )


class MetricNames:
    OPERATIONS_TOTAL = "asc100_operations"
    OPERATION_DURATION = "asc100_operation_duration_seconds"
    SIZE_RATIO = "asc100_size_ratio"
