"""
Domain Services Package

Pure, synchronous computations over caller-supplied snapshots.
"""

from .boot_latency import (
    average_boot_latency,
    instance_boot_latency,
    summarize_boot_latency,
)
from .durations import format_duration, parse_duration
from .observation_window import advance, evict_stale, retention_horizon
from .predictor import predict
from .trend_estimator import fit, fit_line, split_window

__all__ = [
    "advance",
    "evict_stale",
    "retention_horizon",
    "average_boot_latency",
    "instance_boot_latency",
    "summarize_boot_latency",
    "format_duration",
    "parse_duration",
    "fit",
    "fit_line",
    "split_window",
    "predict",
]
