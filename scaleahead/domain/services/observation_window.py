"""
Domain Service - Observation Window

Keeps the rolling, time-bounded sequence of utilization samples for one
autoscaled entity. Samples are stored by position, in insertion order, so two
samples sharing a timestamp are both kept.
"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

import structlog

from scaleahead.domain.entities.errors import InputFormatError
from scaleahead.domain.entities.observation import ObservationWindow, Sample, ensure_utc
from scaleahead.shared.consts import MAX_RETENTION_SECONDS, RETENTION_MULTIPLIER

logger = structlog.get_logger(__name__)


def retention_horizon(
    boot_latency_seconds: float,
    multiplier: float = RETENTION_MULTIPLIER,
    max_seconds: float = MAX_RETENTION_SECONDS,
) -> float:
    """Maximum sample age kept in the window, in seconds."""
    if boot_latency_seconds < 0:
        raise InputFormatError(
            "Boot latency must be non-negative",
            details={"boot_latency_seconds": boot_latency_seconds},
        )
    return min(boot_latency_seconds * multiplier, max_seconds)


def _is_chronological(samples: Sequence[Sample]) -> bool:
    return all(
        earlier.timestamp <= later.timestamp
        for earlier, later in zip(samples, samples[1:])
    )


def evict_stale(
    previous_window: Sequence[Sample], now: datetime, horizon_seconds: float
) -> ObservationWindow:
    """
    Drop the leading samples whose age is at or beyond the horizon.

    The scan stops at the first sample younger than the horizon. Windows are
    expected in chronological order; an out-of-order window is logged and
    pruned as-is, never re-sorted.
    """
    if not _is_chronological(previous_window):
        logger.warning(
            "observation_window.out_of_order",
            window_size=len(previous_window),
        )

    for index, sample in enumerate(previous_window):
        if sample.age_seconds(now) < horizon_seconds:
            return tuple(previous_window[index:])
    return ()


def advance(
    current_utilization: int,
    now: datetime,
    previous_window: Sequence[Sample],
    boot_latency_seconds: float,
    multiplier: float = RETENTION_MULTIPLIER,
    max_retention_seconds: float = MAX_RETENTION_SECONDS,
) -> ObservationWindow:
    """
    Evict stale samples and append the current reading.

    Args:
        current_utilization: Non-negative integer percentage observed now.
        now: Wall-clock instant of the reading.
        previous_window: Window persisted on the previous tick, oldest first.
        boot_latency_seconds: Current average boot latency estimate.

    Returns:
        A new window; ``previous_window`` is left untouched.

    Raises:
        InputFormatError: When the utilization or boot latency is invalid.
            Nothing is built in that case.
    """
    now = ensure_utc(now)
    new_sample = Sample(timestamp=now, utilization=current_utilization)
    horizon = retention_horizon(
        boot_latency_seconds, multiplier=multiplier, max_seconds=max_retention_seconds
    )

    survivors = evict_stale(previous_window, now, horizon)
    window = survivors + (new_sample,)

    logger.debug(
        "observation_window.advanced",
        horizon_seconds=horizon,
        evicted=len(previous_window) - len(survivors),
        window_size=len(window),
    )
    return window
