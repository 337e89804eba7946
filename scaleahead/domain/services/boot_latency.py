"""
Domain Service - Boot-Latency Estimator

Estimates how long an instance of the scaled workload takes to become ready.
Per-instance values are cached as duration text in a write-once
``BootLatencyCache``; instances are never mutated, the measurement carries the
cache record the caller should persist.
"""

from __future__ import annotations

from typing import Iterable, List

import structlog

from scaleahead.domain.entities.errors import DurationParseError, NotReadyError
from scaleahead.domain.entities.instance import (
    BootLatencyCache,
    BootLatencyMeasurement,
    BootLatencySummary,
    WorkloadInstance,
)
from scaleahead.domain.entities.observation import ensure_utc
from scaleahead.domain.services.durations import format_duration, parse_duration

logger = structlog.get_logger(__name__)


def instance_boot_latency(instance: WorkloadInstance) -> BootLatencyMeasurement:
    """
    Boot latency of a single instance, in seconds.

    A populated cache is authoritative. Otherwise the latency is the span from
    creation to the ready transition, and the measurement carries a freshly
    populated cache with ``newly_cached`` set.

    Raises:
        NotReadyError: The instance has no ready condition.
        DurationParseError: The cached duration text is malformed or negative.
    """
    ready = instance.ready_condition()
    if ready is None:
        raise NotReadyError(instance.name)

    if instance.boot_latency_cache.populated:
        seconds = parse_duration(instance.boot_latency_cache.value)
        if seconds < 0:
            raise DurationParseError(instance.boot_latency_cache.value)
        return BootLatencyMeasurement(
            instance_name=instance.name,
            seconds=seconds,
            cache=instance.boot_latency_cache,
        )

    elapsed = (
        ensure_utc(ready.last_transition_time) - ensure_utc(instance.created_at)
    ).total_seconds()
    if elapsed < 0:
        # Ready before created: clock skew between reporters.
        logger.warning(
            "boot_latency.negative_span",
            instance=instance.name,
            elapsed_seconds=elapsed,
        )
        elapsed = 0.0

    cache = BootLatencyCache(value=format_duration(elapsed))
    # The cached text is what later ticks will read back.
    seconds = parse_duration(cache.value)
    logger.debug(
        "boot_latency.cached", instance=instance.name, boot_latency=cache.value
    )
    return BootLatencyMeasurement(
        instance_name=instance.name,
        seconds=seconds,
        cache=cache,
        newly_cached=True,
    )


def summarize_boot_latency(
    instances: Iterable[WorkloadInstance],
) -> BootLatencySummary:
    """
    Average boot latency over the instances that produced a measurement.

    Not-ready instances and instances with a corrupt cache are skipped; the
    mean divides by the number of contributors. With no contributors the
    average is ``0.0``.
    """
    measurements: List[BootLatencyMeasurement] = []
    skipped: List[str] = []

    for instance in instances:
        try:
            measurements.append(instance_boot_latency(instance))
        except NotReadyError:
            logger.debug("boot_latency.not_ready", instance=instance.name)
            skipped.append(instance.name)
        except DurationParseError as exc:
            logger.warning(
                "boot_latency.cache_unparsable",
                instance=instance.name,
                cached_value=exc.value,
            )
            skipped.append(instance.name)

    if not measurements:
        return BootLatencySummary(average_seconds=0.0, skipped=tuple(skipped))

    average = sum(m.seconds for m in measurements) / len(measurements)
    return BootLatencySummary(
        average_seconds=average,
        measurements=tuple(measurements),
        skipped=tuple(skipped),
    )


def average_boot_latency(instances: Iterable[WorkloadInstance]) -> float:
    """Mean boot latency in seconds; ``0.0`` when no instance is ready."""
    return summarize_boot_latency(instances).average_seconds
