from __future__ import annotations

from datetime import timedelta

import pytest
from structlog.testing import capture_logs

from scaleahead.domain.entities.errors import DurationParseError, NotReadyError
from scaleahead.domain.entities.instance import (
    BootLatencyCache,
    InstanceCondition,
    WorkloadInstance,
)
from scaleahead.domain.services.boot_latency import (
    average_boot_latency,
    instance_boot_latency,
    summarize_boot_latency,
)


def test_instance_boot_latency_computes_and_caches(make_instance) -> None:
    instance = make_instance("web-1", boot_seconds=90.5)

    measurement = instance_boot_latency(instance)

    assert measurement.seconds == pytest.approx(90.5)
    assert measurement.newly_cached is True
    assert measurement.cache.value == "1m30.5s"
    # The caller's instance is left untouched.
    assert instance.boot_latency_cache.populated is False


def test_instance_boot_latency_prefers_cached_value(make_instance) -> None:
    instance = make_instance("web-1", boot_seconds=90.0, cached="2m0s")

    measurement = instance_boot_latency(instance)

    assert measurement.seconds == 120.0
    assert measurement.newly_cached is False
    assert measurement.cache == instance.boot_latency_cache


def test_instance_boot_latency_requires_ready_condition(make_instance) -> None:
    with pytest.raises(NotReadyError):
        instance_boot_latency(make_instance("web-1"))


def test_instance_boot_latency_ignores_unready_status(now) -> None:
    instance = WorkloadInstance(
        name="web-1",
        created_at=now - timedelta(minutes=2),
        conditions=(
            InstanceCondition(type="Ready", status="False", last_transition_time=now),
        ),
    )

    with pytest.raises(NotReadyError):
        instance_boot_latency(instance)


def test_instance_boot_latency_rejects_corrupt_cache(make_instance) -> None:
    instance = make_instance("web-1", boot_seconds=30.0, cached="soon")

    with pytest.raises(DurationParseError):
        instance_boot_latency(instance)


def test_instance_boot_latency_rejects_negative_cache(make_instance) -> None:
    instance = make_instance("web-1", boot_seconds=30.0, cached="-3s")

    with pytest.raises(DurationParseError) as exc_info:
        instance_boot_latency(instance)

    assert exc_info.value.value == "-3s"


def test_instance_boot_latency_clamps_clock_skew(now) -> None:
    instance = WorkloadInstance(
        name="web-1",
        created_at=now,
        conditions=(
            InstanceCondition(
                type="Ready",
                status="True",
                last_transition_time=now - timedelta(seconds=3),
            ),
        ),
    )

    measurement = instance_boot_latency(instance)

    assert measurement.seconds == 0.0
    assert measurement.cache == BootLatencyCache(value="0s")


def test_average_boot_latency_without_ready_instances_is_zero(make_instance) -> None:
    assert average_boot_latency([]) == 0.0
    assert average_boot_latency([make_instance("a"), make_instance("b")]) == 0.0


def test_average_boot_latency_is_mean_of_ready_instances(make_instance) -> None:
    instances = [
        make_instance("a", boot_seconds=60.0),
        make_instance("b", boot_seconds=120.0),
    ]

    assert average_boot_latency(instances) == 90.0


def test_average_divides_by_contributors_only(make_instance) -> None:
    instances = [
        make_instance("a", boot_seconds=60.0),
        make_instance("b"),
        make_instance("c", boot_seconds=30.0, cached="nonsense"),
        make_instance("d", cached="2m0s", boot_seconds=10.0),
    ]

    summary = summarize_boot_latency(instances)

    assert summary.average_seconds == 90.0
    assert summary.contributors == 2
    assert summary.skipped == ("b", "c")
    assert [m.newly_cached for m in summary.measurements] == [True, False]


def test_summary_skips_negative_cache(make_instance) -> None:
    instances = [
        make_instance("a", boot_seconds=60.0),
        make_instance("b", boot_seconds=30.0, cached="-3s"),
    ]

    with capture_logs() as logs:
        summary = summarize_boot_latency(instances)

    assert summary.average_seconds == 60.0
    assert summary.skipped == ("b",)
    assert any(
        entry["event"] == "boot_latency.cache_unparsable"
        and entry["cached_value"] == "-3s"
        for entry in logs
    )
