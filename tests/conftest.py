from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, List

import pytest

from scaleahead.domain.entities.annotations import InstanceSnapshot
from scaleahead.domain.entities.instance import (
    BootLatencyCache,
    InstanceCondition,
    WorkloadInstance,
)
from scaleahead.domain.entities.observation import Sample


@pytest.fixture()
def now() -> datetime:
    return datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def _ready(at: datetime) -> InstanceCondition:
    return InstanceCondition(type="Ready", status="True", last_transition_time=at)


@pytest.fixture()
def make_instance(now: datetime) -> Callable[..., WorkloadInstance]:
    def _make(
        name: str,
        boot_seconds: float | None = None,
        cached: str | None = None,
        created_at: datetime | None = None,
    ) -> WorkloadInstance:
        created = created_at or now - timedelta(minutes=5)
        conditions = ()
        if boot_seconds is not None:
            conditions = (_ready(created + timedelta(seconds=boot_seconds)),)
        return WorkloadInstance(
            name=name,
            created_at=created,
            conditions=conditions,
            boot_latency_cache=BootLatencyCache(value=cached),
        )

    return _make


@pytest.fixture()
def make_instance_snapshot(now: datetime) -> Callable[..., InstanceSnapshot]:
    def _make(
        name: str,
        boot_seconds: float | None = None,
        annotations: dict | None = None,
    ) -> InstanceSnapshot:
        created = now - timedelta(minutes=5)
        conditions = []
        if boot_seconds is not None:
            conditions.append(_ready(created + timedelta(seconds=boot_seconds)))
        return InstanceSnapshot(
            name=name,
            created_at=created,
            conditions=conditions,
            annotations=annotations or {},
        )

    return _make


@pytest.fixture()
def make_window(now: datetime) -> Callable[..., List[Sample]]:
    """Build a window from (seconds ago, utilization) pairs, oldest first."""

    def _make(*points: tuple[float, int]) -> List[Sample]:
        return [
            Sample(timestamp=now - timedelta(seconds=ago), utilization=value)
            for ago, value in points
        ]

    return _make
