"""Domain entities for workload instances and their boot latency."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple


class ConditionType(str, Enum):
    """Lifecycle condition types reported for an instance."""

    READY = "Ready"
    INITIALIZED = "Initialized"
    SCHEDULED = "PodScheduled"
    CONTAINERS_READY = "ContainersReady"


class ConditionStatus(str, Enum):
    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


@dataclass(frozen=True, slots=True)
class InstanceCondition:
    """A lifecycle signal and the time it last changed."""

    type: str
    status: str
    last_transition_time: datetime

    @property
    def is_ready(self) -> bool:
        return (
            self.type == ConditionType.READY.value
            and self.status == ConditionStatus.TRUE.value
        )


@dataclass(frozen=True, slots=True)
class BootLatencyCache:
    """
    Write-once cache of an instance's boot latency, as duration text.

    Once populated the cached text is authoritative, even if recomputing
    from the timestamps would now give a slightly different value.
    """

    value: Optional[str] = None

    @property
    def populated(self) -> bool:
        return self.value is not None


@dataclass(frozen=True, slots=True)
class WorkloadInstance:
    """One running unit of the scaled workload."""

    name: str
    created_at: datetime
    conditions: Tuple[InstanceCondition, ...] = ()
    boot_latency_cache: BootLatencyCache = field(default_factory=BootLatencyCache)

    def ready_condition(self) -> Optional[InstanceCondition]:
        for condition in self.conditions:
            if condition.is_ready:
                return condition
        return None


@dataclass(frozen=True, slots=True)
class BootLatencyMeasurement:
    """Boot latency of one instance and the cache record it should carry."""

    instance_name: str
    seconds: float
    cache: BootLatencyCache
    newly_cached: bool = False


@dataclass(frozen=True, slots=True)
class BootLatencySummary:
    """Average boot latency over the instances that produced a measurement."""

    average_seconds: float
    measurements: Tuple[BootLatencyMeasurement, ...] = ()
    skipped: Tuple[str, ...] = ()

    @property
    def contributors(self) -> int:
        return len(self.measurements)
