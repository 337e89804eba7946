"""Domain entities for utilization observations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Tuple

from scaleahead.domain.entities.errors import InputFormatError


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC; convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True, slots=True)
class Sample:
    """One utilization reading taken at a wall-clock instant."""

    timestamp: datetime
    utilization: int

    def __post_init__(self) -> None:
        if isinstance(self.utilization, bool) or not isinstance(
            self.utilization, int
        ):
            raise InputFormatError(
                "Utilization must be an integer percentage",
                details={"utilization": self.utilization},
            )
        if self.utilization < 0:
            raise InputFormatError(
                "Utilization must be non-negative",
                details={"utilization": self.utilization},
            )
        if not isinstance(self.timestamp, datetime):
            raise InputFormatError(
                "Sample timestamp must be a datetime",
                details={"timestamp": repr(self.timestamp)},
            )
        object.__setattr__(self, "timestamp", ensure_utc(self.timestamp))

    @property
    def epoch_seconds(self) -> float:
        return self.timestamp.timestamp()

    def age_seconds(self, now: datetime) -> float:
        return (ensure_utc(now) - self.timestamp).total_seconds()


ObservationWindow = Tuple[Sample, ...]
