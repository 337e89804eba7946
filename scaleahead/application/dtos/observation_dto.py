"""
Application DTOs - Observations

Wire shape of one sample in the persisted observation window.
"""

import re
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Legacy writers emit up to nine fractional digits; datetime keeps six.
_EXCESS_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


class ObservationDTO(BaseModel):
    """A persisted utilization sample."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(description="Instant the sample was taken")
    utilization: int = Field(ge=0, description="CPU utilization percentage")

    @field_validator("timestamp", mode="before")
    @classmethod
    def _normalize_timestamp_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            text = value.strip().strip('"')
            return _EXCESS_FRACTION_RE.sub(r"\1", text)
        return value

    @field_validator("timestamp")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
