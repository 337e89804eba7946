"""
Application DTOs - Prediction

Outcome of one predictive tick, including the patches to persist.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from scaleahead.application.dtos.annotation_dto import AnnotationPatchDTO


class TrendLineDTO(BaseModel):
    intercept: float
    slope: float


class PredictionResultDTO(BaseModel):
    """Result of a tick; ``predicted_utilization`` is None on fallback."""

    entity_name: str
    predictive_enabled: bool
    generated_at: datetime
    current_utilization: int = Field(ge=0)
    predicted_utilization: Optional[float] = Field(
        default=None,
        description="Unclamped projection at the moment a new instance is ready",
    )
    boot_latency_seconds: float = 0.0
    retention_horizon_seconds: float = 0.0
    window_size: int = 0
    trend: Optional[TrendLineDTO] = None
    fallback_reason: Optional[str] = None
    patches: List[AnnotationPatchDTO] = Field(default_factory=list)

    @property
    def is_fallback(self) -> bool:
        return self.predicted_utilization is None
