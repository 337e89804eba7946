"""
DTOs Package - Application Layer

Pydantic models exchanged with the Annotation Bridge and returned to callers.
"""

from .annotation_dto import (
    AnnotationPatchDTO,
    AnnotationTarget,
    AutoscalerSnapshotDTO,
    InstanceConditionDTO,
    InstanceSnapshotDTO,
)
from .observation_dto import ObservationDTO
from .prediction_dto import PredictionResultDTO, TrendLineDTO

__all__ = [
    "AnnotationPatchDTO",
    "AnnotationTarget",
    "AutoscalerSnapshotDTO",
    "InstanceConditionDTO",
    "InstanceSnapshotDTO",
    "ObservationDTO",
    "PredictionResultDTO",
    "TrendLineDTO",
]
