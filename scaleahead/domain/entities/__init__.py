"""
Domain Entities Package

Immutable records shared by the predictive services.
"""

from .annotations import (
    AnnotationPatch,
    AnnotationTarget,
    AutoscalerSnapshot,
    InstanceSnapshot,
)
from .errors import (
    DegenerateInputError,
    DomainError,
    DurationParseError,
    InputFormatError,
    NotReadyError,
)
from .instance import (
    BootLatencyCache,
    BootLatencyMeasurement,
    BootLatencySummary,
    ConditionStatus,
    ConditionType,
    InstanceCondition,
    WorkloadInstance,
)
from .observation import ObservationWindow, Sample, ensure_utc
from .trend import TrendLine

__all__ = [
    "AnnotationPatch",
    "AnnotationTarget",
    "AutoscalerSnapshot",
    "InstanceSnapshot",
    "Sample",
    "ObservationWindow",
    "ensure_utc",
    "TrendLine",
    "BootLatencyCache",
    "BootLatencyMeasurement",
    "BootLatencySummary",
    "ConditionStatus",
    "ConditionType",
    "InstanceCondition",
    "WorkloadInstance",
    "DomainError",
    "InputFormatError",
    "DurationParseError",
    "NotReadyError",
    "DegenerateInputError",
]
