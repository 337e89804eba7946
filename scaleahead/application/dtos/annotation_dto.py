"""
Application DTOs - Annotations

Pydantic forms of the Annotation Bridge snapshots and patches, for callers
that receive them as JSON payloads. Annotation values are opaque strings.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from scaleahead.domain.entities.annotations import (
    AnnotationPatch,
    AnnotationTarget,
    AutoscalerSnapshot,
    InstanceSnapshot,
)
from scaleahead.domain.entities.instance import ConditionStatus, InstanceCondition


class InstanceConditionDTO(BaseModel):
    """A lifecycle condition reported for an instance."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(description="Condition type, e.g. 'Ready'")
    status: str = Field(
        default=ConditionStatus.TRUE.value, description="'True', 'False' or 'Unknown'"
    )
    last_transition_time: datetime = Field(
        description="Instant the condition last changed"
    )

    def to_entity(self) -> InstanceCondition:
        return InstanceCondition(
            type=self.type,
            status=self.status,
            last_transition_time=self.last_transition_time,
        )


class AutoscalerSnapshotDTO(BaseModel):
    """Annotations of one autoscaled entity as read at the start of a tick."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Name of the autoscaled entity")
    annotations: Dict[str, str] = Field(default_factory=dict)

    def to_entity(self) -> AutoscalerSnapshot:
        return AutoscalerSnapshot(name=self.name, annotations=self.annotations)


class InstanceSnapshotDTO(BaseModel):
    """One workload instance as read at the start of a tick."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Name of the instance")
    created_at: datetime = Field(description="Creation instant of the instance")
    conditions: List[InstanceConditionDTO] = Field(default_factory=list)
    annotations: Dict[str, str] = Field(default_factory=dict)

    def to_entity(self) -> InstanceSnapshot:
        return InstanceSnapshot(
            name=self.name,
            created_at=self.created_at,
            conditions=tuple(c.to_entity() for c in self.conditions),
            annotations=self.annotations,
        )


class AnnotationPatchDTO(BaseModel):
    """Annotation values written back to one object after the tick."""

    target: AnnotationTarget = Field(description="Kind of object patched")
    name: str = Field(description="Name of the patched object")
    annotations: Dict[str, str] = Field(description="Values merged into annotations")

    @classmethod
    def from_entity(cls, patch: AnnotationPatch) -> "AnnotationPatchDTO":
        return cls(
            target=patch.target, name=patch.name, annotations=dict(patch.annotations)
        )
