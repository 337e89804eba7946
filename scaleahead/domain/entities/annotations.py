"""
Domain entities for the Annotation Bridge contract.

Snapshots are read once at the start of a tick; patches are what the core
hands back for the caller to write. Annotation values are opaque strings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

from scaleahead.domain.entities.instance import InstanceCondition


class AnnotationTarget(str, Enum):
    """Kind of object an annotation patch applies to."""

    AUTOSCALER = "autoscaler"
    INSTANCE = "instance"


def _frozen(values: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(values))


@dataclass(frozen=True, slots=True)
class AutoscalerSnapshot:
    """Annotations of one autoscaled entity."""

    name: str
    annotations: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "annotations", _frozen(self.annotations))


@dataclass(frozen=True, slots=True)
class InstanceSnapshot:
    """One workload instance with its lifecycle conditions and annotations."""

    name: str
    created_at: datetime
    conditions: Tuple[InstanceCondition, ...] = ()
    annotations: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "conditions", tuple(self.conditions))
        object.__setattr__(self, "annotations", _frozen(self.annotations))


@dataclass(frozen=True, slots=True)
class AnnotationPatch:
    """Annotation values to merge into one stored object."""

    target: AnnotationTarget
    name: str
    annotations: Mapping[str, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "annotations", _frozen(self.annotations))
