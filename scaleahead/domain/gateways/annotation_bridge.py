"""Annotation Bridge gateway interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence

from scaleahead.domain.entities.annotations import (
    AnnotationPatch,
    AutoscalerSnapshot,
    InstanceSnapshot,
)


class IAnnotationBridge(ABC):
    """
    Storage of string metadata on autoscalers and their workload instances.

    The predictive core reads snapshots through this port and hands back
    patches; it never writes to the stored objects directly.
    """

    @abstractmethod
    async def get_autoscaler(self, name: str) -> AutoscalerSnapshot:
        """Return the annotations of an autoscaled entity."""
        raise NotImplementedError

    @abstractmethod
    async def list_instances(self, autoscaler_name: str) -> List[InstanceSnapshot]:
        """Return the workload instances scaled by ``autoscaler_name``."""
        raise NotImplementedError

    @abstractmethod
    async def apply_patches(self, patches: Sequence[AnnotationPatch]) -> None:
        """Merge each patch into the annotations of its target object."""
        raise NotImplementedError
