"""
Infrastructure Gateway - In-Memory Annotation Bridge

Process-local store of autoscaler and instance annotations. Useful as the
reference adapter for embedding the predictive core and as a test double.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, List, Optional, Sequence

import structlog

from scaleahead.domain.entities.annotations import (
    AnnotationPatch,
    AnnotationTarget,
    AutoscalerSnapshot,
    InstanceSnapshot,
)
from scaleahead.domain.entities.errors import DomainError
from scaleahead.domain.gateways.annotation_bridge import IAnnotationBridge

logger = structlog.get_logger(__name__)


class AnnotationBridgeError(DomainError):
    """Raised when a stored object cannot be found."""

    pass


class InMemoryAnnotationBridge(IAnnotationBridge):
    """Keeps snapshots in dictionaries keyed by object name."""

    def __init__(self) -> None:
        self._autoscalers: Dict[str, AutoscalerSnapshot] = {}
        self._instances: Dict[str, InstanceSnapshot] = {}
        self._owners: Dict[str, str] = {}

    def register_autoscaler(
        self, name: str, annotations: Optional[Dict[str, str]] = None
    ) -> AutoscalerSnapshot:
        snapshot = AutoscalerSnapshot(name=name, annotations=annotations or {})
        self._autoscalers[name] = snapshot
        return snapshot

    def register_instance(
        self, autoscaler_name: str, instance: InstanceSnapshot
    ) -> None:
        if autoscaler_name not in self._autoscalers:
            raise AnnotationBridgeError(f"Autoscaler {autoscaler_name} not found")
        self._instances[instance.name] = instance
        self._owners[instance.name] = autoscaler_name

    async def get_autoscaler(self, name: str) -> AutoscalerSnapshot:
        snapshot = self._autoscalers.get(name)
        if snapshot is None:
            raise AnnotationBridgeError(f"Autoscaler {name} not found")
        return snapshot

    async def list_instances(self, autoscaler_name: str) -> List[InstanceSnapshot]:
        if autoscaler_name not in self._autoscalers:
            raise AnnotationBridgeError(f"Autoscaler {autoscaler_name} not found")
        return [
            instance
            for name, instance in self._instances.items()
            if self._owners.get(name) == autoscaler_name
        ]

    async def apply_patches(self, patches: Sequence[AnnotationPatch]) -> None:
        # Validate every target first so a bad patch leaves the store unchanged.
        for patch in patches:
            store = self._store_for(patch.target)
            if patch.name not in store:
                raise AnnotationBridgeError(
                    f"{patch.target.value.capitalize()} {patch.name} not found",
                    details={"target": patch.target.value},
                )

        for patch in patches:
            store = self._store_for(patch.target)
            current = store[patch.name]
            merged = {**current.annotations, **patch.annotations}
            store[patch.name] = replace(current, annotations=merged)
            logger.debug(
                "annotations.patched",
                target=patch.target.value,
                name=patch.name,
                keys=sorted(patch.annotations),
            )

    def _store_for(self, target: AnnotationTarget) -> Dict:
        if target == AnnotationTarget.AUTOSCALER:
            return self._autoscalers
        return self._instances
