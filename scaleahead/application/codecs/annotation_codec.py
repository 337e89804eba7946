"""
Annotation Codec - Application Layer

Translates between annotation strings stored by the Annotation Bridge and the
domain records of the predictive core:

* the observation window, persisted as a JSON array of
  ``{"timestamp": ..., "utilization": ...}`` records;
* the predictive mode flag, enabled only by the exact value ``"true"``;
* the per-instance boot latency cache, persisted as duration text.

Windows written by the legacy controller, an array of single-entry maps keyed
by a JSON-quoted timestamp, are still accepted on read.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional, Sequence

import structlog
from pydantic import ValidationError

from scaleahead.application.dtos.observation_dto import ObservationDTO
from scaleahead.domain.entities.annotations import (
    AnnotationPatch,
    AnnotationTarget,
    InstanceSnapshot,
)
from scaleahead.domain.entities.errors import InputFormatError
from scaleahead.domain.entities.instance import BootLatencyCache, WorkloadInstance
from scaleahead.domain.entities.observation import ObservationWindow, Sample
from scaleahead.shared.consts import (
    BOOT_LATENCY_ANNOTATION,
    OBSERVATIONS_ANNOTATION,
    PREDICTIVE_ANNOTATION,
)

logger = structlog.get_logger(__name__)


class AnnotationCodec:
    """Reads and writes the annotations owned by the predictive core."""

    def __init__(
        self,
        observations_key: str = OBSERVATIONS_ANNOTATION,
        predictive_key: str = PREDICTIVE_ANNOTATION,
        boot_latency_key: str = BOOT_LATENCY_ANNOTATION,
    ):
        self.observations_key = observations_key
        self.predictive_key = predictive_key
        self.boot_latency_key = boot_latency_key

    def is_predictive(self, annotations: Mapping[str, str]) -> bool:
        return annotations.get(self.predictive_key) == "true"

    # Observation window

    def decode_window(self, text: Optional[str]) -> ObservationWindow:
        """
        Parse a persisted window. A missing or blank value is an empty window.

        Raises:
            InputFormatError: The text is not a window in either format.
        """
        if text is None or not text.strip():
            return ()

        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InputFormatError(
                "Observation window is not valid JSON", details={"error": str(exc)}
            ) from exc

        if not isinstance(payload, list):
            raise InputFormatError(
                "Observation window must be a JSON array",
                details={"type": type(payload).__name__},
            )

        records: List[ObservationDTO] = []
        try:
            for item in payload:
                records.extend(self._decode_entry(item))
        except ValidationError as exc:
            raise InputFormatError(
                "Observation window holds a malformed sample",
                details={"errors": exc.errors(include_url=False)},
            ) from exc

        return tuple(
            Sample(timestamp=record.timestamp, utilization=record.utilization)
            for record in records
        )

    def _decode_entry(self, item: Any) -> List[ObservationDTO]:
        if not isinstance(item, dict):
            raise InputFormatError(
                "Observation window entries must be JSON objects",
                details={"entry": repr(item)},
            )
        if "timestamp" in item and "utilization" in item:
            return [ObservationDTO.model_validate(item)]

        # Legacy entry: {"\"2016-03-01T10:00:00.123456789Z\"": 42}
        return [
            ObservationDTO(timestamp=key, utilization=value)
            for key, value in item.items()
        ]

    def encode_window(self, window: Sequence[Sample]) -> str:
        records: List[Dict[str, Any]] = [
            ObservationDTO(
                timestamp=sample.timestamp, utilization=sample.utilization
            ).model_dump(mode="json")
            for sample in window
        ]
        return json.dumps(records, separators=(",", ":"))

    def window_patch(self, name: str, window: Sequence[Sample]) -> AnnotationPatch:
        return AnnotationPatch(
            target=AnnotationTarget.AUTOSCALER,
            name=name,
            annotations={self.observations_key: self.encode_window(window)},
        )

    # Workload instances

    def to_instance(self, snapshot: InstanceSnapshot) -> WorkloadInstance:
        return WorkloadInstance(
            name=snapshot.name,
            created_at=snapshot.created_at,
            conditions=tuple(snapshot.conditions),
            boot_latency_cache=BootLatencyCache(
                value=snapshot.annotations.get(self.boot_latency_key) or None
            ),
        )

    def boot_latency_patch(
        self, instance_name: str, cache: BootLatencyCache
    ) -> AnnotationPatch:
        if not cache.populated:
            raise ValueError("Cannot persist an empty boot latency cache")
        return AnnotationPatch(
            target=AnnotationTarget.INSTANCE,
            name=instance_name,
            annotations={self.boot_latency_key: cache.value},
        )
