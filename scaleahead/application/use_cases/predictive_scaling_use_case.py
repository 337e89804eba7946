"""
Application Use Case - Predictive Scaling

Runs one control-loop tick for an autoscaled entity:
  * reads the persisted window and instance caches from annotation snapshots
  * estimates the average boot latency of the workload
  * evicts stale samples and records the current utilization
  * fits the utilization trend and projects it by the boot latency
  * returns the annotation patches the caller must persist

The computation itself never touches storage; ``execute`` wires it to an
``IAnnotationBridge``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional, Sequence

import structlog

from scaleahead.application.codecs.annotation_codec import AnnotationCodec
from scaleahead.application.dtos.annotation_dto import AnnotationPatchDTO
from scaleahead.application.dtos.prediction_dto import PredictionResultDTO, TrendLineDTO
from scaleahead.domain.entities.annotations import (
    AnnotationPatch,
    AutoscalerSnapshot,
    InstanceSnapshot,
)
from scaleahead.domain.entities.errors import DegenerateInputError, InputFormatError
from scaleahead.domain.entities.observation import (
    ObservationWindow,
    Sample,
    ensure_utc,
)
from scaleahead.domain.entities.trend import TrendLine
from scaleahead.domain.gateways.annotation_bridge import IAnnotationBridge
from scaleahead.domain.services.boot_latency import summarize_boot_latency
from scaleahead.domain.services.observation_window import advance, retention_horizon
from scaleahead.domain.services.predictor import predict
from scaleahead.domain.services.trend_estimator import fit
from scaleahead.shared.consts import (
    MAX_RETENTION_SECONDS,
    RETENTION_MULTIPLIER,
    SAMPLING_PERIOD_SECONDS,
)

logger = structlog.get_logger(__name__)


class PredictiveScalingError(Exception):
    """Raised when a tick cannot be run at all."""

    pass


class PredictiveScalingUseCase:
    """Produces the predicted utilization used by the scaling decision."""

    def __init__(
        self,
        codec: Optional[AnnotationCodec] = None,
        annotation_bridge: Optional[IAnnotationBridge] = None,
        retention_multiplier: float = RETENTION_MULTIPLIER,
        max_retention_seconds: float = MAX_RETENTION_SECONDS,
        sampling_period_seconds: float = SAMPLING_PERIOD_SECONDS,
    ):
        self.codec = codec or AnnotationCodec()
        self.annotation_bridge = annotation_bridge
        self.retention_multiplier = retention_multiplier
        self.max_retention_seconds = max_retention_seconds
        self.sampling_period_seconds = sampling_period_seconds

    @property
    def max_window_samples(self) -> int:
        """Largest window the retention bound allows at the expected period."""
        return int(self.max_retention_seconds // self.sampling_period_seconds)

    async def execute(
        self,
        entity_name: str,
        current_utilization: int,
        now: Optional[datetime] = None,
    ) -> PredictionResultDTO:
        """Read snapshots through the bridge, compute, and write the patches."""

        if self.annotation_bridge is None:
            raise PredictiveScalingError("No annotation bridge configured")

        autoscaler = await self.annotation_bridge.get_autoscaler(entity_name)
        instances = await self.annotation_bridge.list_instances(entity_name)

        result, patches = self._run(
            autoscaler,
            instances,
            current_utilization,
            now or datetime.now(timezone.utc),
        )
        if patches:
            await self.annotation_bridge.apply_patches(patches)
        return result

    def compute(
        self,
        autoscaler: AutoscalerSnapshot,
        instances: Sequence[InstanceSnapshot],
        current_utilization: int,
        now: datetime,
    ) -> PredictionResultDTO:
        """Run one tick over snapshots; nothing is written."""
        result, _ = self._run(autoscaler, instances, current_utilization, now)
        return result

    def _run(
        self,
        autoscaler: AutoscalerSnapshot,
        instances: Sequence[InstanceSnapshot],
        current_utilization: int,
        now: datetime,
    ) -> tuple[PredictionResultDTO, List[AnnotationPatch]]:
        now = ensure_utc(now)
        log = logger.bind(entity=autoscaler.name)
        # Rejects a bad reading before anything is decoded.
        Sample(timestamp=now, utilization=current_utilization)

        if not self.codec.is_predictive(autoscaler.annotations):
            log.debug("prediction.disabled")
            return (
                PredictionResultDTO(
                    entity_name=autoscaler.name,
                    predictive_enabled=False,
                    generated_at=now,
                    current_utilization=current_utilization,
                    fallback_reason="predictive mode disabled",
                ),
                [],
            )

        patches: List[AnnotationPatch] = []
        fallback_reason: Optional[str] = None

        summary = summarize_boot_latency(
            self.codec.to_instance(instance) for instance in instances
        )
        for measurement in summary.measurements:
            if measurement.newly_cached:
                patches.append(
                    self.codec.boot_latency_patch(
                        measurement.instance_name, measurement.cache
                    )
                )
        boot_latency = summary.average_seconds

        try:
            previous_window = self.codec.decode_window(
                autoscaler.annotations.get(self.codec.observations_key)
            )
        except InputFormatError as exc:
            log.warning("prediction.window_unreadable", error=exc.message)
            previous_window = ()
            fallback_reason = "stored observation window is malformed"

        window: ObservationWindow = advance(
            current_utilization,
            now,
            previous_window,
            boot_latency,
            multiplier=self.retention_multiplier,
            max_retention_seconds=self.max_retention_seconds,
        )

        if len(window) > self.max_window_samples:
            # Ticks arrive faster than the configured period.
            log.warning(
                "prediction.window_oversized",
                window_size=len(window),
                max_window_samples=self.max_window_samples,
            )
        patches.append(self.codec.window_patch(autoscaler.name, window))

        trend: Optional[TrendLine] = None
        predicted: Optional[float] = None
        if fallback_reason is None:
            try:
                trend = fit(window)
            except DegenerateInputError as exc:
                log.info("prediction.trend_unavailable", reason=exc.message)
                fallback_reason = "not enough distinct observations"
            else:
                predicted = predict(
                    boot_latency, now.timestamp(), trend.intercept, trend.slope
                )

        log.info(
            "prediction.completed",
            boot_latency_seconds=boot_latency,
            window_size=len(window),
            predicted_utilization=predicted,
            fallback_reason=fallback_reason,
        )

        result = PredictionResultDTO(
            entity_name=autoscaler.name,
            predictive_enabled=True,
            generated_at=now,
            current_utilization=current_utilization,
            predicted_utilization=predicted,
            boot_latency_seconds=boot_latency,
            retention_horizon_seconds=retention_horizon(
                boot_latency,
                multiplier=self.retention_multiplier,
                max_seconds=self.max_retention_seconds,
            ),
            window_size=len(window),
            trend=(
                TrendLineDTO(intercept=trend.intercept, slope=trend.slope)
                if trend is not None
                else None
            ),
            fallback_reason=fallback_reason,
            patches=[AnnotationPatchDTO.from_entity(patch) for patch in patches],
        )
        return result, patches
