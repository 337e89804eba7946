"""
Dependency container injection module - Main Layer

Composition root wiring settings, the annotation bridge and the use case.
"""

from dependency_injector import containers, providers

from scaleahead.application.codecs.annotation_codec import AnnotationCodec
from scaleahead.application.use_cases.predictive_scaling_use_case import (
    PredictiveScalingUseCase,
)
from scaleahead.infrastructure.gateways.in_memory_annotation_bridge import (
    InMemoryAnnotationBridge,
)
from scaleahead.shared import get_logger, update_logging_from_settings

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    config = providers.Configuration()

    # Infrastructure
    annotation_bridge = providers.Singleton(InMemoryAnnotationBridge)

    # Application
    annotation_codec = providers.Singleton(
        AnnotationCodec,
        observations_key=config.predictive.observations_annotation,
        predictive_key=config.predictive.predictive_annotation,
        boot_latency_key=config.predictive.boot_latency_annotation,
    )

    predictive_scaling_use_case = providers.Factory(
        PredictiveScalingUseCase,
        codec=annotation_codec,
        annotation_bridge=annotation_bridge,
        retention_multiplier=config.predictive.retention_multiplier,
        max_retention_seconds=config.predictive.max_retention_seconds,
        sampling_period_seconds=config.predictive.sampling_period_seconds,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    update_logging_from_settings(settings)

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    logger.info("container.initialized", environment=settings.environment.value)
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container
