"""
Use Cases Package - Application Layer
"""

from .predictive_scaling_use_case import (
    PredictiveScalingError,
    PredictiveScalingUseCase,
)

__all__ = ["PredictiveScalingError", "PredictiveScalingUseCase"]
