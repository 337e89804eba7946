"""
Gateways Package - Domain Layer

Interfaces for the external collaborators of the predictive core.
Implementations live in the infrastructure layer.
"""

from .annotation_bridge import IAnnotationBridge

__all__ = ["IAnnotationBridge"]
