from .in_memory_annotation_bridge import (
    AnnotationBridgeError,
    InMemoryAnnotationBridge,
)

__all__ = ["AnnotationBridgeError", "InMemoryAnnotationBridge"]
