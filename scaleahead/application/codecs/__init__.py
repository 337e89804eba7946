"""Marshaling between domain records and opaque annotation strings."""

from .annotation_codec import AnnotationCodec

__all__ = ["AnnotationCodec"]
