"""
Domain Errors

Every failure of the predictive core is one of these. None of them is fatal:
callers skip prediction for the tick or propagate upward.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InputFormatError(DomainError):
    """Raised when externally stored text or a caller input is malformed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class DurationParseError(InputFormatError):
    """Raised when a cached boot latency duration cannot be parsed."""

    def __init__(self, value: str, details: Optional[Dict[str, Any]] = None):
        self.value = value
        super().__init__(f"Invalid duration {value!r}", details)


class NotReadyError(DomainError):
    """Raised when boot latency is requested for an instance that is not ready."""

    def __init__(self, instance_name: str, details: Optional[Dict[str, Any]] = None):
        self.instance_name = instance_name
        super().__init__(f"Instance {instance_name} is not ready", details)


class DegenerateInputError(DomainError):
    """Raised when a trend is requested over samples with zero time variance."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
