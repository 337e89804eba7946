"""
Shared module - Cross-cutting concerns / Shared Layer

Enums and the logging bootstrap used by every other layer.
It must not depend on Domain, Application or Infrastructure code.
"""

from .consts import EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
