"""
Main module - Composition Root Layer

Settings and the dependency container that wires the bridge, the codec and
the predictive scaling use case together.
"""

from .config import AppSettings, LoggingSettings, PredictiveSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "LoggingSettings",
    "PredictiveSettings",
    "get_settings",
    "AppContainer",
    "get_container",
    "init_container",
]
