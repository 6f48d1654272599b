"""
Foundation Core - Engine Infrastructure.

Provides the ambient systems shared by the blueprint engine:
- ConfigManager: Configuration with optional persistence
- Signal: Synchronous observer notifications
- setup_logging: Loguru console/file handlers

Usage:
    from src.core import ConfigManager, setup_logging

    config = ConfigManager("blueprint.json")
    setup_logging(config.data.general.debug_mode)
"""
from .config import (
    ConfigManager,
    AppConfig,
    GeneralSettings,
    LayoutSettings,
    InteractionSettings,
    LoggingSettings,
)
from .events import Signal
from .logging import setup_logging

__all__ = [
    "ConfigManager",
    "AppConfig",
    "GeneralSettings",
    "LayoutSettings",
    "InteractionSettings",
    "LoggingSettings",
    "Signal",
    "setup_logging",
]
