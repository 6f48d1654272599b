"""
Blueprint Engine - Visual node-graph exercises

Drag nodes, wire pins together and check the chain against the
expected path of each task.
"""

# Core systems
from src.core.config import ConfigManager
from src.core.events import Signal
from src.core.logging import setup_logging

__version__ = "0.1.0"

__all__ = [
    "ConfigManager",
    "Signal",
    "setup_logging",
]
