"""
Event System - Synchronous observer notifications.

Provides:
- Signal: observer pattern for sync notifications (config changes,
  session status, graph mutations)

Usage:
    from src.core.events import Signal

    changed = Signal("StatusChanged")
    changed.connect(on_status)
    changed.emit("success", "Compilation Successful!")
"""
from .observer import Signal


__all__ = ["Signal"]
