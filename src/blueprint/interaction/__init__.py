# -*- coding: utf-8 -*-
"""
Blueprint Interaction - Pointer-driven drag/connect state machine.
"""

from .controller import InteractionController, PointerEvent, PointerEventKind

__all__ = [
    "InteractionController",
    "PointerEvent",
    "PointerEventKind",
]
