# -*- coding: utf-8 -*-
"""
Blueprint - Node-graph interaction and validation engine.

Learners drag nodes, pull wires between pins and run the chain to see
whether it compiles. Rendering is left to the caller: draw from
BlueprintSession.snapshot() and feed pointer events back in.
"""

from .context import SessionContext, Status, InteractionMode
from .session import BlueprintSession
from .scene import SceneSnapshot

__all__ = [
    "BlueprintSession",
    "SessionContext",
    "SceneSnapshot",
    "Status",
    "InteractionMode",
]
