# -*- coding: utf-8 -*-
"""
Session Context - Explicit per-session state.

Holds everything that is neither graph layout nor wiring: which task
is active, the score, the console status and the gesture in progress.
The interaction controller and the session read and write it; the
presentation layer only reads it.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Set, Union
from loguru import logger

from src.core.events import Signal

from .core.geometry import Point


class Status(Enum):
    """Console state shown under the canvas."""
    NEUTRAL = "neutral"
    SUCCESS = "success"
    ERROR = "error"


class InteractionMode(Enum):
    IDLE = "idle"
    DRAGGING_NODE = "dragging_node"
    DRAGGING_WIRE = "dragging_wire"


@dataclass(frozen=True)
class NodeDrag:
    """A node header is being dragged."""
    node_id: str
    grab_offset: Point


@dataclass(frozen=True)
class WireDrag:
    """A wire is being pulled out of a pin."""
    origin_node: str
    origin_pin: str
    origin_is_input: bool
    anchor: Point


Gesture = Union[NodeDrag, WireDrag]


@dataclass
class SessionContext:
    """
    Mutable session state.

    Attributes:
        task_index: Position of the active task in the catalog
        score: Number of distinct tasks solved
        solved: Ids of solved tasks
        status: Console status
        message: Console text (may span several lines)
        gesture: Gesture in progress, None when idle
        pointer: Last known pointer position
        finished: True once the last task was passed and advanced past
    """
    task_index: int = 0
    score: int = 0
    solved: Set[int] = field(default_factory=set)
    status: Status = Status.NEUTRAL
    message: str = ""
    gesture: Optional[Gesture] = None
    pointer: Point = Point(0.0, 0.0)
    finished: bool = False
    on_status_changed: Signal = field(
        default_factory=lambda: Signal("StatusChanged"), repr=False, compare=False
    )

    @property
    def mode(self) -> InteractionMode:
        if isinstance(self.gesture, NodeDrag):
            return InteractionMode.DRAGGING_NODE
        if isinstance(self.gesture, WireDrag):
            return InteractionMode.DRAGGING_WIRE
        return InteractionMode.IDLE

    @property
    def can_advance(self) -> bool:
        """Advancing is unlocked while the current verdict is a pass."""
        return self.status is Status.SUCCESS

    def set_status(self, status: Status, message: Optional[str] = None) -> None:
        """
        Change the console status.

        Args:
            status: New status
            message: New console text; None keeps the current text
        """
        if message is not None:
            self.message = message
        if status is self.status and message is None:
            return
        self.status = status
        logger.debug(f"Status -> {status.value}")
        self.on_status_changed.emit(status, self.message)

    def record_solved(self, task_id: int) -> bool:
        """Count a solved task once. Returns True the first time."""
        if task_id in self.solved:
            return False
        self.solved.add(task_id)
        self.score += 1
        return True
