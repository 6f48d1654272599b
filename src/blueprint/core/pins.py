# -*- coding: utf-8 -*-
"""
Pins - Attachment points on blueprint nodes.

A pin belongs to exactly one node and has a direction fixed at
creation. Wires start at output pins and end at input pins.

The pin type is a display tag only: connection rules look at the
direction, never at the type.
"""
from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .base_node import BlueprintNode


class PinDirection(Enum):
    """Side of the node a pin sits on."""
    INPUT = "input"
    OUTPUT = "output"

    @property
    def is_input(self) -> bool:
        return self is PinDirection.INPUT


class PinType(Enum):
    """Semantic tag shown next to a pin."""
    EXEC = "exec"
    OBJECT = "object"
    POINTER = "pointer"
    MEMBER = "member"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def color(self) -> str:
        """Dot color used inside the pin circle."""
        return _PIN_COLORS[self]


_PIN_COLORS = {
    PinType.EXEC: "#FFFFFF",
    PinType.OBJECT: "#10B981",
    PinType.POINTER: "#3B82F6",
    PinType.MEMBER: "#A855F7",
}


class BlueprintPin:
    """
    A named, direction-fixed attachment point.

    Attributes:
        pin_id: Identifier, unique within the owning node
        direction: INPUT or OUTPUT, never changes after creation
        pin_type: Display tag
        label: Text drawn next to the pin
        node: Owning node (set when the pin is added to a node)
    """

    def __init__(
        self,
        pin_id: str,
        direction: PinDirection,
        pin_type: PinType = PinType.EXEC,
        label: str = ""
    ):
        self.pin_id = pin_id
        self._direction = direction
        self.pin_type = pin_type
        self.label = label or pin_type.display_name
        self.node: Optional['BlueprintNode'] = None

    @property
    def direction(self) -> PinDirection:
        return self._direction

    @property
    def is_input(self) -> bool:
        return self._direction.is_input

    def to_dict(self) -> dict:
        return {
            "id": self.pin_id,
            "direction": self._direction.value,
            "type": self.pin_type.value,
            "label": self.label,
        }

    def __repr__(self) -> str:
        owner = self.node.node_id if self.node else "?"
        return f"<Pin {owner}.{self.pin_id} ({self._direction.value})>"
