# -*- coding: utf-8 -*-
"""
Blueprint Node - A positioned vertex of the exercise graph.

Provides:
- Stable identification across drags
- Ordered input/output pin lists
- Display payload (title, content label, header color)
- Construction from an immutable task template

Example:
    node = BlueprintNode("node-dot", NodeKind.OPERATOR, title="Dot Operator", content=".")
    node.add_input_pin(BlueprintPin("in", PinDirection.INPUT, PinType.OBJECT))
    node.add_output_pin(BlueprintPin("out", PinDirection.OUTPUT, PinType.MEMBER))
"""
from enum import Enum
from typing import Dict, List, Optional, TYPE_CHECKING

from .pins import BlueprintPin, PinDirection

if TYPE_CHECKING:
    from ..tasks.models import NodeTemplate


class NodeKind(Enum):
    """Role of a node in an access chain."""
    VARIABLE = "variable"
    OPERATOR = "operator"
    MEMBER = "member"
    RESULT = "result"


class BlueprintNode:
    """
    Mutable runtime node held by the GraphStore.

    Attributes:
        node_id: Unique identifier, stable for the node's lifetime
        kind: NodeKind of this node
        title: Header text
        content: Payload text (e.g. "Player p1" or "->")
        color: Hex color for the header
        position: (x, y) canvas position of the top-left corner
    """

    def __init__(
        self,
        node_id: str,
        kind: NodeKind,
        title: str = "",
        content: str = "",
        color: str = "#4A90D9",
        position: tuple[float, float] = (0.0, 0.0)
    ):
        self.node_id = node_id
        self.kind = kind
        self.title = title or kind.value.capitalize()
        self.content = content
        self.color = color
        self.position: tuple[float, float] = (float(position[0]), float(position[1]))
        self._input_pins: Dict[str, BlueprintPin] = {}
        self._output_pins: Dict[str, BlueprintPin] = {}

    # =========================================================================
    # Pin Management
    # =========================================================================

    def add_input_pin(self, pin: BlueprintPin) -> BlueprintPin:
        """
        Add an input pin to this node.

        Raises:
            ValueError: If the pin is not an input or its id is taken
        """
        if not pin.is_input:
            raise ValueError(f"Pin '{pin.pin_id}' is not an input pin")
        self._check_pin_id(pin.pin_id)
        pin.node = self
        self._input_pins[pin.pin_id] = pin
        return pin

    def add_output_pin(self, pin: BlueprintPin) -> BlueprintPin:
        """
        Add an output pin to this node.

        Raises:
            ValueError: If the pin is not an output or its id is taken
        """
        if pin.is_input:
            raise ValueError(f"Pin '{pin.pin_id}' is not an output pin")
        self._check_pin_id(pin.pin_id)
        pin.node = self
        self._output_pins[pin.pin_id] = pin
        return pin

    def _check_pin_id(self, pin_id: str) -> None:
        if pin_id in self._input_pins or pin_id in self._output_pins:
            raise ValueError(f"Duplicate pin id '{pin_id}' on node '{self.node_id}'")

    def get_input_pin(self, pin_id: str) -> Optional[BlueprintPin]:
        """Get an input pin by id."""
        return self._input_pins.get(pin_id)

    def get_output_pin(self, pin_id: str) -> Optional[BlueprintPin]:
        """Get an output pin by id."""
        return self._output_pins.get(pin_id)

    def get_pin(self, pin_id: str) -> Optional[BlueprintPin]:
        """Get a pin by id from either side."""
        return self._input_pins.get(pin_id) or self._output_pins.get(pin_id)

    def pin_index(self, pin_id: str, direction: PinDirection) -> int:
        """Row of a pin within its own side, or -1 if absent."""
        pins = self._input_pins if direction.is_input else self._output_pins
        for index, name in enumerate(pins):
            if name == pin_id:
                return index
        return -1

    @property
    def input_pins(self) -> List[BlueprintPin]:
        """Input pins in display order."""
        return list(self._input_pins.values())

    @property
    def output_pins(self) -> List[BlueprintPin]:
        """Output pins in display order."""
        return list(self._output_pins.values())

    # =========================================================================
    # Templates / Serialization
    # =========================================================================

    @classmethod
    def from_template(cls, template: 'NodeTemplate') -> 'BlueprintNode':
        """
        Build a fresh node from a task template.

        The node shares no mutable state with the template.
        """
        node = cls(
            node_id=template.id,
            kind=template.kind,
            title=template.title,
            content=template.content,
            color=template.color,
            position=(template.x, template.y),
        )
        for pin in template.inputs:
            node.add_input_pin(BlueprintPin(pin.id, PinDirection.INPUT, pin.type, pin.label))
        for pin in template.outputs:
            node.add_output_pin(BlueprintPin(pin.id, PinDirection.OUTPUT, pin.type, pin.label))
        return node

    def to_dict(self) -> dict:
        """
        Serialize node for drawing or debugging.

        Returns:
            Dictionary representation of node state
        """
        return {
            "node_id": self.node_id,
            "kind": self.kind.value,
            "title": self.title,
            "content": self.content,
            "color": self.color,
            "position": list(self.position),
            "inputs": [pin.to_dict() for pin in self._input_pins.values()],
            "outputs": [pin.to_dict() for pin in self._output_pins.values()],
        }

    def __repr__(self) -> str:
        return f"<{self.kind.value}({self.node_id}) at {self.position}>"
