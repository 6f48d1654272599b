# -*- coding: utf-8 -*-
"""
Interaction Controller - Pointer events to graph mutations.

A strictly sequential state machine with three modes:

    IDLE ──down on header──▶ DRAGGING_NODE ──up anywhere──▶ IDLE
    IDLE ──down on pin─────▶ DRAGGING_WIRE ──up on pin────▶ IDLE (+ wire)
                                           ──up elsewhere─▶ IDLE (abandoned)

Only one gesture runs at a time; a pointer-down during a gesture is
ignored until the matching pointer-up. Raw coordinates are hit-tested
with the same pin geometry used for drawing.

Example:
    controller = InteractionController(graph, connections, context, layout)
    controller.pointer_down(230, 260)    # output pin of node-var
    controller.pointer_move(260, 190)
    controller.pointer_up(250, 186)      # input pin of node-dot
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional
from loguru import logger

from src.core.config import LayoutSettings
from src.core.events import Signal

from ..context import InteractionMode, NodeDrag, SessionContext, Status, WireDrag
from ..core.connection import ConnectionSet, NodeConnection, PinEndpoint
from ..core.geometry import (
    HitRegion, Point, WireCurve, find_pin_at, hit_test, pending_wire_curve, pin_anchor
)
from ..core.graph import GraphStore
from ..core.pins import PinDirection


class PointerEventKind(Enum):
    DOWN = "down"
    MOVE = "move"
    UP = "up"


@dataclass(frozen=True)
class PointerEvent:
    """Raw pointer event in canvas coordinates."""
    kind: PointerEventKind
    x: float
    y: float


class InteractionController:
    """
    Translates pointer events into GraphStore / ConnectionSet mutations.

    Attributes:
        layout: Node box metrics used for hit testing
        pin_hit_radius: How close to a pin center a press or release must be
        on_graph_changed: Emitted after every node move or new wire
    """

    def __init__(
        self,
        graph: GraphStore,
        connections: ConnectionSet,
        context: SessionContext,
        layout: Optional[LayoutSettings] = None,
        pin_hit_radius: float = 10.0
    ):
        self.graph = graph
        self.connections = connections
        self.context = context
        self.layout = layout or LayoutSettings()
        self.pin_hit_radius = pin_hit_radius
        self.on_graph_changed = Signal("GraphChanged")

    @property
    def mode(self) -> InteractionMode:
        return self.context.mode

    # =========================================================================
    # Pointer Events
    # =========================================================================

    def pointer_down(self, x: float, y: float) -> None:
        """Start a node drag (header) or a wire drag (pin) on the top-most node."""
        if self.context.gesture is not None:
            logger.debug(f"Ignored pointer down during {self.mode.value}")
            return
        self.context.pointer = Point(x, y)

        hit = hit_test(self.graph.nodes, x, y, self.layout, self.pin_hit_radius)
        if hit is None or hit.region is HitRegion.BODY:
            return

        node = hit.node
        if hit.region is HitRegion.PIN:
            pin = hit.pin
            anchor = pin_anchor(node, pin.pin_id, pin.direction, self.layout)
            self.context.gesture = WireDrag(node.node_id, pin.pin_id, pin.is_input, anchor)
            logger.debug(f"Wire drag from {node.node_id}.{pin.pin_id}")
        else:
            offset = Point(x - node.position[0], y - node.position[1])
            self.context.gesture = NodeDrag(node.node_id, offset)
            logger.debug(f"Node drag {node.node_id} offset={offset}")

    def pointer_move(self, x: float, y: float) -> None:
        """Track the pointer; a dragged node follows it immediately."""
        self.context.pointer = Point(x, y)
        gesture = self.context.gesture
        if isinstance(gesture, NodeDrag):
            self.graph.move_node(
                gesture.node_id,
                x - gesture.grab_offset.x,
                y - gesture.grab_offset.y,
            )
            self.on_graph_changed.emit()

    def pointer_up(self, x: float, y: float) -> Optional[NodeConnection]:
        """
        Finish the current gesture.

        Returns:
            The wire created by a drop on a pin, otherwise None
        """
        self.context.pointer = Point(x, y)
        gesture = self.context.gesture
        self.context.gesture = None

        if not isinstance(gesture, WireDrag):
            return None

        hit = find_pin_at(self.graph.nodes, x, y, self.layout, self.pin_hit_radius)
        if hit is None:
            logger.debug(f"Wire from {gesture.origin_node}.{gesture.origin_pin} abandoned")
            return None

        node, pin = hit
        origin_direction = PinDirection.INPUT if gesture.origin_is_input else PinDirection.OUTPUT
        connection = self.connections.add_connection(
            PinEndpoint(gesture.origin_node, gesture.origin_pin, origin_direction),
            PinEndpoint(node.node_id, pin.pin_id, pin.direction),
        )
        self.context.set_status(Status.NEUTRAL)
        if connection is not None:
            self.on_graph_changed.emit()
        return connection

    def handle(self, event: PointerEvent) -> Optional[NodeConnection]:
        """Dispatch one raw event."""
        if event.kind is PointerEventKind.DOWN:
            self.pointer_down(event.x, event.y)
        elif event.kind is PointerEventKind.MOVE:
            self.pointer_move(event.x, event.y)
        else:
            return self.pointer_up(event.x, event.y)
        return None

    def handle_all(self, events: Iterable[PointerEvent]) -> None:
        """Replay events strictly in order."""
        for event in events:
            self.handle(event)

    def cancel(self) -> None:
        """Drop any gesture in progress without side effects."""
        if self.context.gesture is not None:
            logger.debug(f"Cancelled {self.mode.value}")
        self.context.gesture = None

    # =========================================================================
    # Drawing Helpers
    # =========================================================================

    def pending_wire(self) -> Optional[WireCurve]:
        """Curve from the wire anchor to the pointer while a wire is dragged."""
        gesture = self.context.gesture
        if not isinstance(gesture, WireDrag):
            return None
        return pending_wire_curve(gesture.anchor, self.context.pointer)
