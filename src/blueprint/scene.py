# -*- coding: utf-8 -*-
"""
Scene Snapshot - Read-only view of the session for drawing.

Everything a renderer needs is resolved here: absolute pin positions,
wire curves, the in-progress wire and the console status. Building a
snapshot never mutates the session.
"""
from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict

from src.core.config import LayoutSettings

from .context import InteractionMode, SessionContext, Status
from .core.base_node import BlueprintNode, NodeKind
from .core.connection import ConnectionSet
from .core.geometry import Point, WireCurve, node_height, pin_anchor, wire_curve
from .core.graph import GraphStore
from .core.pins import PinDirection, PinType
from .tasks.models import TaskTemplate


class PinView(BaseModel):
    model_config = ConfigDict(frozen=True)

    pin_id: str
    label: str
    type: PinType
    direction: PinDirection
    position: Point


class NodeView(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_id: str
    kind: NodeKind
    title: str
    content: str
    color: str
    position: Point
    width: float
    height: float
    inputs: Tuple[PinView, ...]
    outputs: Tuple[PinView, ...]


class WireView(BaseModel):
    model_config = ConfigDict(frozen=True)

    connection_id: str
    source_node: str
    source_pin: str
    target_node: str
    target_pin: str
    curve: WireCurve


class SceneSnapshot(BaseModel):
    """Complete drawable state of a session at one instant."""
    model_config = ConfigDict(frozen=True)

    task_index: int
    task_id: int
    context_text: str
    nodes: Tuple[NodeView, ...]
    wires: Tuple[WireView, ...]
    mode: InteractionMode
    pointer: Point
    pending_wire: Optional[WireCurve] = None
    status: Status
    message: str
    score: int
    can_advance: bool


def _node_view(node: BlueprintNode, layout: LayoutSettings) -> NodeView:
    def pins(direction: PinDirection) -> Tuple[PinView, ...]:
        source = node.input_pins if direction.is_input else node.output_pins
        return tuple(
            PinView(
                pin_id=pin.pin_id,
                label=pin.label,
                type=pin.pin_type,
                direction=direction,
                position=pin_anchor(node, pin.pin_id, direction, layout),
            )
            for pin in source
        )

    return NodeView(
        node_id=node.node_id,
        kind=node.kind,
        title=node.title,
        content=node.content,
        color=node.color,
        position=Point(*node.position),
        width=layout.node_width,
        height=node_height(node, layout),
        inputs=pins(PinDirection.INPUT),
        outputs=pins(PinDirection.OUTPUT),
    )


def build_scene(
    task: TaskTemplate,
    graph: GraphStore,
    connections: ConnectionSet,
    context: SessionContext,
    layout: LayoutSettings,
    pending_wire: Optional[WireCurve] = None
) -> SceneSnapshot:
    """Resolve the current session state into a SceneSnapshot."""
    wires: List[WireView] = []
    for conn in connections:
        source = graph.get_node(conn.source_node)
        target = graph.get_node(conn.target_node)
        if source is None or target is None:
            continue
        start = pin_anchor(source, conn.source_pin, PinDirection.OUTPUT, layout)
        end = pin_anchor(target, conn.target_pin, PinDirection.INPUT, layout)
        wires.append(WireView(
            connection_id=conn.connection_id,
            source_node=conn.source_node,
            source_pin=conn.source_pin,
            target_node=conn.target_node,
            target_pin=conn.target_pin,
            curve=wire_curve(start, end),
        ))

    return SceneSnapshot(
        task_index=context.task_index,
        task_id=task.id,
        context_text=task.context,
        nodes=tuple(_node_view(node, layout) for node in graph.nodes),
        wires=tuple(wires),
        mode=context.mode,
        pointer=context.pointer,
        pending_wire=pending_wire,
        status=context.status,
        message=context.message,
        score=context.score,
        can_advance=context.can_advance,
    )
