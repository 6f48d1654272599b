# -*- coding: utf-8 -*-
"""
Pin Geometry - Absolute canvas coordinates for pins and wires.

resolve_pin_position() is the one place pin coordinates are computed.
Drawing and drop hit-testing both go through it, so a wire always ends
exactly where the pin is clickable. hit_test() resolves a press to the
top-most node box under it; covered pins and headers never receive it.

Layout (all values from LayoutSettings):

    position.y ─┬───────────── node_width ─────────────┐
                │ header_height                         │
                │ ...content box...                     │
    content_offset_y                                    │
                ├─ pin row 0 (pin_height) ──────────────┤
                │  pin_gap                              │
                ├─ pin row 1 ───────────────────────────┤
                │  body_padding                         │
                └───────────────────────────────────────┘
    inputs on the left edge             outputs on the right edge
"""
import math
from enum import Enum
from typing import Iterable, NamedTuple, Optional, Tuple

from src.core.config import LayoutSettings

from .base_node import BlueprintNode
from .pins import BlueprintPin, PinDirection

PENDING_WIRE_HANDLE = 100.0


class Point(NamedTuple):
    x: float
    y: float


class WireCurve(NamedTuple):
    """Cubic bezier: start, two control points, end."""
    start: Point
    control_1: Point
    control_2: Point
    end: Point


class HitRegion(Enum):
    PIN = "pin"
    HEADER = "header"
    BODY = "body"


class NodeHit(NamedTuple):
    """Part of a node under the pointer."""
    node: BlueprintNode
    region: HitRegion
    pin: Optional[BlueprintPin] = None


def resolve_pin_position(
    position: Tuple[float, float],
    pin_index: int,
    is_input: bool,
    layout: LayoutSettings
) -> Point:
    """
    Absolute coordinate of a pin.

    Args:
        position: Node top-left corner
        pin_index: Row of the pin within its own side's list
        is_input: Inputs sit on the left edge, outputs on the right
        layout: Node box metrics
    """
    x = position[0] if is_input else position[0] + layout.node_width
    y = (
        position[1]
        + layout.content_offset_y
        + pin_index * (layout.pin_height + layout.pin_gap)
        + layout.pin_height / 2
    )
    return Point(x, y)


def pin_anchor(
    node: BlueprintNode,
    pin_id: str,
    direction: PinDirection,
    layout: LayoutSettings
) -> Point:
    """Coordinate of a node's pin; the node origin if the pin is unknown."""
    index = node.pin_index(pin_id, direction)
    if index == -1:
        return Point(*node.position)
    return resolve_pin_position(node.position, index, direction.is_input, layout)


def node_height(node: BlueprintNode, layout: LayoutSettings) -> float:
    """Height of a node box, sized by its longest pin column."""
    rows = max(len(node.input_pins), len(node.output_pins), 1)
    return (
        layout.content_offset_y
        + rows * layout.pin_height
        + (rows - 1) * layout.pin_gap
        + layout.body_padding
    )


def header_contains(node: BlueprintNode, x: float, y: float, layout: LayoutSettings) -> bool:
    """True when (x, y) lies on the node's draggable header bar."""
    left, top = node.position
    return (
        left <= x <= left + layout.node_width
        and top <= y <= top + layout.header_height
    )


def body_contains(node: BlueprintNode, x: float, y: float, layout: LayoutSettings) -> bool:
    """True when (x, y) lies anywhere inside the node box, header included."""
    left, top = node.position
    return (
        left <= x <= left + layout.node_width
        and top <= y <= top + node_height(node, layout)
    )


def _pin_near(
    node: BlueprintNode,
    x: float,
    y: float,
    layout: LayoutSettings,
    radius: float
) -> Optional[BlueprintPin]:
    for is_input, pins in ((True, node.input_pins), (False, node.output_pins)):
        for index, pin in enumerate(pins):
            anchor = resolve_pin_position(node.position, index, is_input, layout)
            if math.hypot(anchor.x - x, anchor.y - y) <= radius:
                return pin
    return None


def hit_test(
    nodes: Iterable[BlueprintNode],
    x: float,
    y: float,
    layout: LayoutSettings,
    radius: float
) -> Optional[NodeHit]:
    """
    What a press at (x, y) lands on.

    Nodes are tried top-most first (last drawn). Within a node the pins
    are tried first, then the header, then the rest of the box. The
    first node that claims the point wins, so anything it covers is
    unreachable.

    Returns:
        NodeHit, or None over empty canvas
    """
    for node in reversed(list(nodes)):
        pin = _pin_near(node, x, y, layout, radius)
        if pin is not None:
            return NodeHit(node, HitRegion.PIN, pin)
        if header_contains(node, x, y, layout):
            return NodeHit(node, HitRegion.HEADER)
        if body_contains(node, x, y, layout):
            return NodeHit(node, HitRegion.BODY)
    return None


def find_header_at(
    nodes: Iterable[BlueprintNode],
    x: float,
    y: float,
    layout: LayoutSettings,
    radius: float = 0.0
) -> Optional[BlueprintNode]:
    """Node whose header receives a press at (x, y)."""
    hit = hit_test(nodes, x, y, layout, radius)
    if hit is not None and hit.region is HitRegion.HEADER:
        return hit.node
    return None


def find_pin_at(
    nodes: Iterable[BlueprintNode],
    x: float,
    y: float,
    layout: LayoutSettings,
    radius: float
) -> Optional[Tuple[BlueprintNode, BlueprintPin]]:
    """
    Pin within `radius` of the pointer that is not covered by a node
    drawn above it.

    Returns:
        (node, pin) or None
    """
    hit = hit_test(nodes, x, y, layout, radius)
    if hit is not None and hit.region is HitRegion.PIN:
        return hit.node, hit.pin
    return None


def wire_curve(start: Point, end: Point) -> WireCurve:
    """Curve for a stored wire: horizontal handles half the x-distance long."""
    handle = abs(end.x - start.x) * 0.5
    return WireCurve(
        start,
        Point(start.x + handle, start.y),
        Point(end.x - handle, end.y),
        end,
    )


def pending_wire_curve(start: Point, pointer: Point) -> WireCurve:
    """Curve for the wire being dragged; fixed-length handles."""
    return WireCurve(
        start,
        Point(start.x + PENDING_WIRE_HANDLE, start.y),
        Point(pointer.x - PENDING_WIRE_HANDLE, pointer.y),
        pointer,
    )
