# -*- coding: utf-8 -*-
"""
Blueprint Core - Graph data model for the blueprint exercises.
"""

from .pins import PinDirection, PinType, BlueprintPin
from .base_node import BlueprintNode, NodeKind
from .connection import PinEndpoint, NodeConnection, ConnectionSet, normalize_endpoints
from .graph import GraphStore
from .geometry import (
    Point,
    WireCurve,
    resolve_pin_position,
    pin_anchor,
    HitRegion,
    NodeHit,
    hit_test,
    node_height,
    find_pin_at,
    find_header_at,
    wire_curve,
    pending_wire_curve,
)

__all__ = [
    "PinDirection",
    "PinType",
    "BlueprintPin",
    "BlueprintNode",
    "NodeKind",
    "PinEndpoint",
    "NodeConnection",
    "ConnectionSet",
    "normalize_endpoints",
    "GraphStore",
    "Point",
    "WireCurve",
    "resolve_pin_position",
    "pin_anchor",
    "HitRegion",
    "NodeHit",
    "hit_test",
    "node_height",
    "find_pin_at",
    "find_header_at",
    "wire_curve",
    "pending_wire_curve",
]
