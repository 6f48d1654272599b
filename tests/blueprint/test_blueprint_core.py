# -*- coding: utf-8 -*-
"""
Tests for Blueprint Core

Tests cover:
- BlueprintNode / BlueprintPin creation
- GraphStore template loading and moves
- ConnectionSet direction normalization, self-loops and the single-input rule
"""
import pytest

from src.blueprint.core.base_node import BlueprintNode, NodeKind
from src.blueprint.core.pins import BlueprintPin, PinDirection, PinType
from src.blueprint.core.connection import (
    ConnectionSet, NodeConnection, PinEndpoint, normalize_endpoints
)
from src.blueprint.core.graph import GraphStore


def out(node_id, pin_id="out"):
    return PinEndpoint(node_id, pin_id, PinDirection.OUTPUT)


def inp(node_id, pin_id="in"):
    return PinEndpoint(node_id, pin_id, PinDirection.INPUT)


# =============================================================================
# Test BlueprintNode
# =============================================================================

class TestBlueprintNode:
    """Tests for node creation and pins."""

    def test_node_default_position(self):
        """Node should start at (0, 0)."""
        node = BlueprintNode("n1", NodeKind.OPERATOR)
        assert node.position == (0.0, 0.0)

    def test_title_defaults_to_kind(self):
        """Missing title falls back to the kind name."""
        node = BlueprintNode("n1", NodeKind.MEMBER)
        assert node.title == "Member"

    def test_pins_keep_order(self):
        """Pins are listed in the order they were added."""
        node = BlueprintNode("n1", NodeKind.OPERATOR)
        node.add_input_pin(BlueprintPin("a", PinDirection.INPUT))
        node.add_input_pin(BlueprintPin("b", PinDirection.INPUT))
        assert [p.pin_id for p in node.input_pins] == ["a", "b"]
        assert node.pin_index("b", PinDirection.INPUT) == 1
        assert node.pin_index("b", PinDirection.OUTPUT) == -1

    def test_pin_direction_must_match_side(self):
        """An output pin cannot be added as an input."""
        node = BlueprintNode("n1", NodeKind.OPERATOR)
        with pytest.raises(ValueError):
            node.add_input_pin(BlueprintPin("x", PinDirection.OUTPUT))

    def test_duplicate_pin_id_rejected(self):
        """Pin ids are unique across both sides of a node."""
        node = BlueprintNode("n1", NodeKind.OPERATOR)
        node.add_input_pin(BlueprintPin("p", PinDirection.INPUT))
        with pytest.raises(ValueError):
            node.add_output_pin(BlueprintPin("p", PinDirection.OUTPUT))

    def test_pin_knows_owner(self):
        """Adding a pin sets its node back-reference."""
        node = BlueprintNode("n1", NodeKind.OPERATOR)
        pin = node.add_output_pin(BlueprintPin("out", PinDirection.OUTPUT, PinType.MEMBER))
        assert pin.node is node
        assert pin.label == "Member"

    def test_from_template_copies_payload(self, object_task):
        """Template fields are carried onto the runtime node."""
        node = BlueprintNode.from_template(object_task.node("node-var"))
        assert node.kind is NodeKind.VARIABLE
        assert node.content == "Player p1"
        assert node.position == (20.0, 150.0)
        assert node.output_pins[0].pin_type is PinType.OBJECT


# =============================================================================
# Test GraphStore
# =============================================================================

class TestGraphStore:
    """Tests for the node container."""

    def test_initialize_from_template(self, graph, object_task):
        """Every template node is present."""
        assert len(graph) == len(object_task.nodes)
        assert "node-arrow" in graph

    def test_get_missing_node_returns_none(self, graph):
        """Unknown ids give the not-found sentinel."""
        assert graph.get_node("nope") is None

    def test_move_node_overwrites_position(self, graph):
        """Moves are unconditional, even off-canvas."""
        graph.move_node("node-dot", -500, 9999)
        assert graph.get_node("node-dot").position == (-500.0, 9999.0)

    def test_move_node_is_idempotent(self, graph):
        """Repeating a move leaves the node at the same place."""
        for _ in range(5):
            graph.move_node("node-mem", 321.5, 42.0)
        assert graph.get_node("node-mem").position == (321.5, 42.0)

    def test_move_unknown_node_raises(self, graph):
        """Moving an unknown node is a programming error."""
        with pytest.raises(KeyError):
            graph.move_node("ghost", 0, 0)

    def test_template_is_never_mutated(self, object_task):
        """Moving a node leaves the template layout intact."""
        store = GraphStore()
        store.initialize_from_template(object_task)
        store.move_node("node-var", 999, 999)

        assert object_task.node("node-var").x == 20
        fresh = GraphStore()
        fresh.initialize_from_template(object_task)
        assert fresh.get_node("node-var").position == (20.0, 150.0)

    def test_reinitialize_discards_previous_nodes(self, graph, pointer_task):
        """A new template replaces all nodes, no merge."""
        graph.add_node(BlueprintNode("stray", NodeKind.RESULT))
        graph.initialize_from_template(pointer_task)
        assert "stray" not in graph
        assert graph.get_node("node-var").content == "Player* ptr"

    def test_start_node_is_variable(self, graph):
        """The trace starts at the variable node."""
        assert graph.start_node().node_id == "node-var"


# =============================================================================
# Test ConnectionSet
# =============================================================================

class TestNormalizeEndpoints:
    """Tests for the direction normalization step."""

    def test_output_first(self):
        assert normalize_endpoints(out("a"), inp("b")) == (out("a"), inp("b"))

    def test_input_first_is_flipped(self):
        assert normalize_endpoints(inp("b"), out("a")) == (out("a"), inp("b"))

    def test_same_direction_rejected(self):
        assert normalize_endpoints(out("a"), out("b")) is None
        assert normalize_endpoints(inp("a"), inp("b")) is None


class TestConnectionSet:
    """Tests for wire storage rules."""

    def test_add_connection(self, connections):
        conn = connections.add_connection(out("a"), inp("b"))
        assert conn == NodeConnection("a", "out", "b", "in")
        assert conn.connection_id == "a:out-b:in"
        assert len(connections) == 1

    def test_drag_direction_does_not_matter(self, connections):
        """Dragging from the input end stores the same wire."""
        conn = connections.add_connection(inp("b"), out("a"))
        assert conn.source_node == "a"
        assert conn.target_node == "b"

    def test_self_connection_rejected(self, connections):
        assert connections.add_connection(out("a"), inp("a")) is None
        assert len(connections) == 0

    def test_same_direction_creates_nothing(self, connections):
        assert connections.add_connection(out("a"), out("b")) is None
        assert connections.add_connection(inp("a"), inp("b")) is None
        assert len(connections) == 0

    def test_second_wire_replaces_first_on_input(self, connections):
        """An input accepts a single wire; the newest wins."""
        connections.add_connection(out("a"), inp("c"))
        connections.add_connection(out("b", "out2"), inp("c"))

        to_c = [conn for conn in connections if conn.target == ("c", "in")]
        assert len(to_c) == 1
        assert to_c[0].source_node == "b"

    def test_output_fan_out(self, connections):
        """One output may feed several inputs."""
        connections.add_connection(out("a"), inp("b"))
        connections.add_connection(out("a"), inp("c"))
        assert len(connections.find_from_node("a")) == 2

    def test_reconnecting_same_pins_keeps_one(self, connections):
        connections.add_connection(out("a"), inp("b"))
        connections.add_connection(inp("b"), out("a"))
        assert len(connections) == 1

    def test_clear(self, connections):
        connections.add_connection(out("a"), inp("b"))
        connections.add_connection(out("b"), inp("c"))
        connections.clear()
        assert len(connections) == 0
        assert connections.connections == []

    def test_remove(self, connections):
        conn = connections.add_connection(out("a"), inp("b"))
        connections.remove(conn.connection_id)
        assert connections.find_to_pin("b", "in") is None
