# -*- coding: utf-8 -*-
"""
Connection - Directed wires between node pins.

A connection links an output pin to an input pin. The user may drag
a wire from either end; the stored connection always runs from the
output (source) to the input (target).

Example:
    connections = ConnectionSet()
    connections.add_connection(
        PinEndpoint("node-mem", "in", PinDirection.INPUT),
        PinEndpoint("node-dot", "out", PinDirection.OUTPUT),
    )
    # stored as node-dot:out -> node-mem:in
"""
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple
from loguru import logger

from .pins import PinDirection


@dataclass(frozen=True)
class PinEndpoint:
    """One end of a wire as seen by the user: a pin on a node."""
    node_id: str
    pin_id: str
    direction: PinDirection

    @property
    def is_input(self) -> bool:
        return self.direction.is_input


@dataclass(frozen=True)
class NodeConnection:
    """
    A stored wire. Source is always an output pin, target an input pin.

    Attributes:
        source_node: ID of node owning the output pin
        source_pin: Output pin id
        target_node: ID of node owning the input pin
        target_pin: Input pin id
    """
    source_node: str
    source_pin: str
    target_node: str
    target_pin: str

    @property
    def connection_id(self) -> str:
        return f"{self.source_node}:{self.source_pin}-{self.target_node}:{self.target_pin}"

    @property
    def target(self) -> Tuple[str, str]:
        return (self.target_node, self.target_pin)

    def to_dict(self) -> dict:
        return {
            "connection_id": self.connection_id,
            "source_node_id": self.source_node,
            "source_pin_id": self.source_pin,
            "target_node_id": self.target_node,
            "target_pin_id": self.target_pin,
        }

    def __repr__(self) -> str:
        return (
            f"<Connection {self.source_node}.{self.source_pin} -> "
            f"{self.target_node}.{self.target_pin}>"
        )


def normalize_endpoints(
    end_a: PinEndpoint,
    end_b: PinEndpoint
) -> Optional[Tuple[PinEndpoint, PinEndpoint]]:
    """
    Order two endpoints as (source, target).

    Independent of which end the gesture started from. Returns None
    when both ends face the same way.
    """
    if end_a.is_input == end_b.is_input:
        return None
    if end_a.is_input:
        return end_b, end_a
    return end_a, end_b


class ConnectionSet:
    """
    Ordered set of wires with the single-input rule.

    An input pin accepts at most one incoming connection; connecting a
    new wire to an occupied input replaces the old one. Outputs may
    fan out freely.
    """

    def __init__(self):
        self._connections: List[NodeConnection] = []

    def add_connection(
        self,
        end_a: PinEndpoint,
        end_b: PinEndpoint
    ) -> Optional[NodeConnection]:
        """
        Connect two pins.

        Args:
            end_a: Endpoint where the gesture started
            end_b: Endpoint where the gesture ended

        Returns:
            The stored connection, or None if the pair is not a valid wire
        """
        ordered = normalize_endpoints(end_a, end_b)
        if ordered is None:
            logger.debug(f"Rejected wire {end_a} / {end_b}: same direction")
            return None

        source, target = ordered
        if source.node_id == target.node_id:
            logger.debug(f"Rejected wire on {source.node_id}: self-connection")
            return None

        connection = NodeConnection(
            source_node=source.node_id,
            source_pin=source.pin_id,
            target_node=target.node_id,
            target_pin=target.pin_id,
        )

        # Remove existing connection on target input pin
        replaced = self.find_to_pin(target.node_id, target.pin_id)
        if replaced is not None:
            self._connections.remove(replaced)
            logger.debug(f"Replaced: {replaced}")

        self._connections.append(connection)
        logger.debug(f"Connected: {connection}")
        return connection

    def remove(self, connection_id: str) -> None:
        """Remove a connection by id, if present."""
        self._connections = [
            conn for conn in self._connections
            if conn.connection_id != connection_id
        ]

    def clear(self) -> None:
        """Remove all connections."""
        self._connections.clear()

    def find_from_node(self, node_id: str) -> List[NodeConnection]:
        """All connections leaving a node, in insertion order."""
        return [conn for conn in self._connections if conn.source_node == node_id]

    def find_to_pin(self, node_id: str, pin_id: str) -> Optional[NodeConnection]:
        """The connection feeding an input pin, if any."""
        for conn in self._connections:
            if conn.target == (node_id, pin_id):
                return conn
        return None

    @property
    def connections(self) -> List[NodeConnection]:
        """Snapshot of all connections in insertion order."""
        return list(self._connections)

    def __len__(self) -> int:
        return len(self._connections)

    def __iter__(self) -> Iterator[NodeConnection]:
        return iter(list(self._connections))

    def __repr__(self) -> str:
        return f"<ConnectionSet conn={len(self._connections)}>"
