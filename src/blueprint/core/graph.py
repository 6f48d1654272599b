# -*- coding: utf-8 -*-
"""
GraphStore - Container for the nodes of the active task.

The store is the single source of truth for node layout. It is
rebuilt wholesale from a task template whenever a task is selected;
nothing from the previous task survives.

Example:
    store = GraphStore()
    store.initialize_from_template(task)

    store.move_node("node-var", 40, 180)
    node = store.get_node("node-var")
"""
from typing import Dict, List, Optional, TYPE_CHECKING
from loguru import logger

from .base_node import BlueprintNode, NodeKind

if TYPE_CHECKING:
    from ..tasks.models import TaskTemplate


class GraphStore:
    """
    Node container for one task.

    Attributes:
        name: Human-readable name (the task id once initialized)
    """

    def __init__(self, name: str = "Untitled Graph"):
        self.name = name
        self._nodes: Dict[str, BlueprintNode] = {}

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def initialize_from_template(self, template: 'TaskTemplate') -> None:
        """
        Replace all nodes with fresh copies of a task's layout.

        Args:
            template: Immutable task definition; never modified
        """
        self._nodes = {
            node_template.id: BlueprintNode.from_template(node_template)
            for node_template in template.nodes
        }
        self.name = f"Task {template.id}"
        logger.debug(f"Graph initialized from task {template.id}: {len(self._nodes)} nodes")

    def clear(self) -> None:
        """Remove all nodes."""
        self._nodes.clear()

    # =========================================================================
    # Node Management
    # =========================================================================

    def add_node(self, node: BlueprintNode) -> BlueprintNode:
        """Add a node to the graph, replacing one with the same id."""
        self._nodes[node.node_id] = node
        logger.debug(f"Added node: {node}")
        return node

    def get_node(self, node_id: str) -> Optional[BlueprintNode]:
        """Get a node by ID, or None when absent."""
        return self._nodes.get(node_id)

    def move_node(self, node_id: str, x: float, y: float) -> None:
        """
        Overwrite a node's position. No bounds checking.

        Raises:
            KeyError: If node not found
        """
        node = self._nodes.get(node_id)
        if node is None:
            raise KeyError(f"Node not found: {node_id}")
        node.position = (float(x), float(y))

    def find_nodes_by_kind(self, kind: NodeKind) -> List[BlueprintNode]:
        return [node for node in self._nodes.values() if node.kind is kind]

    def start_node(self) -> Optional[BlueprintNode]:
        """The variable node a trace begins from."""
        variables = self.find_nodes_by_kind(NodeKind.VARIABLE)
        return variables[0] if variables else None

    @property
    def nodes(self) -> List[BlueprintNode]:
        """Nodes in drawing order (last drawn is top-most)."""
        return list(self._nodes.values())

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "nodes": [node.to_dict() for node in self._nodes.values()],
        }

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __repr__(self) -> str:
        return f"<GraphStore '{self.name}' nodes={len(self._nodes)}>"
