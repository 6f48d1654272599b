# -*- coding: utf-8 -*-
"""
Task Models - Immutable exercise definitions.

A task is authored content: the initial node layout, the node ids that
must be chained in order, and the text shown around the exercise.
Templates are frozen; the GraphStore builds its own nodes from them, so
a task can be replayed any number of times.

Broken content (an expected path naming a node the layout does not
contain, duplicate ids, no start node) raises TaskIntegrityError as
soon as the template is built.
"""
from typing import Any, List, Tuple
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from ..core.base_node import NodeKind
from ..core.pins import PinType


class TaskIntegrityError(Exception):
    """Task content is self-inconsistent; raised instead of degrading."""

    def __init__(self, task_id: Any, problems: List[str]):
        self.task_id = task_id
        self.problems = problems
        super().__init__(f"Task {task_id} is corrupt: " + "; ".join(problems))


def _lower_enum_value(value: Any) -> Any:
    # Accept "VARIABLE" / "POINTER" style content as well as enum values
    if isinstance(value, str):
        return value.lower()
    return value


class PinTemplate(BaseModel):
    """Pin definition inside a node template."""
    model_config = ConfigDict(frozen=True)

    id: str
    label: str = ""
    type: PinType = PinType.EXEC

    normalize_type = field_validator("type", mode="before")(_lower_enum_value)


class NodeTemplate(BaseModel):
    """
    Initial state of one node.

    Attributes:
        id: Node id, unique within the task
        kind: variable | operator | member | result
        title: Header text
        x, y: Initial position
        color: Header color
        content: Payload text, e.g. "Player* ptr" or "->"
        inputs, outputs: Ordered pin definitions
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    kind: NodeKind = Field(validation_alias=AliasChoices("kind", "type"))
    title: str = ""
    x: float = 0.0
    y: float = 0.0
    color: str = "#4A90D9"
    content: str = ""
    inputs: Tuple[PinTemplate, ...] = ()
    outputs: Tuple[PinTemplate, ...] = ()

    normalize_kind = field_validator("kind", mode="before")(_lower_enum_value)


class TaskTemplate(BaseModel):
    """
    One blueprint exercise.

    Attributes:
        id: Task number
        context: Prompt shown when the task is selected
        nodes: Initial node layout
        expected_path: Node ids that must be wired in this order
        explanation: Why the expected path is correct
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    context: str
    nodes: Tuple[NodeTemplate, ...]
    expected_path: Tuple[str, ...] = Field(
        validation_alias=AliasChoices("expected_path", "correctPath", "correct_path")
    )
    explanation: str = ""

    @model_validator(mode="after")
    def check_integrity(self) -> 'TaskTemplate':
        problems: List[str] = []

        node_ids = [node.id for node in self.nodes]
        duplicates = sorted({nid for nid in node_ids if node_ids.count(nid) > 1})
        if duplicates:
            problems.append(f"duplicate node ids {duplicates}")

        for node in self.nodes:
            pin_ids = [pin.id for pin in node.inputs + node.outputs]
            if len(pin_ids) != len(set(pin_ids)):
                problems.append(f"duplicate pin ids on node '{node.id}'")

        missing = [nid for nid in self.expected_path if nid not in node_ids]
        if missing:
            problems.append(f"expected path references missing nodes {missing}")

        variables = [node.id for node in self.nodes if node.kind is NodeKind.VARIABLE]
        if len(variables) != 1:
            problems.append(f"expected exactly one variable node, found {len(variables)}")
        elif self.expected_path and self.expected_path[0] != variables[0]:
            problems.append(f"expected path must start at variable node '{variables[0]}'")

        if len(self.expected_path) < 2:
            problems.append("expected path needs at least two nodes")

        if problems:
            raise TaskIntegrityError(self.id, problems)
        return self

    @property
    def start_node_id(self) -> str:
        return next(node.id for node in self.nodes if node.kind is NodeKind.VARIABLE)

    def node(self, node_id: str) -> NodeTemplate:
        for node in self.nodes:
            if node.id == node_id:
                return node
        raise TaskIntegrityError(self.id, [f"node '{node_id}' not in layout"])
