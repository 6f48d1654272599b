# -*- coding: utf-8 -*-
"""
Path Validator - Grades a wired chain against a task's expected path.

The validator walks forward from the task's variable node, following
the first outgoing wire of each node, and compares the visited ids
with the expected path. A wrong chain gets the diagnostic a C++
compiler would give for the operator that was used.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple
from loguru import logger

from ..core.base_node import BlueprintNode
from ..core.connection import ConnectionSet
from ..core.graph import GraphStore
from ..tasks.models import TaskIntegrityError

ARROW_OPERATOR = "->"
DOT_OPERATOR = "."

SUCCESS_MESSAGE = "Compilation successful!\n> Executing... OK.\n> Access granted."
INVALID_CONFIGURATION_MESSAGE = "error: invalid node configuration"


class DiagnosticCode(Enum):
    SUCCESS = "success"
    DISCONNECTED = "disconnected"
    NOT_A_POINTER = "not_a_pointer"
    IS_A_POINTER = "is_a_pointer"
    INVALID_CONFIGURATION = "invalid_configuration"


@dataclass(frozen=True)
class ValidationResult:
    """
    Verdict of one validation run.

    Attributes:
        passed: True only for an exact match with the expected path
        code: Which diagnostic was selected
        message: Text for the output console
        trace: Node ids visited from the start node
        stage: Hop number (1-based) where the chain broke, if it did
    """
    passed: bool
    code: DiagnosticCode
    message: str
    trace: Tuple[str, ...] = ()
    stage: Optional[int] = None


def payload_denotes_pointer(content: str) -> bool:
    """
    Whether a start expression evaluates to a pointer.

    `this` and declarations such as `Player* ptr` do; dereferences such
    as `(*ptr)` and plain values such as `Player p1` or `team[0]` do not.
    """
    text = content.strip()
    if text == "this":
        return True
    if text.startswith("*") or text.startswith("(*"):
        return False
    return "*" in text


def _reference_subject(content: str) -> str:
    """
    How a compiler names the left side of a member access.

    Declarations report their type ("Player p1" -> base type 'Player',
    "Player* ptr" -> base type 'Player *'); anything else is reported
    as an expression ("this", "team[0]", "(*ptr)").
    """
    text = content.strip()
    parts = text.rsplit(" ", 1)
    if len(parts) == 2:
        declared_type, name = parts
        depth = declared_type.count("*") + len(name) - len(name.lstrip("*"))
        base = declared_type.replace("*", "").strip()
        if base and name.lstrip("*").isidentifier():
            return f"base type '{base} {'*' * depth}'" if depth else f"base type '{base}'"
    return f"expression '{text}'"


class PathValidator:
    """
    Traces and grades the chain wired from the start node.

    The number of hops follows the expected path length (two for the
    variable → operator → member exercises).
    """

    def validate(
        self,
        graph: GraphStore,
        connections: ConnectionSet,
        expected_path: Sequence[str]
    ) -> ValidationResult:
        """
        Grade the current wiring.

        Args:
            graph: Nodes of the active task
            connections: Current wires
            expected_path: Node ids that must be chained, start node first

        Returns:
            ValidationResult with pass/fail, diagnostic and trace

        Raises:
            TaskIntegrityError: If the graph has no start node
        """
        start = graph.start_node()
        if start is None:
            raise TaskIntegrityError(graph.name, ["no variable node in layout"])

        trace: List[str] = [start.node_id]
        current = start
        for stage in range(1, len(expected_path)):
            outgoing = connections.find_from_node(current.node_id)
            if not outgoing:
                result = self._disconnected(start, current, stage, trace)
                logger.info(f"Validation failed at stage {stage}: {trace}")
                return result
            next_node = graph.get_node(outgoing[0].target_node)
            if next_node is None:
                raise TaskIntegrityError(graph.name, [f"wire targets unknown node '{outgoing[0].target_node}'"])
            trace.append(next_node.node_id)
            current = next_node

        if tuple(trace) == tuple(expected_path):
            logger.info(f"Validation passed: {trace}")
            return ValidationResult(True, DiagnosticCode.SUCCESS, SUCCESS_MESSAGE, tuple(trace))

        result = self._mismatch(start, graph.get_node(trace[1]), trace)
        logger.info(f"Validation failed ({result.code.value}): {trace} != {list(expected_path)}")
        return result

    def _disconnected(
        self,
        start: BlueprintNode,
        current: BlueprintNode,
        stage: int,
        trace: List[str]
    ) -> ValidationResult:
        if current is start:
            detail = f"variable '{start.content}' has no outgoing wire"
        else:
            detail = f"result of '{current.content or current.title}' is unused"
        return ValidationResult(
            False,
            DiagnosticCode.DISCONNECTED,
            f"error: disconnected at stage {stage}: {detail}",
            tuple(trace),
            stage,
        )

    def _mismatch(
        self,
        start: BlueprintNode,
        operator: Optional[BlueprintNode],
        trace: List[str]
    ) -> ValidationResult:
        is_pointer = payload_denotes_pointer(start.content)
        symbol = operator.content.strip() if operator else ""
        subject = _reference_subject(start.content)

        if symbol == ARROW_OPERATOR and not is_pointer:
            return ValidationResult(
                False,
                DiagnosticCode.NOT_A_POINTER,
                f"error: member reference {subject} is not a pointer",
                tuple(trace),
            )
        if symbol == DOT_OPERATOR and is_pointer:
            return ValidationResult(
                False,
                DiagnosticCode.IS_A_POINTER,
                f"error: member reference {subject} is a pointer",
                tuple(trace),
            )
        return ValidationResult(
            False,
            DiagnosticCode.INVALID_CONFIGURATION,
            INVALID_CONFIGURATION_MESSAGE,
            tuple(trace),
        )
