# -*- coding: utf-8 -*-
"""
Arrow vs Dot - Built-in member access exercises.

Every task offers the same three target nodes (dot operator, arrow
operator, struct member) and varies the start expression. The learner
wires start → operator → member; only the operator matching the
expression's pointer-ness compiles.
"""
from typing import Tuple

from ..core.base_node import NodeKind
from ..core.pins import PinType
from .models import NodeTemplate, PinTemplate, TaskTemplate

OBJECT_COLOR = "#3b82f6"
POINTER_COLOR = "#8b5cf6"
MEMBER_COLOR = "#10b981"

NODE_OP_DOT = NodeTemplate(
    id="node-dot", kind=NodeKind.OPERATOR, title="Dot Operator",
    x=250, y=50, color=OBJECT_COLOR, content=".",
    inputs=(PinTemplate(id="in", label="Object", type=PinType.OBJECT),),
    outputs=(PinTemplate(id="out", label="Member", type=PinType.MEMBER),),
)

NODE_OP_ARROW = NodeTemplate(
    id="node-arrow", kind=NodeKind.OPERATOR, title="Arrow Operator",
    x=250, y=250, color=POINTER_COLOR, content="->",
    inputs=(PinTemplate(id="in", label="Pointer", type=PinType.POINTER),),
    outputs=(PinTemplate(id="out", label="Member", type=PinType.MEMBER),),
)

NODE_MEMBER = NodeTemplate(
    id="node-mem", kind=NodeKind.MEMBER, title="Struct Member",
    x=500, y=150, color=MEMBER_COLOR, content="int hp",
    inputs=(PinTemplate(id="in", label="Access", type=PinType.MEMBER),),
)


def _start_node(title: str, content: str, is_pointer: bool) -> NodeTemplate:
    pin_type = PinType.POINTER if is_pointer else PinType.OBJECT
    return NodeTemplate(
        id="node-var", kind=NodeKind.VARIABLE, title=title,
        x=20, y=150, color=POINTER_COLOR if is_pointer else OBJECT_COLOR, content=content,
        outputs=(PinTemplate(id="out", label=pin_type.display_name, type=pin_type),),
    )


def _task(task_id: int, context: str, start: NodeTemplate, operator: str, explanation: str) -> TaskTemplate:
    return TaskTemplate(
        id=task_id,
        context=context,
        nodes=(start, NODE_OP_DOT, NODE_OP_ARROW, NODE_MEMBER),
        expected_path=("node-var", operator, "node-mem"),
        explanation=explanation,
    )


ARROW_DOT_TASKS: Tuple[TaskTemplate, ...] = (
    _task(
        1,
        "You have an object `p1` (not a pointer). Connect the nodes to reach `hp`.",
        _start_node("Variable", "Player p1", is_pointer=False),
        "node-dot",
        "Objects use the dot (.) to access their fields.",
    ),
    _task(
        2,
        "You have a pointer `ptr`. How do you get to `hp`?",
        _start_node("Pointer Variable", "Player* ptr", is_pointer=True),
        "node-arrow",
        "Pointers need the arrow (->) to access fields. It is shorthand for (*ptr).",
    ),
    _task(
        3,
        "We dereferenced the pointer `(*ptr)`. That turns the address back into an object. "
        "Which operator is needed now?",
        _start_node("Expression", "(*ptr)", is_pointer=False),
        "node-dot",
        "(*ptr) yields the object itself. Objects take the dot (.).",
    ),
    _task(
        4,
        "Accessing the array element `team[0]`. The array stores Player objects.",
        _start_node("Array Element", "team[0]", is_pointer=False),
        "node-dot",
        "The [] operator returns a reference to the object in the array. Use the dot.",
    ),
    _task(
        5,
        "Inside a class method we use `this`. It is a pointer to the current object.",
        _start_node("Keyword", "this", is_pointer=True),
        "node-arrow",
        "`this` in C++ is always a pointer. The arrow is required.",
    ),
)
