import pytest

from src.core.config import ConfigManager, LayoutSettings
from src.blueprint.session import BlueprintSession
from src.blueprint.core.connection import ConnectionSet
from src.blueprint.core.geometry import pin_anchor
from src.blueprint.core.graph import GraphStore
from src.blueprint.core.pins import PinDirection
from src.blueprint.tasks.arrow_dot import ARROW_DOT_TASKS


@pytest.fixture
def layout():
    return LayoutSettings()


@pytest.fixture
def object_task():
    """Task 1: `Player p1`, solved through the dot operator."""
    return ARROW_DOT_TASKS[0]


@pytest.fixture
def pointer_task():
    """Task 2: `Player* ptr`, solved through the arrow operator."""
    return ARROW_DOT_TASKS[1]


@pytest.fixture
def graph(object_task):
    store = GraphStore()
    store.initialize_from_template(object_task)
    return store


@pytest.fixture
def connections():
    return ConnectionSet()


@pytest.fixture
def session():
    """Fresh in-memory session on the built-in catalog, task 1 selected."""
    return BlueprintSession(config=ConfigManager())


@pytest.fixture
def pin_point():
    """Absolute coordinate of a pin in a session's current layout."""
    def _pin_point(session, node_id, pin_id, is_input):
        direction = PinDirection.INPUT if is_input else PinDirection.OUTPUT
        node = session.graph.get_node(node_id)
        return pin_anchor(node, pin_id, direction, session.controller.layout)
    return _pin_point


@pytest.fixture
def wire(pin_point):
    """Drag a wire from source's 'out' pin to target's 'in' pin."""
    def _wire(session, source, target, reverse=False):
        start = pin_point(session, source, "out", False)
        end = pin_point(session, target, "in", True)
        if reverse:
            start, end = end, start
        session.pointer_down(*start)
        session.pointer_move((start.x + end.x) / 2, (start.y + end.y) / 2)
        return session.pointer_up(*end)
    return _wire
