import sys
from loguru import logger

from src.core.config import ConfigManager
from src.core.logging import setup_logging
from src.blueprint import BlueprintSession
from src.blueprint.core.geometry import pin_anchor
from src.blueprint.core.pins import PinDirection


def drag_wire(session: BlueprintSession, source: str, target: str):
    """Pull a wire from source's output pin to target's input pin."""
    layout = session.controller.layout
    start = pin_anchor(session.graph.get_node(source), "out", PinDirection.OUTPUT, layout)
    end = pin_anchor(session.graph.get_node(target), "in", PinDirection.INPUT, layout)
    session.pointer_down(*start)
    session.pointer_move((start.x + end.x) / 2, (start.y + end.y) / 2)
    return session.pointer_up(*end)


def drag_node(session: BlueprintSession, node_id: str, dx: float, dy: float):
    """Grab a node by its header and move it by (dx, dy)."""
    x, y = session.graph.get_node(node_id).position
    session.pointer_down(x + 10, y + 10)
    session.pointer_move(x + 10 + dx, y + 10 + dy)
    session.pointer_up(x + 10 + dx, y + 10 + dy)


def main(config_path: str = None):
    config = ConfigManager(config_path)
    setup_logging(
        config.data.general.debug_mode,
        log_dir=config.data.logging.log_dir,
        rotation=config.data.logging.rotation,
        retention=config.data.logging.retention,
    )

    session = BlueprintSession(config=config)
    session.on_status_changed.connect(
        lambda status, message: print(f"[{status.value}] {message}")
    )

    print("--- 1. Wrong operator on an object ---")
    session.select_task(0)
    drag_wire(session, "node-var", "node-arrow")
    drag_wire(session, "node-arrow", "node-mem")
    session.attempt_validate()

    print("--- 2. Rewire through the dot operator ---")
    session.clear_connections()
    drag_node(session, "node-dot", 0, 40)
    drag_wire(session, "node-var", "node-dot")
    drag_wire(session, "node-dot", "node-mem")
    result = session.attempt_validate()
    print(f"Trace: {' -> '.join(result.trace)}")

    print("--- 3. Next task ---")
    session.advance_to_next_task()
    session.attempt_validate()
    session.clear_connections()

    snapshot = session.snapshot()
    print(f"Score: {snapshot.score}, nodes: {len(snapshot.nodes)}, wires: {len(snapshot.wires)}")
    logger.info("Demo finished")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else None))
