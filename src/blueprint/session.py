# -*- coding: utf-8 -*-
"""
Blueprint Session - Commands of the blueprint exercise.

The session owns one GraphStore, one ConnectionSet, the interaction
controller and the SessionContext. Presentation code calls the
commands and pointer methods, subscribes to the signals and draws
from snapshot().

Example:
    session = BlueprintSession()
    session.select_task(0)
    ...pointer events...
    result = session.attempt_validate()
    if result.passed:
        session.advance_to_next_task()
"""
from typing import Optional
from loguru import logger

from src.core.config import ConfigManager
from src.core.events import Signal

from .context import SessionContext, Status
from .core.connection import ConnectionSet, NodeConnection
from .core.graph import GraphStore
from .interaction.controller import InteractionController
from .scene import SceneSnapshot, build_scene
from .tasks.catalog import TaskCatalog
from .tasks.models import TaskTemplate
from .validation.path_validator import PathValidator, ValidationResult

CLEARED_MESSAGE = "Connections cleared."
COMPLETED_MESSAGE = "All tasks completed!"


class BlueprintSession:
    """
    One learner working through a task catalog.

    Attributes:
        config: Engine configuration
        catalog: Ordered tasks
        graph: Nodes of the active task
        connections: Wires of the active task
        context: Task index, score, status, gesture
        controller: Pointer state machine
        on_task_changed: Emitted with the new task index after select_task
    """

    def __init__(
        self,
        catalog: Optional[TaskCatalog] = None,
        config: Optional[ConfigManager] = None,
        validator: Optional[PathValidator] = None
    ):
        self.config = config or ConfigManager()
        if catalog is None:
            tasks_file = self.config.data.tasks_file
            catalog = TaskCatalog.from_file(tasks_file) if tasks_file else TaskCatalog.default()
        self.catalog = catalog
        self.validator = validator or PathValidator()

        self.graph = GraphStore()
        self.connections = ConnectionSet()
        self.context = SessionContext()
        self.controller = InteractionController(
            self.graph,
            self.connections,
            self.context,
            layout=self.config.data.layout,
            pin_hit_radius=self.config.data.interaction.pin_hit_radius,
        )
        self.on_task_changed = Signal("TaskChanged")
        self.config.on_changed.connect(self._on_config_changed)

        self.select_task(self.config.data.interaction.start_task)

    @property
    def current_task(self) -> TaskTemplate:
        return self.catalog[self.context.task_index]

    @property
    def on_status_changed(self) -> Signal:
        return self.context.on_status_changed

    @property
    def on_graph_changed(self) -> Signal:
        return self.controller.on_graph_changed

    # =========================================================================
    # Commands
    # =========================================================================

    def select_task(self, index: int) -> TaskTemplate:
        """
        Load a task, discarding all state of the previous one.

        Raises:
            IndexError: If index is outside the catalog
        """
        task = self.catalog[index]
        self.controller.cancel()
        self.graph.initialize_from_template(task)
        self.connections.clear()
        self.context.task_index = index
        self.context.finished = False
        self.context.set_status(Status.NEUTRAL, f"Task {index + 1}: {task.context}")
        logger.info(f"Selected task {task.id} ({index + 1}/{len(self.catalog)})")
        self.on_task_changed.emit(index)
        self.on_graph_changed.emit()
        return task

    def clear_connections(self) -> None:
        """Remove every wire of the active task."""
        self.connections.clear()
        self.context.set_status(Status.NEUTRAL, CLEARED_MESSAGE)
        self.on_graph_changed.emit()

    def attempt_validate(self) -> ValidationResult:
        """Grade the current wiring and report it on the console."""
        task = self.current_task
        result = self.validator.validate(self.graph, self.connections, task.expected_path)
        if result.passed:
            if self.context.record_solved(task.id):
                logger.info(f"Task {task.id} solved, score={self.context.score}")
            self.context.set_status(Status.SUCCESS, result.message)
        else:
            self.context.set_status(Status.ERROR, result.message)
        return result

    def advance_to_next_task(self) -> bool:
        """
        Move to the next task once the current one has passed.

        Returns:
            True if a new task was selected
        """
        if not self.context.can_advance:
            logger.warning("Advance requested before the current task passed")
            return False
        if self.context.task_index + 1 < len(self.catalog):
            self.select_task(self.context.task_index + 1)
            return True
        self.context.finished = True
        self.context.set_status(Status.SUCCESS, COMPLETED_MESSAGE)
        logger.info("All tasks completed")
        return False

    # =========================================================================
    # Pointer Events
    # =========================================================================

    def pointer_down(self, x: float, y: float) -> None:
        self.controller.pointer_down(x, y)

    def pointer_move(self, x: float, y: float) -> None:
        self.controller.pointer_move(x, y)

    def pointer_up(self, x: float, y: float) -> Optional[NodeConnection]:
        return self.controller.pointer_up(x, y)

    # =========================================================================
    # Presentation
    # =========================================================================

    def snapshot(self) -> SceneSnapshot:
        """Drawable state after the last mutation."""
        return build_scene(
            self.current_task,
            self.graph,
            self.connections,
            self.context,
            self.controller.layout,
            self.controller.pending_wire(),
        )

    def _on_config_changed(self, section: str, key: str, value) -> None:
        if section == "layout":
            self.controller.layout = self.config.data.layout
        elif section == "interaction" and key == "pin_hit_radius":
            self.controller.pin_hit_radius = value

    def __repr__(self) -> str:
        return (
            f"<BlueprintSession task={self.context.task_index} "
            f"status={self.context.status.value} score={self.context.score}>"
        )
