# -*- coding: utf-8 -*-
"""
TaskCatalog - Ordered task list with lookup by index.

Tasks come from the built-in arrow/dot set or from an external task
pack file (JSON or TOML) holding either a list of tasks or a
{"tasks": [...]} table.

Example:
    catalog = TaskCatalog.default()
    first = catalog[0]

    catalog = TaskCatalog.from_file("tasks/arrow_dot.json")
"""
from pathlib import Path
from typing import Iterator, List, Sequence, Union
import json
from loguru import logger

from .arrow_dot import ARROW_DOT_TASKS
from .models import TaskIntegrityError, TaskTemplate


class TaskCatalog:
    """
    Immutable, ordered collection of TaskTemplates.

    Raises:
        ValueError: If constructed with no tasks
        TaskIntegrityError: If two tasks share an id
    """

    def __init__(self, tasks: Sequence[TaskTemplate]):
        if not tasks:
            raise ValueError("Task catalog is empty")
        ids = [task.id for task in tasks]
        duplicates = sorted({tid for tid in ids if ids.count(tid) > 1})
        if duplicates:
            raise TaskIntegrityError(duplicates[0], [f"duplicate task ids {duplicates}"])
        self._tasks = tuple(tasks)

    @classmethod
    def default(cls) -> 'TaskCatalog':
        """The built-in arrow vs dot exercises."""
        return cls(ARROW_DOT_TASKS)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'TaskCatalog':
        """
        Load a task pack.

        Raises:
            pydantic.ValidationError: If an entry does not match the schema
            TaskIntegrityError: If an entry is self-inconsistent
        """
        path = Path(path)
        if path.suffix == ".toml":
            import tomllib
            with open(path, "rb") as f:
                raw = tomllib.load(f)
        else:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)

        entries = raw.get("tasks", []) if isinstance(raw, dict) else raw
        tasks = [TaskTemplate.model_validate(entry) for entry in entries]
        logger.info(f"Loaded {len(tasks)} tasks from {path}")
        return cls(tasks)

    def get(self, index: int) -> TaskTemplate:
        """
        Task at a position.

        Raises:
            IndexError: If index is outside the catalog
        """
        if not 0 <= index < len(self._tasks):
            raise IndexError(f"Task index {index} out of range (0..{len(self._tasks) - 1})")
        return self._tasks[index]

    def __getitem__(self, index: int) -> TaskTemplate:
        return self.get(index)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[TaskTemplate]:
        return iter(self._tasks)

    @property
    def tasks(self) -> List[TaskTemplate]:
        return list(self._tasks)
