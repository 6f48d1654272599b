# -*- coding: utf-8 -*-
"""
Blueprint Tasks - Exercise content fed into the engine.
"""

from .models import PinTemplate, NodeTemplate, TaskTemplate, TaskIntegrityError
from .arrow_dot import ARROW_DOT_TASKS
from .catalog import TaskCatalog

__all__ = [
    "PinTemplate",
    "NodeTemplate",
    "TaskTemplate",
    "TaskIntegrityError",
    "ARROW_DOT_TASKS",
    "TaskCatalog",
]
