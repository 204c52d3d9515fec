"""
Planka Client - task list, task and comment tools for the Planka kanban API.
"""

from .client import PlankaAPIError, PlankaClient
from .comments import CommentManager
from .exceptions import (
    EntityNotFoundError,
    MissingContextError,
    PartialCreationError,
    PlankaOperationError,
)
from .logging_config import configure_logging
from .models import CommentAction, Task, TaskList
from .tasks import DEFAULT_POSITION, TaskManager
from .tool_executor import ToolExecutor
from .tool_schemas import TOOLS

__all__ = [
    "PlankaClient",
    "PlankaAPIError",
    "PlankaOperationError",
    "MissingContextError",
    "EntityNotFoundError",
    "PartialCreationError",
    "TaskManager",
    "CommentManager",
    "TaskList",
    "Task",
    "CommentAction",
    "DEFAULT_POSITION",
    "TOOLS",
    "ToolExecutor",
    "configure_logging",
]
__version__ = "1.0.0"
