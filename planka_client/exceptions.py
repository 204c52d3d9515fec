"""Errors raised by the task list and comment managers."""

from typing import Any


class PlankaOperationError(Exception):
    """A manager operation failed.

    The message reads "Failed to <operation>: <cause>" and the underlying
    exception, if any, is chained as ``__cause__``.
    """

    def __init__(self, message: str, operation: str | None = None):
        self.message = message
        self.operation = operation
        super().__init__(message)

    @classmethod
    def wrap(cls, operation: str, error: BaseException) -> "PlankaOperationError":
        """Build an error for ``operation`` that quotes ``error``."""
        return cls(f"Failed to {operation}: {error}", operation=operation)


class MissingContextError(PlankaOperationError):
    """A task list or comment cannot be addressed without its card id."""


class EntityNotFoundError(PlankaOperationError):
    """No entity with the requested id exists in the searched card."""


class PartialCreationError(PlankaOperationError):
    """A task list was created but not all of its tasks were.

    Attributes:
        task_list: The task list that was created
        tasks: Tasks created before the failure, in input order
        rolled_back: True if the task list was deleted again
    """

    def __init__(
        self,
        message: str,
        task_list: dict[str, Any],
        tasks: list[dict[str, Any]],
        rolled_back: bool = False,
        operation: str | None = None,
    ):
        super().__init__(message, operation=operation)
        self.task_list = task_list
        self.tasks = tasks
        self.rolled_back = rolled_back
