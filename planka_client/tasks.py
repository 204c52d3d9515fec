"""
Task list and task operations.

Terminology:
    Task list: a checklist on a card (e.g., "Testing Checklist")
    Task: a checkable item within a task list (e.g., "Verify rate limiting")

Planka has no endpoint for reading a single task list. Task lists are read
from the card they belong to, so the manager remembers which card each task
list it created lives on.
"""

import logging
from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .client import PlankaAPIError, PlankaClient
from .exceptions import (
    EntityNotFoundError,
    MissingContextError,
    PartialCreationError,
    PlankaOperationError,
)
from .models import ItemResponse, Task, TaskList

logger = logging.getLogger(__name__)

DEFAULT_POSITION = 65535

# Field names Planka has used for the task lists embedded in a card response
CARD_TASK_LIST_KEYS = ("taskLists", "tasks")

_task_lists_adapter = TypeAdapter(list[TaskList])


def sequential_position(index: int) -> int:
    """Position for the item at zero-based ``index`` of an ordered batch."""
    return DEFAULT_POSITION * (index + 1)


def _task_lists_from_card(response: Any) -> list[dict[str, Any]] | None:
    """Pull the embedded task lists out of a card response.

    Returns None if the response carries no recognizable task list data.
    """
    if not isinstance(response, dict):
        return None
    included = response.get("included")
    if not isinstance(included, dict):
        return None
    for key in CARD_TASK_LIST_KEYS:
        task_lists = included.get(key)
        if isinstance(task_lists, list):
            return [task_list.to_dict() for task_list in _task_lists_adapter.validate_python(task_lists)]
    return None


class TaskManager:
    """Creates, reads, updates and deletes task lists and tasks on cards."""

    def __init__(self, client: PlankaClient, task_list_cards: MutableMapping[str, str] | None = None):
        """
        Args:
            client: Configured API client
            task_list_cards: Store mapping task list id to card id. Filled in
                as task lists are created; a fresh dict if not given.
        """
        self.client = client
        self.task_list_cards = task_list_cards if task_list_cards is not None else {}

    # =========================================================================
    # Task List Methods
    # =========================================================================

    def create_task_list(self, card_id: str, name: str, position: float | None = None) -> dict[str, Any]:
        """
        Create a task list on a card.

        Args:
            card_id: The id of the card
            name: Task list name
            position: Sort position (default: 65535)

        Returns:
            Created task list object

        Raises:
            PlankaOperationError: If the task list could not be created
        """
        if position is None:
            position = DEFAULT_POSITION

        try:
            response = self.client.request(
                f"/api/cards/{card_id}/task-lists",
                method="POST",
                body={"name": name, "position": position},
            )
            task_list = ItemResponse[TaskList].model_validate(response).item
        except (PlankaAPIError, ValidationError) as e:
            logger.error(f"Error creating task list on card {card_id}: {e}")
            raise PlankaOperationError.wrap("create task list", e) from e

        self.task_list_cards[task_list.id] = card_id
        return task_list.to_dict()

    def batch_create_task_lists(self, tasks: Iterable[Mapping[str, Any]]) -> dict[str, list[dict[str, Any]]]:
        """
        Create several task lists, one after another, in input order.

        Items without a position get 65535 * (index + 1) so they keep their
        relative order. A failed or malformed item is recorded and the batch
        carries on.

        Args:
            tasks: Items with 'card_id', 'name' and optional 'position'

        Returns:
            Dict with 'results' (one outcome per item, in input order),
            'successes' (created task lists) and 'failures' (index, task, error)

        Raises:
            PlankaOperationError: Only if the batch itself breaks down
        """
        results: list[dict[str, Any]] = []
        successes: list[dict[str, Any]] = []
        failures: list[dict[str, Any]] = []

        try:
            for index, item in enumerate(tasks):
                task = item
                try:
                    task = dict(item)
                    if task.get("position") is None:
                        task["position"] = sequential_position(index)
                    result = self.create_task_list(task["card_id"], task["name"], task["position"])
                except KeyError as e:
                    error = f"Failed to create task list: missing field {e}"
                except (PlankaOperationError, TypeError, ValueError) as e:
                    error = str(e)
                else:
                    results.append({"success": True, "result": result})
                    successes.append(result)
                    continue

                results.append({"success": False, "error": {"message": error}})
                failures.append({"index": index, "task": task, "error": error})
        except Exception as e:
            raise PlankaOperationError.wrap("batch create task lists", e) from e

        if failures:
            logger.warning(f"Batch created {len(successes)} task list(s), {len(failures)} failed")

        return {"results": results, "successes": successes, "failures": failures}

    def list_task_lists(self, card_id: str) -> list[dict[str, Any]]:
        """
        Get all task lists of a card.

        A card without task lists is normal, so this never raises: any
        failure yields an empty list.

        Args:
            card_id: The id of the card

        Returns:
            List of task list objects (possibly empty)
        """
        try:
            task_lists = _task_lists_from_card(self.client.get_card(card_id))
        except (PlankaAPIError, ValidationError) as e:
            logger.error(f"Error getting task lists for card {card_id}: {e}")
            return []
        return task_lists or []

    def get_task_list(self, task_list_id: str, card_id: str | None = None) -> dict[str, Any]:
        """
        Get a single task list.

        The card is taken from ``card_id`` or, failing that, from the task
        lists this manager created.

        Args:
            task_list_id: The id of the task list
            card_id: The id of the card holding the task list (optional)

        Returns:
            Task list object

        Raises:
            MissingContextError: If no card id is known for the task list
            EntityNotFoundError: If the card has no task list with that id
            PlankaOperationError: If the card's task lists cannot be read
        """
        operation = "get task list"
        card_id = card_id or self.task_list_cards.get(task_list_id)
        if not card_id:
            raise MissingContextError(
                f"Failed to {operation}: Card ID is required to get a task list. "
                "Either provide it directly or create the task list first.",
                operation=operation,
            )

        try:
            task_lists = _task_lists_from_card(self.client.get_card(card_id))
        except (PlankaAPIError, ValidationError) as e:
            logger.error(f"Error getting task list {task_list_id}: {e}")
            raise PlankaOperationError.wrap(operation, e) from e

        if task_lists is None:
            raise PlankaOperationError(
                f"Failed to {operation}: Failed to get task lists for card {card_id}",
                operation=operation,
            )

        for task_list in task_lists:
            if task_list["id"] == task_list_id:
                return task_list

        raise EntityNotFoundError(
            f"Failed to {operation}: Task list with ID {task_list_id} not found in card {card_id}",
            operation=operation,
        )

    def update_task_list(
        self,
        task_list_id: str,
        *,
        name: str | None = None,
        position: float | None = None,
    ) -> dict[str, Any]:
        """
        Update a task list's name and/or position.

        Args:
            task_list_id: The id of the task list
            name: New name (optional)
            position: New position (optional)

        Returns:
            Updated task list object
        """
        data = {}
        if name is not None:
            data["name"] = name
        if position is not None:
            data["position"] = position

        try:
            response = self.client.request(f"/api/task-lists/{task_list_id}", method="PATCH", body=data)
            return ItemResponse[TaskList].model_validate(response).item.to_dict()
        except (PlankaAPIError, ValidationError) as e:
            raise PlankaOperationError.wrap("update task list", e) from e

    def delete_task_list(self, task_list_id: str) -> dict[str, bool]:
        """
        Delete a task list. Planka deletes its tasks along with it.

        Args:
            task_list_id: The id of the task list

        Returns:
            {"success": True}
        """
        try:
            self.client.request(f"/api/task-lists/{task_list_id}", method="DELETE")
        except PlankaAPIError as e:
            raise PlankaOperationError.wrap("delete task list", e) from e
        return {"success": True}

    # =========================================================================
    # Task Methods
    # =========================================================================

    def create_task(
        self,
        task_list_id: str,
        name: str,
        position: float | None = None,
        is_completed: bool = False,
    ) -> dict[str, Any]:
        """
        Create a task inside an existing task list.

        Args:
            task_list_id: The id of the task list
            name: Task name
            position: Sort position (default: 65535)
            is_completed: Initial completion state (default: False)

        Returns:
            Created task object
        """
        if position is None:
            position = DEFAULT_POSITION

        try:
            response = self.client.request(
                f"/api/task-lists/{task_list_id}/tasks",
                method="POST",
                body={"name": name, "position": position, "isCompleted": is_completed},
            )
            return ItemResponse[Task].model_validate(response).item.to_dict()
        except (PlankaAPIError, ValidationError) as e:
            logger.error(f"Error creating task in task list {task_list_id}: {e}")
            raise PlankaOperationError.wrap("create task in task list", e) from e

    def update_task(
        self,
        task_id: str,
        *,
        name: str | None = None,
        position: float | None = None,
        is_completed: bool | None = None,
    ) -> dict[str, Any]:
        """
        Update a task's name, position and/or completion state.

        Args:
            task_id: The id of the task
            name: New name (optional)
            position: New position (optional)
            is_completed: Completion state (optional)

        Returns:
            Updated task object
        """
        data = {}
        if name is not None:
            data["name"] = name
        if position is not None:
            data["position"] = position
        if is_completed is not None:
            data["isCompleted"] = is_completed

        try:
            response = self.client.request(f"/api/tasks/{task_id}", method="PATCH", body=data)
            return ItemResponse[Task].model_validate(response).item.to_dict()
        except (PlankaAPIError, ValidationError) as e:
            raise PlankaOperationError.wrap("update task", e) from e

    def delete_task(self, task_id: str) -> dict[str, bool]:
        """
        Delete a task.

        Args:
            task_id: The id of the task

        Returns:
            {"success": True}
        """
        try:
            self.client.request(f"/api/tasks/{task_id}", method="DELETE")
        except PlankaAPIError as e:
            raise PlankaOperationError.wrap("delete task", e) from e
        return {"success": True}

    # =========================================================================
    # Compound Methods
    # =========================================================================

    def create_task_list_with_tasks(
        self,
        card_id: str,
        name: str,
        tasks: Iterable[Mapping[str, Any]],
        rollback_on_failure: bool = False,
    ) -> dict[str, Any]:
        """
        Create a task list and fill it with tasks, in input order.

        This is not transactional. If a task fails, the task list and the
        tasks created so far stay on the board unless ``rollback_on_failure``
        is set, in which case the task list is deleted again.

        Args:
            card_id: The id of the card
            name: Task list name
            tasks: Items with 'name' and optional 'is_completed'
            rollback_on_failure: Delete the task list if a task fails (default: False)

        Returns:
            Dict with 'task_list' and the created 'tasks'

        Raises:
            PlankaOperationError: If a task has no name (checked before any
                request) or the task list could not be created
            PartialCreationError: If a task could not be created
        """
        operation = "create task list with tasks"
        tasks = list(tasks)
        for index, task in enumerate(tasks):
            if not isinstance(task, Mapping) or "name" not in task:
                raise PlankaOperationError(
                    f"Failed to {operation}: task {index} has no name",
                    operation=operation,
                )

        try:
            task_list = self.create_task_list(card_id, name)
        except PlankaOperationError as e:
            raise PlankaOperationError.wrap(operation, e) from e

        created: list[dict[str, Any]] = []
        for index, task in enumerate(tasks):
            try:
                created.append(
                    self.create_task(
                        task_list["id"],
                        task["name"],
                        position=sequential_position(index),
                        is_completed=bool(task.get("is_completed", False)),
                    )
                )
            except PlankaOperationError as e:
                logger.error(f"Error creating task {index} of task list {task_list['id']}: {e}")
                rolled_back = rollback_on_failure and self._rollback_task_list(task_list["id"])
                raise PartialCreationError(
                    f"Failed to {operation}: {e}",
                    task_list=task_list,
                    tasks=created,
                    rolled_back=rolled_back,
                    operation=operation,
                ) from e

        return {"task_list": task_list, "tasks": created}

    def _rollback_task_list(self, task_list_id: str) -> bool:
        try:
            self.delete_task_list(task_list_id)
        except PlankaOperationError as e:
            logger.error(f"Could not roll back task list {task_list_id}: {e}")
            return False
        logger.info(f"Rolled back task list {task_list_id}")
        return True
