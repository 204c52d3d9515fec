"""Tool executor for MCP tools using the task list and comment managers."""

from typing import Any

from .client import PlankaClient
from .comments import CommentManager
from .tasks import TaskManager
from .tool_schemas import TOOLS


def _get_required_params(tool_name: str) -> list[str]:
    """Get required parameters for a tool from its schema."""
    for tool in TOOLS:
        if tool["name"] == tool_name:
            return tool["input_schema"].get("required", [])
    return []


def _validate_tool_input(tool_name: str, tool_input: dict[str, Any]) -> None:
    """Validate that all required parameters are present.

    Raises:
        ValueError: If a required parameter is missing
    """
    required = _get_required_params(tool_name)
    missing = [param for param in required if param not in tool_input]
    if missing:
        raise ValueError(f"Missing required parameter(s): {', '.join(missing)}")


class ToolExecutor:
    """Executes tool calls using the task list and comment managers."""

    def __init__(self, client: PlankaClient):
        """Initialize with a configured API client."""
        self.client = client
        self.tasks = TaskManager(client)
        self.comments = CommentManager(client)

    def execute(self, tool_name: str, tool_input: dict[str, Any]) -> Any:  # noqa: C901
        """
        Execute a tool call and return the result.

        Args:
            tool_name: Name of the tool to execute
            tool_input: Input parameters for the tool

        Returns:
            Result from the manager call

        Raises:
            ValueError: If tool_name is not recognized or required params missing
        """
        # Validate required parameters before executing
        _validate_tool_input(tool_name, tool_input)

        match tool_name:
            case "create_task_list":
                return self.tasks.create_task_list(
                    card_id=tool_input["card_id"],
                    name=tool_input["name"],
                    position=tool_input.get("position"),
                )

            case "batch_create_task_lists":
                return self.tasks.batch_create_task_lists(tool_input["tasks"])

            case "get_task_lists":
                return self.tasks.list_task_lists(tool_input["card_id"])

            case "get_task_list":
                return self.tasks.get_task_list(
                    tool_input["task_list_id"],
                    card_id=tool_input.get("card_id"),
                )

            case "update_task_list":
                return self.tasks.update_task_list(
                    tool_input["task_list_id"],
                    name=tool_input.get("name"),
                    position=tool_input.get("position"),
                )

            case "delete_task_list":
                return self.tasks.delete_task_list(tool_input["task_list_id"])

            case "create_task_list_with_tasks":
                return self.tasks.create_task_list_with_tasks(
                    card_id=tool_input["card_id"],
                    name=tool_input["name"],
                    tasks=tool_input["tasks"],
                    rollback_on_failure=tool_input.get("rollback_on_failure", False),
                )

            case "create_task":
                return self.tasks.create_task(
                    task_list_id=tool_input["task_list_id"],
                    name=tool_input["name"],
                    position=tool_input.get("position"),
                    is_completed=tool_input.get("is_completed", False),
                )

            case "update_task":
                return self.tasks.update_task(
                    tool_input["task_id"],
                    name=tool_input.get("name"),
                    position=tool_input.get("position"),
                    is_completed=tool_input.get("is_completed"),
                )

            case "delete_task":
                return self.tasks.delete_task(tool_input["task_id"])

            case "create_comment":
                return self.comments.create_comment(
                    tool_input["card_id"],
                    tool_input["text"],
                )

            case "get_comments":
                return self.comments.list_comments(tool_input["card_id"])

            case "get_comment":
                return self.comments.get_comment(
                    tool_input["comment_id"],
                    tool_input["card_id"],
                )

            case "update_comment":
                return self.comments.update_comment(
                    tool_input["comment_id"],
                    tool_input["text"],
                )

            case "delete_comment":
                return self.comments.delete_comment(tool_input["comment_id"])

            case _:
                raise ValueError(f"Unknown tool: {tool_name}")
