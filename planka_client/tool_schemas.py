"""MCP tool schema definitions for the Planka task list and comment tools.

This module contains only the tool definitions (pure data, no imports)
so it can be shared without circular dependencies.
"""

_TASK_LIST_ITEM = {
    "type": "object",
    "properties": {
        "card_id": {
            "type": "string",
            "description": "The id of the card to add the task list to",
        },
        "name": {
            "type": "string",
            "description": "Name of the task list",
        },
        "position": {
            "type": "number",
            "description": "Sort position (optional, defaults to 65535 times the item's 1-based index)",
        },
    },
    "required": ["card_id", "name"],
}

# Tool definitions for MCP
TOOLS = [
    # Task lists
    {
        "name": "create_task_list",
        "description": "Create a task list (checklist) on a card, e.g. 'Testing Checklist'. Use create_task to add items to it.",
        "input_schema": {
            "type": "object",
            "properties": {
                "card_id": {
                    "type": "string",
                    "description": "The id of the card",
                },
                "name": {
                    "type": "string",
                    "description": "Name of the task list",
                },
                "position": {
                    "type": "number",
                    "description": "Sort position (optional, default 65535)",
                },
            },
            "required": ["card_id", "name"],
        },
    },
    {
        "name": "batch_create_task_lists",
        "description": "Create several task lists in one call, in the given order. Failed items are reported in 'failures' without stopping the batch.",
        "input_schema": {
            "type": "object",
            "properties": {
                "tasks": {
                    "type": "array",
                    "items": _TASK_LIST_ITEM,
                    "description": "Task lists to create",
                },
            },
            "required": ["tasks"],
        },
    },
    {
        "name": "get_task_lists",
        "description": "Get all task lists of a card. Returns an empty list if the card has none.",
        "input_schema": {
            "type": "object",
            "properties": {
                "card_id": {
                    "type": "string",
                    "description": "The id of the card",
                },
            },
            "required": ["card_id"],
        },
    },
    {
        "name": "get_task_list",
        "description": "Get a single task list. card_id is required unless the task list was created in this session.",
        "input_schema": {
            "type": "object",
            "properties": {
                "task_list_id": {
                    "type": "string",
                    "description": "The id of the task list",
                },
                "card_id": {
                    "type": "string",
                    "description": "The id of the card holding the task list (optional)",
                },
            },
            "required": ["task_list_id"],
        },
    },
    {
        "name": "update_task_list",
        "description": "Rename or reposition a task list.",
        "input_schema": {
            "type": "object",
            "properties": {
                "task_list_id": {
                    "type": "string",
                    "description": "The id of the task list",
                },
                "name": {
                    "type": "string",
                    "description": "New name (optional)",
                },
                "position": {
                    "type": "number",
                    "description": "New position (optional)",
                },
            },
            "required": ["task_list_id"],
        },
    },
    {
        "name": "delete_task_list",
        "description": "Delete a task list and all of its tasks.",
        "input_schema": {
            "type": "object",
            "properties": {
                "task_list_id": {
                    "type": "string",
                    "description": "The id of the task list",
                },
            },
            "required": ["task_list_id"],
        },
    },
    {
        "name": "create_task_list_with_tasks",
        "description": "Create a task list and its tasks in one call. Tasks keep the given order. Not transactional: if a task fails, the task list and earlier tasks remain unless rollback_on_failure is true.",
        "input_schema": {
            "type": "object",
            "properties": {
                "card_id": {
                    "type": "string",
                    "description": "The id of the card",
                },
                "name": {
                    "type": "string",
                    "description": "Name of the task list",
                },
                "tasks": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "name": {"type": "string", "description": "Task name"},
                            "is_completed": {
                                "type": "boolean",
                                "description": "Whether the task starts completed (optional, default false)",
                            },
                        },
                        "required": ["name"],
                    },
                    "description": "Tasks to add, in order",
                },
                "rollback_on_failure": {
                    "type": "boolean",
                    "description": "Delete the task list again if any task fails (optional, default false)",
                },
            },
            "required": ["card_id", "name", "tasks"],
        },
    },
    # Tasks
    {
        "name": "create_task",
        "description": "Add a checkable task to an existing task list.",
        "input_schema": {
            "type": "object",
            "properties": {
                "task_list_id": {
                    "type": "string",
                    "description": "The id of the task list",
                },
                "name": {
                    "type": "string",
                    "description": "Task name",
                },
                "position": {
                    "type": "number",
                    "description": "Sort position (optional, default 65535)",
                },
                "is_completed": {
                    "type": "boolean",
                    "description": "Whether the task starts completed (optional, default false)",
                },
            },
            "required": ["task_list_id", "name"],
        },
    },
    {
        "name": "update_task",
        "description": "Rename, reposition, complete or reopen a task.",
        "input_schema": {
            "type": "object",
            "properties": {
                "task_id": {
                    "type": "string",
                    "description": "The id of the task",
                },
                "name": {
                    "type": "string",
                    "description": "New name (optional)",
                },
                "position": {
                    "type": "number",
                    "description": "New position (optional)",
                },
                "is_completed": {
                    "type": "boolean",
                    "description": "Completion state (optional)",
                },
            },
            "required": ["task_id"],
        },
    },
    {
        "name": "delete_task",
        "description": "Delete a task from its task list.",
        "input_schema": {
            "type": "object",
            "properties": {
                "task_id": {
                    "type": "string",
                    "description": "The id of the task",
                },
            },
            "required": ["task_id"],
        },
    },
    # Comments
    {
        "name": "create_comment",
        "description": "Add a comment to a card.",
        "input_schema": {
            "type": "object",
            "properties": {
                "card_id": {
                    "type": "string",
                    "description": "The id of the card",
                },
                "text": {
                    "type": "string",
                    "description": "Comment text (markdown supported)",
                },
            },
            "required": ["card_id", "text"],
        },
    },
    {
        "name": "get_comments",
        "description": "Get all comments on a card. Returns an empty list if none can be read.",
        "input_schema": {
            "type": "object",
            "properties": {
                "card_id": {
                    "type": "string",
                    "description": "The id of the card",
                },
            },
            "required": ["card_id"],
        },
    },
    {
        "name": "get_comment",
        "description": "Get a single comment. Planka has no direct comment lookup, so the card id is required.",
        "input_schema": {
            "type": "object",
            "properties": {
                "comment_id": {
                    "type": "string",
                    "description": "The id of the comment",
                },
                "card_id": {
                    "type": "string",
                    "description": "The id of the card holding the comment",
                },
            },
            "required": ["comment_id", "card_id"],
        },
    },
    {
        "name": "update_comment",
        "description": "Replace the text of a comment.",
        "input_schema": {
            "type": "object",
            "properties": {
                "comment_id": {
                    "type": "string",
                    "description": "The id of the comment",
                },
                "text": {
                    "type": "string",
                    "description": "New comment text",
                },
            },
            "required": ["comment_id", "text"],
        },
    },
    {
        "name": "delete_comment",
        "description": "Delete a comment.",
        "input_schema": {
            "type": "object",
            "properties": {
                "comment_id": {
                    "type": "string",
                    "description": "The id of the comment",
                },
            },
            "required": ["comment_id"],
        },
    },
]
