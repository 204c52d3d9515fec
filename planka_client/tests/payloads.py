"""Sample Planka API payloads for tests."""


def task_list_payload(task_list_id="tl-1", name="Testing", position=65535, card_id="card-1"):
    return {"id": task_list_id, "name": name, "position": position, "cardId": card_id}


def task_payload(task_id="task-1", name="Verify", position=65535, is_completed=False, task_list_id="tl-1"):
    return {
        "id": task_id,
        "name": name,
        "position": position,
        "isCompleted": is_completed,
        "taskListId": task_list_id,
    }


def comment_payload(comment_id="comment-1", text="Looks good", card_id="card-1"):
    return {
        "id": comment_id,
        "type": "commentCard",
        "data": {"text": text},
        "cardId": card_id,
        "userId": "user-1",
        "createdAt": "2024-05-01T10:00:00.000Z",
        "updatedAt": None,
    }
