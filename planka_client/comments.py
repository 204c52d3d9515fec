"""
Comment operations.

Planka stores card comments as "commentCard" actions and has no endpoint
for reading a single comment, so one is found by scanning its card's
comments.
"""

import logging
from collections.abc import Callable
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .client import PlankaAPIError, PlankaClient
from .exceptions import EntityNotFoundError, MissingContextError, PlankaOperationError
from .models import CommentAction, ItemResponse, ItemsResponse

logger = logging.getLogger(__name__)

_comment_list_adapter = TypeAdapter(list[CommentAction])


def _parse_envelope(response: Any) -> list[CommentAction]:
    return ItemsResponse[CommentAction].model_validate(response).items


def _parse_bare_list(response: Any) -> list[CommentAction]:
    return _comment_list_adapter.validate_python(response)


# Planka has answered with both shapes; tried in order, first match wins
COMMENT_LIST_PARSERS: tuple[Callable[[Any], list[CommentAction]], ...] = (
    _parse_envelope,
    _parse_bare_list,
)


def parse_comment_list(response: Any) -> list[CommentAction]:
    """Parse a comment list response with the first parser that accepts it.

    Raises:
        ValueError: If no parser accepts the response
    """
    for parser in COMMENT_LIST_PARSERS:
        try:
            return parser(response)
        except ValidationError:
            continue
    raise ValueError(f"Could not parse comments response: {response!r}")


class CommentManager:
    """Creates, reads, updates and deletes comments on cards."""

    def __init__(self, client: PlankaClient):
        self.client = client

    def create_comment(self, card_id: str, text: str) -> dict[str, Any]:
        """
        Add a comment to a card.

        Args:
            card_id: The id of the card
            text: Comment text

        Returns:
            Created comment action with id, type, data.text, cardId, userId,
            createdAt and updatedAt

        Example:
            >>> comment = comments.create_comment("1234567890", "Looks good")
            >>> print(comment["data"]["text"])
        """
        try:
            response = self.client.request(f"/api/cards/{card_id}/comments", method="POST", body={"text": text})
            return ItemResponse[CommentAction].model_validate(response).item.to_dict()
        except (PlankaAPIError, ValidationError) as e:
            raise PlankaOperationError.wrap("create comment", e) from e

    def list_comments(self, card_id: str) -> list[dict[str, Any]]:
        """
        Get all comments on a card.

        Never raises: a failed request or an unrecognized response yields an
        empty list.

        Args:
            card_id: The id of the card

        Returns:
            List of comment actions (possibly empty)
        """
        try:
            response = self.client.request(f"/api/cards/{card_id}/comments")
            comments = parse_comment_list(response)
        except (PlankaAPIError, ValueError) as e:
            logger.warning(f"Could not get comments for card {card_id}: {e}")
            return []
        return [comment.to_dict() for comment in comments]

    def get_comment(self, comment_id: str, card_id: str) -> dict[str, Any]:
        """
        Get a single comment.

        Args:
            comment_id: The id of the comment
            card_id: The id of the card holding the comment (required)

        Returns:
            Comment action

        Raises:
            MissingContextError: If card_id is empty
            EntityNotFoundError: If the card has no comment with that id
        """
        operation = "get comment"
        if not card_id:
            raise MissingContextError(
                f"Failed to {operation}: Card ID is required to get a comment",
                operation=operation,
            )

        for comment in self.list_comments(card_id):
            if comment["id"] == comment_id:
                return comment

        raise EntityNotFoundError(
            f"Failed to {operation}: Comment with ID {comment_id} not found in card {card_id}",
            operation=operation,
        )

    def update_comment(self, comment_id: str, text: str) -> dict[str, Any]:
        """
        Change a comment's text.

        Args:
            comment_id: The id of the comment
            text: New comment text

        Returns:
            Updated comment action
        """
        try:
            response = self.client.request(f"/api/comments/{comment_id}", method="PATCH", body={"text": text})
            return ItemResponse[CommentAction].model_validate(response).item.to_dict()
        except (PlankaAPIError, ValidationError) as e:
            raise PlankaOperationError.wrap("update comment", e) from e

    def delete_comment(self, comment_id: str) -> dict[str, bool]:
        """
        Delete a comment.

        Args:
            comment_id: The id of the comment

        Returns:
            {"success": True}
        """
        try:
            self.client.request(f"/api/comments/{comment_id}", method="DELETE")
        except PlankaAPIError as e:
            raise PlankaOperationError.wrap("delete comment", e) from e
        return {"success": True}
