"""Tests for the comment manager."""

import pytest
from payloads import comment_payload

from planka_client.client import PlankaAPIError
from planka_client.comments import CommentManager, parse_comment_list
from planka_client.exceptions import EntityNotFoundError, MissingContextError, PlankaOperationError


@pytest.fixture
def manager(mock_client):
    return CommentManager(mock_client)


class TestCreateComment:
    """Tests for create_comment."""

    def test_posts_text(self, manager, mock_client):
        mock_client.request.return_value = {"item": comment_payload(text="Hello")}

        result = manager.create_comment("card-1", "Hello")

        mock_client.request.assert_called_once_with("/api/cards/card-1/comments", method="POST", body={"text": "Hello"})
        assert result["type"] == "commentCard"
        assert result["data"]["text"] == "Hello"
        assert result["cardId"] == "card-1"
        assert result["updatedAt"] is None

    def test_wraps_api_error(self, manager, mock_client):
        mock_client.request.side_effect = PlankaAPIError("Card not found", status_code=404)

        with pytest.raises(PlankaOperationError, match="Failed to create comment: Card not found"):
            manager.create_comment("card-1", "Hello")

    def test_rejects_non_comment_action(self, manager, mock_client):
        """Only commentCard actions are accepted."""
        payload = comment_payload()
        payload["type"] = "moveCard"
        mock_client.request.return_value = {"item": payload}

        with pytest.raises(PlankaOperationError, match="Failed to create comment"):
            manager.create_comment("card-1", "Hello")


class TestListComments:
    """Tests for list_comments."""

    def test_enveloped_response(self, manager, mock_client):
        mock_client.request.return_value = {
            "items": [comment_payload("c-1", "First"), comment_payload("c-2", "Second")],
            "included": {"users": []},
        }

        result = manager.list_comments("card-1")

        mock_client.request.assert_called_once_with("/api/cards/card-1/comments")
        assert [c["data"]["text"] for c in result] == ["First", "Second"]

    def test_bare_list_response(self, manager, mock_client):
        mock_client.request.return_value = [comment_payload("c-1", "First")]

        assert [c["id"] for c in manager.list_comments("card-1")] == ["c-1"]

    def test_unrecognized_response(self, manager, mock_client):
        mock_client.request.return_value = {"comments": "nope"}

        assert manager.list_comments("card-1") == []

    def test_fetch_failure_returns_empty(self, manager, mock_client):
        mock_client.request.side_effect = PlankaAPIError("Request failed", code="REQUEST_ERROR")

        assert manager.list_comments("card-1") == []

    def test_empty_card(self, manager, mock_client):
        mock_client.request.return_value = {"items": []}

        assert manager.list_comments("card-1") == []


class TestParseCommentList:
    """Tests for parse_comment_list."""

    def test_envelope_first(self):
        comments = parse_comment_list({"items": [comment_payload()]})

        assert comments[0].data.text == "Looks good"

    def test_invalid_item_in_list(self):
        bad = comment_payload()
        del bad["userId"]

        with pytest.raises(ValueError, match="Could not parse comments response"):
            parse_comment_list([bad])


class TestGetComment:
    """Tests for get_comment."""

    def test_finds_comment(self, manager, mock_client):
        mock_client.request.return_value = {"items": [comment_payload("c-1", "First"), comment_payload("c-2", "Second")]}

        result = manager.get_comment("c-2", "card-1")

        assert result["id"] == "c-2"
        assert result["data"]["text"] == "Second"

    def test_not_found_on_empty_card(self, manager, mock_client):
        mock_client.request.return_value = {"items": []}

        with pytest.raises(EntityNotFoundError, match="Comment with ID c-1 not found in card card-1"):
            manager.get_comment("c-1", "card-1")

    def test_requires_card_id(self, manager, mock_client):
        with pytest.raises(MissingContextError):
            manager.get_comment("c-1", "")

        mock_client.request.assert_not_called()


class TestUpdateDeleteComment:
    """Tests for update_comment and delete_comment."""

    def test_update(self, manager, mock_client):
        payload = comment_payload(text="Edited")
        payload["updatedAt"] = "2024-05-02T10:00:00.000Z"
        mock_client.request.return_value = {"item": payload}

        result = manager.update_comment("comment-1", "Edited")

        mock_client.request.assert_called_once_with("/api/comments/comment-1", method="PATCH", body={"text": "Edited"})
        assert result["data"]["text"] == "Edited"
        assert result["updatedAt"] == "2024-05-02T10:00:00.000Z"

    def test_update_wraps_error(self, manager, mock_client):
        mock_client.request.side_effect = PlankaAPIError("Comment not found", status_code=404)

        with pytest.raises(PlankaOperationError, match="Failed to update comment"):
            manager.update_comment("comment-1", "Edited")

    def test_delete(self, manager, mock_client):
        assert manager.delete_comment("comment-1") == {"success": True}

        mock_client.request.assert_called_once_with("/api/comments/comment-1", method="DELETE")

    def test_delete_wraps_error(self, manager, mock_client):
        mock_client.request.side_effect = PlankaAPIError("Forbidden", status_code=403)

        with pytest.raises(PlankaOperationError, match="Failed to delete comment: Forbidden"):
            manager.delete_comment("comment-1")
