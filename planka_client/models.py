"""Entity models used to validate Planka API responses."""

from __future__ import annotations

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PlankaModel(BaseModel):
    """Base model for Planka entities.

    Unknown fields are kept so callers see everything the server returned.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Dump back to the API's camelCase shape."""
        return self.model_dump(by_alias=True)


class TaskList(PlankaModel):
    """A checklist attached to a card."""

    id: str
    name: str
    position: int | float | None = None
    card_id: str | None = Field(default=None, alias="cardId")


class Task(PlankaModel):
    """A checkable item inside a task list."""

    id: str
    name: str
    is_completed: bool = Field(default=False, alias="isCompleted")
    position: int | float | None = None
    task_list_id: str | None = Field(default=None, alias="taskListId")


class CommentData(PlankaModel):
    text: str


class CommentAction(PlankaModel):
    """A card comment, stored by Planka as an action record."""

    id: str
    type: Literal["commentCard"]
    data: CommentData
    card_id: str = Field(alias="cardId")
    user_id: str = Field(alias="userId")
    created_at: str = Field(alias="createdAt")
    updated_at: str | None = Field(alias="updatedAt")


class ItemResponse(BaseModel, Generic[T]):
    """Single-entity envelope: {"item": ..., "included": {...}}."""

    item: T
    included: dict[str, Any] | None = None


class ItemsResponse(BaseModel, Generic[T]):
    """Collection envelope: {"items": [...], "included": {...}}."""

    items: list[T]
    included: dict[str, Any] | None = None
