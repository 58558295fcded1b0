from __future__ import annotations

from pydantic import Field, field_validator

from app.api.v1.schemas.common import ReferenceId, RequiredText  # noqa: TCH001
from app.core.models.base import AppBaseModel


class TagCreate(AppBaseModel):
    tag_name: RequiredText = Field(alias="tagName", max_length=50)
    tag_color: RequiredText = Field(alias="tagColor", max_length=32)
    note_ids: list[ReferenceId] = Field(default_factory=list, alias="noteId")

    @field_validator("note_ids", mode="before")
    @classmethod
    def validate_note_ids(cls, v: list | None) -> list:
        # GraphQL `[ID]` allows null for the list and for its items
        if v is None:
            return []
        return [item for item in v if item is not None]


class TagUpdate(AppBaseModel):
    tag_name: RequiredText = Field(alias="tagName", max_length=50)
    tag_color: RequiredText = Field(alias="tagColor", max_length=32)


class TagMembership(AppBaseModel):
    note_id: ReferenceId = Field(alias="noteId")
