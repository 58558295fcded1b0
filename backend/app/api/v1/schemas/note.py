from __future__ import annotations

from pydantic import Field

from app.api.v1.schemas.common import ReferenceId, RequiredText  # noqa: TCH001
from app.core.models.base import AppBaseModel


class NoteCreate(AppBaseModel):
    note_title: RequiredText = Field(alias="noteTitle", max_length=255)
    note_body: RequiredText = Field(alias="noteBody", max_length=10000)
    category_id: ReferenceId = Field(alias="categoryId")


class NoteUpdate(AppBaseModel):
    note_title: RequiredText = Field(alias="noteTitle", max_length=255)
    note_body: RequiredText = Field(alias="noteBody", max_length=10000)
