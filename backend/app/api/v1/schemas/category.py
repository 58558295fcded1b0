from __future__ import annotations

from pydantic import Field

from app.api.v1.schemas.common import RequiredText  # noqa: TCH001
from app.core.models.base import AppBaseModel


class CategoryCreate(AppBaseModel):
    category_name: RequiredText = Field(alias="categoryName", max_length=255)


class CategoryUpdate(AppBaseModel):
    category_name: RequiredText = Field(alias="categoryName", max_length=255)
