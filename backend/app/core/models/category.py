from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import Field

from .base import TimestampedModel


class Category(TimestampedModel):
    """Top-level grouping; owns notes through ``Note.category_id``."""

    id: UUID = Field(default_factory=uuid4, description="Unique category identifier")
    category_name: str = Field(max_length=255, description="Category name")
