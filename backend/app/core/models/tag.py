from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import Field, field_validator

from .base import TimestampedModel


class Tag(TimestampedModel):
    """Tag domain model.

    The tag owns the many-to-many link to notes: ``note_ids`` keeps insertion
    order and may contain the same id more than once.
    """

    id: UUID = Field(default_factory=uuid4, description="Unique tag identifier")
    tag_name: str = Field(max_length=50, description="Tag label")
    tag_color: str = Field(max_length=32, description="Display color, e.g. '#fff'")
    note_ids: list[str] = Field(default_factory=list, description="Tagged note ids (not checked)")

    @field_validator("note_ids", mode="before")
    @classmethod
    def validate_note_ids(cls, v: list | None) -> list:
        """Storage may hand back NULL for an empty array."""
        return [] if v is None else v
