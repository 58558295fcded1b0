from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import Field

from .base import TimestampedModel


class Note(TimestampedModel):
    """Note domain model.

    ``category_id`` is an opaque foreign key; nothing guarantees the category
    still exists, so callers must tolerate dangling references.
    """

    id: UUID = Field(default_factory=uuid4, description="Unique note identifier")

    note_title: str = Field(max_length=255, description="Note title")
    note_body: str = Field(max_length=10000, description="Note body")

    # Ownership
    category_id: str = Field(min_length=1, max_length=255, description="Owning category id (not checked)")

    # Prefer Pydantic v2 model_config for OpenAPI examples
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": str(uuid4()),
                    "note_title": "Dentist Appointment",
                    "note_body": "Monday at 10:00 AM. Don't forget to bring insurance card.",
                    "category_id": str(uuid4()),
                }
            ]
        }
    }
