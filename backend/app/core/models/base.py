from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict, Field


class AppBaseModel(PydanticBaseModel):
    """Shared config for stored records and API input DTOs.

    Unknown keys are rejected; DTOs accept either the GraphQL argument name
    (alias) or the Python field name.
    """

    model_config = ConfigDict(
        from_attributes=True,
        extra="forbid",
        populate_by_name=True,
    )


class TimestampedModel(AppBaseModel):
    """Stored record: ``created_at`` is fixed on insert, ``updated_at`` is set by the repository on every write."""

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC), description="Insert time (UTC)")
    updated_at: datetime | None = Field(default=None, description="Last update time (UTC)")
