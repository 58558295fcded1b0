from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from app.core.models.tag import Tag


class TagRepository(ABC):
    """Abstract repository interface for tags.

    Membership edits (``append_note_id`` / ``remove_note_id``) must be applied
    atomically by the backend so concurrent edits on one tag cannot lose updates.
    """

    @abstractmethod
    async def create(self, tag: Tag) -> Tag:  # pragma: no cover - interface only
        """Persist a new tag and return the stored entity."""

    @abstractmethod
    async def get(self, tag_id: UUID) -> Tag | None:  # pragma: no cover
        """Fetch a tag by id or return None if not found."""

    @abstractmethod
    async def list(self, *, limit: int | None = None) -> Sequence[Tag]:  # pragma: no cover
        """Return tags in insertion order."""

    @abstractmethod
    async def list_by_note(self, note_id: str) -> Sequence[Tag]:  # pragma: no cover
        """Return every tag whose ``note_ids`` contains the given note id."""

    @abstractmethod
    async def update_fields(self, tag_id: UUID, changes: dict) -> Tag | None:  # pragma: no cover
        """Partially update scalar fields and return the updated entity, or None if missing."""

    @abstractmethod
    async def delete(self, tag_id: UUID) -> Tag | None:  # pragma: no cover
        """Delete a tag by id and return the removed entity, or None if missing."""

    @abstractmethod
    async def append_note_id(self, tag_id: UUID, note_id: str) -> Tag | None:  # pragma: no cover
        """Append ``note_id`` to the tag's note ids (duplicates allowed); None if the tag is missing."""

    @abstractmethod
    async def remove_note_id(self, tag_id: UUID, note_id: str) -> Tag | None:  # pragma: no cover
        """Remove every occurrence of ``note_id`` from the tag; None if the tag is missing."""

    @abstractmethod
    async def remove_note_id_everywhere(self, note_id: str) -> int:  # pragma: no cover
        """Strip ``note_id`` from all tags and return how many tags changed."""
