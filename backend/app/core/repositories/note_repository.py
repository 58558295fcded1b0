from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from app.core.models.note import Note


class NoteRepository(ABC):
    """Abstract repository interface for notes.

    Contract used by services and dependency injection. Implementations should
    perform I/O (database, network) and therefore expose async methods.
    """

    @abstractmethod
    async def create(self, note: Note) -> Note:  # pragma: no cover - interface only
        """Persist a new note and return the stored entity."""

    @abstractmethod
    async def get(self, note_id: UUID) -> Note | None:  # pragma: no cover
        """Fetch a note by id or return None if not found."""

    @abstractmethod
    async def list(self, *, limit: int | None = None) -> Sequence[Note]:  # pragma: no cover
        """Return notes in insertion order."""

    @abstractmethod
    async def list_by_category(self, category_id: str) -> Sequence[Note]:  # pragma: no cover
        """Return every note whose ``category_id`` equals the given id."""

    @abstractmethod
    async def update_fields(self, note_id: UUID, changes: dict) -> Note | None:  # pragma: no cover
        """Partially update fields on a note and return the updated entity, or None if missing."""

    @abstractmethod
    async def delete(self, note_id: UUID) -> Note | None:  # pragma: no cover
        """Delete a note by id and return the removed entity, or None if missing."""

    @abstractmethod
    async def delete_by_category(self, category_id: str) -> Sequence[Note]:  # pragma: no cover
        """Delete every note owned by a category and return the removed notes."""
