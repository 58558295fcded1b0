from __future__ import annotations

from typing import TYPE_CHECKING

from app.core.errors import NotFoundError
from app.core.models.note import Note
from app.core.services.ids import parse_id
from app.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from app.api.v1.schemas.note import NoteCreate, NoteUpdate
    from app.core.repositories.note_repository import NoteRepository
    from app.core.repositories.tag_repository import TagRepository

logger = get_logger(__name__)


class NoteService:
    """Service for notes.

    The owning category is not checked on create; notes may point at a
    category that does not (or no longer) exist.
    """

    def __init__(self, repo: NoteRepository, tags: TagRepository, *, cascade: bool = False) -> None:
        self._repo = repo
        self._tags = tags
        self._cascade = cascade

    async def create_note(self, create_dto: NoteCreate) -> Note:
        note = Note(
            note_title=create_dto.note_title,
            note_body=create_dto.note_body,
            category_id=create_dto.category_id,
        )
        created = await self._repo.create(note)
        logger.info(
            "Note created",
            extra={"note_id": str(created.id), "category_id": str(created.category_id)},
        )
        return created

    async def get_note(self, note_id: str | UUID | None) -> Note | None:
        parsed = parse_id(note_id)
        if parsed is None:
            return None
        return await self._repo.get(parsed)

    async def list_notes(self) -> Sequence[Note]:
        return await self._repo.list()

    async def list_notes_for_category(self, category_id: str | UUID) -> Sequence[Note]:
        """Match on the stored reference verbatim; the category need not exist."""
        return await self._repo.list_by_category(str(category_id))

    async def update_note(self, note_id: str | UUID, update_dto: NoteUpdate) -> Note:
        """Replace title and body; the owning category is left untouched."""
        parsed = parse_id(note_id)
        changes = {"note_title": update_dto.note_title, "note_body": update_dto.note_body}
        updated = await self._repo.update_fields(parsed, changes) if parsed is not None else None
        if updated is None:
            raise NotFoundError("Note", note_id)
        logger.info("Note updated", extra={"note_id": str(parsed)})
        return updated

    async def delete_note(self, note_id: str | UUID) -> Note:
        parsed = parse_id(note_id)
        existing = await self._repo.get(parsed) if parsed is not None else None
        if existing is None:
            raise NotFoundError("Note", note_id)

        # Strip tag references before the note so a failure leaves it retrievable
        tags_changed = 0
        if self._cascade:
            tags_changed = await self._tags.remove_note_id_everywhere(str(existing.id))

        removed = await self._repo.delete(existing.id)
        if removed is None:
            raise NotFoundError("Note", note_id)
        logger.info(
            "Note deleted",
            extra={"note_id": str(removed.id), "cascade": self._cascade, "tags_changed": tags_changed},
        )
        return removed
